"""Configuration settings for deck recipes and shuffle statistics."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from deck.cards import Rank, Suit
from deck.options import DeckOption, DefaultSort, Filter, Jokers, MultiplyDeck, Shuffle


def _default_pipeline() -> list[dict[str, Any]]:
    return [{"sort": "default"}]


@dataclass
class DeckConfig:
    """Ordered deck construction pipeline.

    Each step is a one-key mapping, e.g. ``{"jokers": 2}`` or
    ``{"shuffle": {"seed": 42}}``.
    """

    pipeline: list[dict[str, Any]] = field(default_factory=_default_pipeline)


@dataclass
class StatsConfig:
    """Shuffle statistics configuration."""

    trials: int = 10_000
    seed: int | None = None
    deck_size: int = 52


@dataclass
class Config:
    """Complete configuration."""

    deck: DeckConfig = field(default_factory=DeckConfig)
    stats: StatsConfig = field(default_factory=StatsConfig)


def _mapping(name: str, value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"'{name}' step takes a mapping, got {value!r}")
    return value


def _names(name: str, key: str, value: Any) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'{name}.{key}' must be a list, got {value!r}")
    return value


def _count(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{name}' step takes an integer, got {value!r}")
    return value


def _filter_step(value: Any) -> Filter:
    params = _mapping("filter", value)
    ranks = {Rank.parse(str(r)) for r in _names("filter", "ranks", params.get("ranks"))}
    suits = {Suit.parse(str(s)) for s in _names("filter", "suits", params.get("suits"))}

    def excluded(card) -> bool:
        if card.is_joker:
            return False
        return card.rank in ranks or card.suit in suits

    return Filter(excluded)


def _shuffle_step(value: Any) -> Shuffle:
    seed = _mapping("shuffle", value).get("seed")
    if seed is not None:
        seed = _count("shuffle.seed", seed)
    return Shuffle(seed=seed)


def _sort_step(value: Any) -> DefaultSort:
    if value != "default":
        raise ValueError(f"Unknown sort: {value!r} (only 'default' is supported)")
    return DefaultSort()


STEP_BUILDERS = {
    "filter": _filter_step,
    "jokers": lambda n: Jokers(_count("jokers", n)),
    "decks": lambda n: MultiplyDeck(_count("decks", n)),
    "sort": _sort_step,
    "shuffle": _shuffle_step,
}


def build_options(deck_config: DeckConfig) -> list[DeckOption]:
    """Translate pipeline steps into deck options, keeping their order.

    Raises:
        ValueError: If the pipeline or one of its steps is malformed
    """
    if not isinstance(deck_config.pipeline, list):
        raise ValueError(f"Pipeline must be a list of steps, got {deck_config.pipeline!r}")

    options = []
    for step in deck_config.pipeline:
        if not isinstance(step, dict) or len(step) != 1:
            raise ValueError(f"Pipeline step must be a single-key mapping: {step!r}")
        name, value = next(iter(step.items()))
        if name not in STEP_BUILDERS:
            raise ValueError(f"Unknown pipeline step: {name}")
        options.append(STEP_BUILDERS[name](value))
    return options


def load_config(path: str | Path) -> Config:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    config = Config()

    if "deck" in data:
        config.deck = DeckConfig(**data["deck"])
    if "stats" in data:
        config.stats = StatsConfig(**data["stats"])

    return config


def save_config(config: Config, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "deck": {
            "pipeline": [dict(step) for step in config.deck.pipeline],
        },
        "stats": {
            "trials": config.stats.trials,
            "seed": config.stats.seed,
            "deck_size": config.stats.deck_size,
        },
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Default configuration
DEFAULT_CONFIG = Config()
