"""Deck builder command line."""

import logging
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape

import deck
from config.settings import (
    DEFAULT_CONFIG,
    Config,
    DeckConfig,
    build_options,
    load_config,
    save_config,
)
from simulation.runner import run_shuffle_trials
from ui.display import render_deck, render_stats
from utils.log import setup_logging

app = typer.Typer(
    name="deck-builder",
    help="Build, order and shuffle decks of playing cards.",
)
console = Console()
logger = logging.getLogger(__name__)


def _load(config_path: Path | None) -> Config:
    if config_path is None:
        return Config()
    try:
        return load_config(config_path)
    except (FileNotFoundError, ValueError, TypeError) as e:
        console.print(f"[red]Could not load config: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _pipeline_from_flags(
    exclude_rank: list[str],
    exclude_suit: list[str],
    jokers: int,
    decks: int,
    sort: bool,
    shuffle: bool,
    seed: int | None,
) -> list[dict[str, Any]]:
    """Fixed order: exclude, jokers, decks, sort, shuffle."""
    pipeline: list[dict[str, Any]] = []
    if exclude_rank or exclude_suit:
        pipeline.append({"filter": {"ranks": exclude_rank, "suits": exclude_suit}})
    if jokers:
        pipeline.append({"jokers": jokers})
    if decks != 1:
        pipeline.append({"decks": decks})
    if sort:
        pipeline.append({"sort": "default"})
    if shuffle or seed is not None:
        pipeline.append({"shuffle": {"seed": seed}})
    return pipeline


@app.command("build")
def build_deck(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML recipe with a deck pipeline"),
    exclude_rank: Optional[list[str]] = typer.Option(None, "--exclude-rank", "-r", help="Rank to remove (repeatable)"),
    exclude_suit: Optional[list[str]] = typer.Option(None, "--exclude-suit", "-x", help="Suit to remove (repeatable)"),
    jokers: int = typer.Option(0, "--jokers", "-j", min=0, help="Number of jokers to add"),
    decks: int = typer.Option(1, "--decks", "-d", min=0, help="Number of deck copies"),
    sort: bool = typer.Option(False, "--sort/--no-sort", help="Apply the default sort"),
    shuffle: bool = typer.Option(False, "--shuffle", help="Shuffle the deck"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Shuffle seed (implies --shuffle)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log each applied option"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to this file"),
) -> None:
    """Build a deck and print it, top card first."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING, log_file)

    if config_path is not None:
        deck_config = _load(config_path).deck
    else:
        deck_config = DeckConfig(
            pipeline=_pipeline_from_flags(
                exclude_rank or [],
                exclude_suit or [],
                jokers,
                decks,
                sort,
                shuffle,
                seed,
            )
        )

    try:
        options = build_options(deck_config)
    except ValueError as e:
        console.print(f"[red]Invalid pipeline: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    logger.info("Building deck with %d options", len(options))
    cards = deck.build(*options)

    console.print(render_deck(cards))
    console.print(f"\n[bold]{len(cards)} cards[/bold]")


@app.command()
def stats(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML file with a stats section"),
    trials: Optional[int] = typer.Option(None, "--trials", "-t", min=1, help="Number of shuffles"),
    size: Optional[int] = typer.Option(None, "--size", "-n", min=1, help="Number of cards shuffled"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    plot: Optional[Path] = typer.Option(None, "--plot", "-p", help="Save a positional frequency heatmap"),
    no_progress: bool = typer.Option(False, "--no-progress", help="Hide the progress bar"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Check shuffle uniformity over many trials."""
    setup_logging(logging.INFO if verbose else logging.WARNING)

    stats_config = _load(config_path).stats
    trials = trials if trials is not None else stats_config.trials
    size = size if size is not None else stats_config.deck_size
    seed = seed if seed is not None else stats_config.seed

    console.print("\n[bold blue]Shuffle Statistics[/bold blue]")
    console.print("=" * 50)
    console.print(f"Cards: [cyan]{size}[/cyan]  Trials: [cyan]{trials:,}[/cyan]  Seed: [cyan]{seed}[/cyan]")

    result = run_shuffle_trials(size, trials, seed=seed, show_progress=not no_progress)
    console.print(render_stats(result))

    if plot is not None:
        result.plot_heatmap(save_path=plot)
        console.print(f"Saved heatmap to {plot}")


@app.command("init-config")
def init_config(
    path: Path = typer.Argument(..., help="Where to write the YAML file"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write the default configuration as YAML."""
    if path.exists() and not force:
        console.print(f"[yellow]{path} already exists (use --force to overwrite)[/yellow]")
        raise typer.Exit(1)

    save_config(DEFAULT_CONFIG, path)
    console.print(f"[green]Wrote default config to {path}[/green]")


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
