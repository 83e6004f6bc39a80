"""Deck construction options.

Every option is a pure transformation from one list of cards to a new
list. Options are applied by :func:`deck.builder.build` in the order the
caller gives them, so ``Jokers(2)`` followed by ``Shuffle()`` mixes the
jokers in, while the reverse leaves them on the bottom.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cmp_to_key
from random import Random
from typing import Callable

from deck.cards import MAX_RANK, MIN_RANK, Card

LessFunc = Callable[[int, int], bool]
LessFactory = Callable[[list[Card]], LessFunc]

# Process-wide source for Shuffle options built without a seed or rng.
_default_rng = Random()


def sort_key(card: Card) -> int:
    """Absolute position of a card in a sorted deck.

    Index = suit * 13 + (rank - 1), so the base deck maps onto 0-51.
    A joker's rank is already a zero-based index, which puts jokers at
    52 and up.
    """
    rank_index = card.rank if card.is_joker else card.rank - MIN_RANK
    return int(card.suit) * int(MAX_RANK) + int(rank_index)


def less(cards: list[Card]) -> LessFunc:
    """Comparator factory matching DefaultSort, for use with CustomSort."""

    def _less(i: int, j: int) -> bool:
        return sort_key(cards[i]) < sort_key(cards[j])

    return _less


class DeckOption(ABC):
    """Abstract base class for deck construction options."""

    @abstractmethod
    def apply(self, cards: list[Card]) -> list[Card]:
        """Return a new deck built from ``cards``.

        Implementations must not mutate ``cards``.
        """
        ...

    def __call__(self, cards: list[Card]) -> list[Card]:
        return self.apply(cards)


@dataclass(frozen=True)
class DefaultSort(DeckOption):
    """Stable sort by suit, then rank. Jokers go last."""

    def apply(self, cards: list[Card]) -> list[Card]:
        return sorted(cards, key=sort_key)


@dataclass(frozen=True)
class CustomSort(DeckOption):
    """Stable sort using a caller supplied less-than relation.

    ``less_factory`` receives the deck and returns ``less(i, j)`` over
    positions in that deck, the same shape as :func:`less`.
    """

    less_factory: LessFactory

    def apply(self, cards: list[Card]) -> list[Card]:
        is_less = self.less_factory(cards)

        def compare(i: int, j: int) -> int:
            if is_less(i, j):
                return -1
            if is_less(j, i):
                return 1
            return 0

        order = sorted(range(len(cards)), key=cmp_to_key(compare))
        return [cards[i] for i in order]


class Shuffle(DeckOption):
    """Uniformly random permutation of the deck.

    The random source is, in order of preference: ``rng`` if given, a
    private ``Random(seed)`` if a seed is given, otherwise the shared
    module-level source seeded at import time. ``seed`` is ignored when
    ``rng`` is given. The shared source is not safe to use from several
    threads at once.
    """

    def __init__(self, seed: int | None = None, rng: Random | None = None) -> None:
        if rng is not None:
            self.rng = rng
            seed = None
        elif seed is not None:
            self.rng = Random(seed)
        else:
            self.rng = _default_rng
        self.seed = seed

    def permutation(self, n: int) -> list[int]:
        """Draw a permutation of ``range(n)`` (Fisher-Yates)."""
        perm = list(range(n))
        self.rng.shuffle(perm)
        return perm

    def apply(self, cards: list[Card]) -> list[Card]:
        perm = self.permutation(len(cards))
        return [cards[j] for j in perm]

    def __repr__(self) -> str:
        if self.seed is not None:
            return f"Shuffle(seed={self.seed})"
        return "Shuffle()"


@dataclass(frozen=True)
class Jokers(DeckOption):
    """Append ``count`` jokers tagged 0..count-1. Expects ``count >= 0``."""

    count: int

    def apply(self, cards: list[Card]) -> list[Card]:
        return cards + [Card.joker(i) for i in range(self.count)]


@dataclass(frozen=True)
class Filter(DeckOption):
    """Drop every card for which ``predicate`` returns True."""

    predicate: Callable[[Card], bool]

    def apply(self, cards: list[Card]) -> list[Card]:
        return [card for card in cards if not self.predicate(card)]


@dataclass(frozen=True)
class MultiplyDeck(DeckOption):
    """Concatenate ``count`` copies of the deck. Expects ``count >= 1``."""

    count: int

    def apply(self, cards: list[Card]) -> list[Card]:
        return [card for _ in range(self.count) for card in cards]
