"""Composable deck-of-cards construction."""

from deck.builder import build, new_deck
from deck.cards import DECK_SIZE, MAX_RANK, MIN_RANK, SUITS, Card, Rank, Suit
from deck.options import (
    CustomSort,
    DeckOption,
    DefaultSort,
    Filter,
    Jokers,
    MultiplyDeck,
    Shuffle,
    less,
    sort_key,
)

__all__ = [
    "build",
    "new_deck",
    "Card",
    "Rank",
    "Suit",
    "SUITS",
    "MIN_RANK",
    "MAX_RANK",
    "DECK_SIZE",
    "DeckOption",
    "DefaultSort",
    "CustomSort",
    "Shuffle",
    "Jokers",
    "Filter",
    "MultiplyDeck",
    "less",
    "sort_key",
]
