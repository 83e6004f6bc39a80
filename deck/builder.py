"""Deck construction entry point."""

import logging
from typing import Callable

from deck.cards import SUITS, Card, Rank
from deck.options import DeckOption

logger = logging.getLogger(__name__)

Option = DeckOption | Callable[[list[Card]], list[Card]]


def new_deck() -> list[Card]:
    """Return the standard 52 cards, suit-major, Ace to King within a suit."""
    return [Card(rank=rank, suit=suit) for suit in SUITS for rank in Rank]


def build(*options: Option) -> list[Card]:
    """Build a deck, applying ``options`` in the order given.

    Args:
        options: DeckOption instances or plain ``list[Card] -> list[Card]``
            callables.

    Returns:
        The final list of cards.
    """
    cards = new_deck()
    for option in options:
        before = len(cards)
        cards = option(cards)
        logger.debug("Applied %r: %d -> %d cards", option, before, len(cards))
    return cards
