"""Card creation utilities for testing."""

from deck.cards import Card, Rank, Suit

RANK_MAP = {
    "A": Rank.ACE,
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "T": Rank.TEN,
    "10": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
}

SUIT_MAP = {"s": Suit.SPADE, "d": Suit.DIAMOND, "c": Suit.CLUB, "h": Suit.HEART}


def card_from_string(s: str) -> Card:
    """Create a card from a string like 'As', 'Th', '10d' or 'Joker2'."""
    if s.lower().startswith("joker"):
        return Card.joker(int(s[5:] or 0))
    return Card(rank=RANK_MAP[s[:-1].upper()], suit=SUIT_MAP[s[-1].lower()])


def make_cards_from_strings(card_strings: list[str]) -> list[Card]:
    """Create a list of cards from strings like ['As', 'Kh', 'Joker0']."""
    return [card_from_string(s) for s in card_strings]
