"""Card, Suit, and Rank definitions for deck building."""

from dataclasses import dataclass
from enum import IntEnum


class Suit(IntEnum):
    """Card suits, in base deck order.

    JOKER is a sentinel for non-standard cards, not a playing suit.
    """

    SPADE = 0
    DIAMOND = 1
    CLUB = 2
    HEART = 3
    JOKER = 4

    def __str__(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, text: str) -> "Suit":
        """Parse a suit from a name ("heart", "Hearts") or letter ("h")."""
        s = text.strip().upper()
        letters = {"S": cls.SPADE, "D": cls.DIAMOND, "C": cls.CLUB, "H": cls.HEART, "J": cls.JOKER}
        if s in letters:
            return letters[s]
        if s.endswith("S") and s[:-1] in cls.__members__:
            s = s[:-1]
        if s in cls.__members__:
            return cls[s]
        raise ValueError(f"Invalid suit: {text}")


class Rank(IntEnum):
    """Card ranks (1-13, where 1 is Ace)."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, text: str) -> "Rank":
        """Parse a rank from a name ("queen"), symbol ("Q", "T") or number ("12")."""
        symbol_map = {
            "A": cls.ACE,
            "T": cls.TEN,
            "J": cls.JACK,
            "Q": cls.QUEEN,
            "K": cls.KING,
        }
        s = text.strip().upper()
        if s in symbol_map:
            return symbol_map[s]
        if s.isdigit() and MIN_RANK <= int(s) <= MAX_RANK:
            return cls(int(s))
        if s in cls.__members__:
            return cls[s]
        raise ValueError(f"Invalid rank: {text}")


MIN_RANK = Rank.ACE
MAX_RANK = Rank.KING

# Playing suits only; JOKER never appears in a base deck.
SUITS = (Suit.SPADE, Suit.DIAMOND, Suit.CLUB, Suit.HEART)

DECK_SIZE = len(SUITS) * len(Rank)


@dataclass(frozen=True, slots=True)
class Card:
    """A single playing card.

    For joker cards ``rank`` is a plain integer index that only tells
    jokers apart; it has no playing meaning.
    """

    rank: Rank | int
    suit: Suit

    @classmethod
    def joker(cls, index: int) -> "Card":
        """Create the joker tagged with ``index``."""
        return cls(rank=index, suit=Suit.JOKER)

    @property
    def is_joker(self) -> bool:
        return self.suit == Suit.JOKER

    def __str__(self) -> str:
        if self.is_joker:
            return str(self.suit)
        return f"{Rank(self.rank)} of {self.suit}s"

    def __repr__(self) -> str:
        if self.is_joker:
            return f"Card(JOKER, {self.rank})"
        return f"Card({Rank(self.rank).name}, {self.suit.name})"
