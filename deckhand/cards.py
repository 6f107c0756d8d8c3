"""Card abstractions and helpers."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Final

from .errors import CardIndexError, CardParseError

__all__ = [
    "Color",
    "Suit",
    "Rank",
    "Card",
    "SUITS",
    "RED_SUITS",
    "BLACK_SUITS",
    "ALL_RANKS",
    "STANDARD_RANKS",
]


class Color(int, Enum):
    """Colour of a suit, ordered red before black."""

    RED = 0
    BLACK = 1

    def __str__(self) -> str:
        return self.symbol

    @property
    def symbol(self) -> str:
        """Return the one-letter display form ("R" or "B")."""

        return self.name[0]

    @classmethod
    def parse(cls, text: str) -> "Color":
        """Parse a colour from its letter or full name."""

        token = text.strip().upper()
        for color in cls:
            if token in (color.name, color.symbol):
                return color
        raise CardParseError(f"unknown color {text!r}", fragment=text)


class Suit(int, Enum):
    """The four suits in declaration order; the value is the dense index."""

    HEARTS = 0
    DIAMONDS = 1
    CLUBS = 2
    SPADES = 3

    def __str__(self) -> str:
        return self.symbol

    @property
    def symbol(self) -> str:
        """Return the Unicode suit symbol."""

        return _SUIT_SYMBOLS[self]

    @property
    def letter(self) -> str:
        return self.name[0]

    @property
    def tag(self) -> str:
        """Return the variant name used by structured encodings."""

        return self.name.title()

    @property
    def color(self) -> Color:
        return Color.RED if self in (Suit.HEARTS, Suit.DIAMONDS) else Color.BLACK

    @property
    def is_red(self) -> bool:
        return self.color is Color.RED

    @property
    def is_black(self) -> bool:
        return self.color is Color.BLACK

    @classmethod
    def parse(cls, text: str) -> "Suit":
        """Parse a suit from its full name, single letter or symbol."""

        suit = _lookup_suit(text)
        if suit is None:
            raise CardParseError(f"unknown suit {text!r}", fragment=text)
        return suit


class Rank(int, Enum):
    """Card ranks ordered Two low through Ace, with Joker highest."""

    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12
    JOKER = 13

    def __str__(self) -> str:
        return self.symbol

    @property
    def symbol(self) -> str:
        """Return the single-character rank symbol."""

        return _RANK_SYMBOLS[self.value]

    @property
    def tag(self) -> str:
        """Return the variant name used by structured encodings."""

        return self.name.title()

    @classmethod
    def parse(cls, text: str) -> "Rank":
        """Parse a rank from its symbol, "10", or full name."""

        rank = _lookup_rank(text)
        if rank is None:
            raise CardParseError(f"unknown rank {text!r}", fragment=text)
        return rank


_SUIT_SYMBOLS: Final[dict[Suit, str]] = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}
_RANK_SYMBOLS: Final[str] = "23456789TJQKAU"

SUITS: Final[tuple[Suit, ...]] = tuple(Suit)
RED_SUITS: Final[tuple[Suit, ...]] = (Suit.HEARTS, Suit.DIAMONDS)
BLACK_SUITS: Final[tuple[Suit, ...]] = (Suit.CLUBS, Suit.SPADES)
ALL_RANKS: Final[tuple[Rank, ...]] = tuple(Rank)
STANDARD_RANKS: Final[tuple[Rank, ...]] = tuple(rank for rank in Rank if rank is not Rank.JOKER)

_SUIT_ALIASES: Final[dict[str, Suit]] = {
    alias: suit for suit in Suit for alias in (suit.name, suit.letter, suit.symbol)
}

_RANK_ALIASES: Final[dict[str, Rank]] = {
    **{alias: rank for rank in Rank for alias in (rank.name, rank.symbol)},
    "10": Rank.TEN,
}


def _lookup_suit(text: str) -> Suit | None:
    return _SUIT_ALIASES.get(text.strip().upper())


def _lookup_rank(text: str) -> Rank | None:
    return _RANK_ALIASES.get(text.strip().upper())


_FACE_RANKS: Final[frozenset[Rank]] = frozenset({Rank.JACK, Rank.QUEEN, Rank.KING})
_RANKS_PER_SUIT: Final[int] = len(ALL_RANKS)
CARD_INDEX_LIMIT: Final[int] = len(SUITS) * _RANKS_PER_SUIT


@dataclass(frozen=True, slots=True, order=True, repr=False)
class Card:
    """Value object describing a single playing card.

    Equality, hashing and ordering all come from the ``(suit, rank)`` pair,
    so cards sort by suit first and rank second unless a comparator is used.
    """

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        if not isinstance(self.suit, Suit):
            raise TypeError(f"suit must be a Suit, got {self.suit!r}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"rank must be a Rank, got {self.rank!r}")

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.symbol}"

    def __repr__(self) -> str:
        return f"Card({self})"

    def __int__(self) -> int:
        return self.to_index()

    @property
    def color(self) -> Color:
        return self.suit.color

    @property
    def is_ace(self) -> bool:
        return self.rank is Rank.ACE

    @property
    def is_face_card(self) -> bool:
        """Return ``True`` for Jacks, Queens and Kings."""

        return self.rank in _FACE_RANKS

    @property
    def is_value_card(self) -> bool:
        """Return ``True`` for the numbered ranks Two through Ten."""

        return Rank.TWO <= self.rank <= Rank.TEN

    @property
    def is_joker(self) -> bool:
        return self.rank is Rank.JOKER

    def is_same_rank(self, other: Card) -> bool:
        return self.rank is other.rank

    def is_same_suit(self, other: Card) -> bool:
        return self.suit is other.suit

    def is_same_color(self, other: Card) -> bool:
        return self.color is other.color

    def to_index(self) -> int:
        """Return the dense identifier ``suit * 14 + rank``."""

        return self.suit.value * _RANKS_PER_SUIT + self.rank.value

    @classmethod
    def from_index(cls, value: int) -> "Card":
        """Decode a dense identifier in ``[0, 56)`` into a card."""

        value = operator.index(value)
        if not 0 <= value < CARD_INDEX_LIMIT:
            raise CardIndexError(value)
        suit_idx, rank_idx = divmod(value, _RANKS_PER_SUIT)
        return cls(Suit(suit_idx), Rank(rank_idx))

    @classmethod
    def parse(cls, text: str) -> "Card":
        """Parse a card written rank-first or suit-first.

        Every split point is probed from left to right. At each split the
        head is first tried as a suit and the tail as a rank, then the other
        way round; the first pair that parses wins.
        """

        token = text.strip()
        for split in range(1, len(token)):
            head, tail = token[:split], token[split:]
            suit, rank = _lookup_suit(head), _lookup_rank(tail)
            if suit is not None and rank is not None:
                return cls(suit, rank)
            rank, suit = _lookup_rank(head), _lookup_suit(tail)
            if suit is not None and rank is not None:
                return cls(suit, rank)
        raise CardParseError(f"cannot parse card from {text!r}", fragment=text)

    def display_ascii(self) -> str:
        """Return a five-line box drawing of the card face."""

        rank = self.rank.symbol
        return "\n".join(
            (
                "┌─────┐",
                f"│{rank}    │",
                f"│  {self.suit.symbol}  │",
                f"│    {rank}│",
                "└─────┘",
            )
        )
