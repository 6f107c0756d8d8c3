"""Deck factories producing initial card sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Protocol, runtime_checkable

from .cards import SUITS, STANDARD_RANKS, Card, Rank, Suit

__all__ = ["DeckFactory", "Standard52", "Standard54", "Pinochle48"]


@runtime_checkable
class DeckFactory(Protocol):
    """Anything with a ``generate`` method returning cards in deck order."""

    def generate(self) -> list[Card]:  # pragma: no cover - protocol only
        ...


@dataclass(frozen=True, slots=True)
class Standard52:
    """Thirteen ranks by four suits, rank-major (all Twos first, Aces last)."""

    def generate(self) -> list[Card]:
        return [Card(suit, rank) for rank in STANDARD_RANKS for suit in SUITS]


_JOKER_SUITS: Final[tuple[Suit, Suit]] = (Suit.HEARTS, Suit.SPADES)


@dataclass(frozen=True, slots=True)
class Standard54:
    """A standard 52-card deck followed by a red and a black Joker."""

    def generate(self) -> list[Card]:
        cards = Standard52().generate()
        cards.extend(Card(suit, Rank.JOKER) for suit in _JOKER_SUITS)
        return cards


_PINOCHLE_RANKS: Final[tuple[Rank, ...]] = (
    Rank.NINE,
    Rank.TEN,
    Rank.JACK,
    Rank.QUEEN,
    Rank.KING,
    Rank.ACE,
)


@dataclass(frozen=True, slots=True)
class Pinochle48:
    """Two copies of Nine through Ace in every suit."""

    def generate(self) -> list[Card]:
        return [
            Card(suit, rank)
            for _ in range(2)
            for suit in SUITS
            for rank in _PINOCHLE_RANKS
        ]
