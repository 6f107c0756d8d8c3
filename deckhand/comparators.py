"""Pluggable card ordering strategies."""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Final

from .cards import Card, Rank, Suit

__all__ = [
    "CardComparator",
    "StandardComparator",
    "AceLowComparator",
    "BridgeComparator",
    "TrumpComparator",
]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class CardComparator(ABC):
    """Base class for card ordering rules.

    Subclasses supply ``rank_weight`` and optionally ``suit_weight``; the
    default ``compare`` orders by rank weight and breaks ties on suit weight.
    Games with non-additive rules override ``compare`` as a whole.
    """

    @abstractmethod
    def rank_weight(self, rank: Rank) -> int:
        """Return the ordering weight of ``rank``."""

    def suit_weight(self, suit: Suit) -> int:
        """Return the ordering weight of ``suit``; suits are equal by default."""

        return 0

    def compare(self, a: Card, b: Card) -> int:
        """Return a negative, zero or positive value as ``a`` is below, equal to or above ``b``."""

        rank_delta = self.rank_weight(a.rank) - self.rank_weight(b.rank)
        if rank_delta:
            return _sign(rank_delta)
        return _sign(self.suit_weight(a.suit) - self.suit_weight(b.suit))

    def is_greater(self, a: Card, b: Card) -> bool:
        return self.compare(a, b) > 0

    def is_less(self, a: Card, b: Card) -> bool:
        return self.compare(a, b) < 0

    def max(self, a: Card, b: Card) -> Card:
        """Return the higher card, or ``a`` when they tie."""

        return a if self.compare(a, b) >= 0 else b

    def min(self, a: Card, b: Card) -> Card:
        """Return the lower card, or ``a`` when they tie."""

        return a if self.compare(a, b) <= 0 else b

    @property
    def key(self) -> Callable[[Card], Any]:
        """Return a sort key usable with ``sorted`` and ``list.sort``."""

        return functools.cmp_to_key(self.compare)


class StandardComparator(CardComparator):
    """Ace high, Joker highest, suits equal."""

    def rank_weight(self, rank: Rank) -> int:
        return rank.value


_ACE_LOW_WEIGHTS: Final[dict[Rank, int]] = {
    Rank.ACE: 1,
    **{rank: rank.value + 2 for rank in Rank if rank not in (Rank.ACE, Rank.JOKER)},
    Rank.JOKER: 14,
}


class AceLowComparator(CardComparator):
    """Ace below Two, Joker still highest. Useful for lowball games."""

    def rank_weight(self, rank: Rank) -> int:
        return _ACE_LOW_WEIGHTS[rank]


_BRIDGE_SUIT_WEIGHTS: Final[dict[Suit, int]] = {
    Suit.CLUBS: 1,
    Suit.DIAMONDS: 2,
    Suit.HEARTS: 3,
    Suit.SPADES: 4,
}


class BridgeComparator(CardComparator):
    """Standard ranks with suits ordered Clubs < Diamonds < Hearts < Spades."""

    def rank_weight(self, rank: Rank) -> int:
        return rank.value

    def suit_weight(self, suit: Suit) -> int:
        return _BRIDGE_SUIT_WEIGHTS[suit]


@dataclass(frozen=True, slots=True)
class TrumpComparator(CardComparator):
    """Any card of the trump suit outranks every non-trump card."""

    trump: Suit

    def rank_weight(self, rank: Rank) -> int:
        return rank.value

    def compare(self, a: Card, b: Card) -> int:
        a_trump = a.suit is self.trump
        b_trump = b.suit is self.trump
        if a_trump != b_trump:
            return 1 if a_trump else -1
        return _sign(self.rank_weight(a.rank) - self.rank_weight(b.rank))
