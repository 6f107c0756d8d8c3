"""Dense integer encoding utilities for cards.

A card identifier is ``suit * 14 + rank`` with suits numbered Hearts=0,
Diamonds=1, Clubs=2, Spades=3 and ranks Two=0 through Ace=12, Joker=13.
Every suit reserves a Joker slot, so the identifier space is ``[0, 56)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, Iterable, Sequence

import numpy as np

from .cards import ALL_RANKS, CARD_INDEX_LIMIT, Card

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from numpy.typing import NDArray

    UInt8Array = NDArray[np.uint8]

__all__ = [
    "RANKS_PER_SUIT",
    "CARD_ID_COUNT",
    "encode_card",
    "decode_card",
    "encode_cards",
    "decode_cards",
    "cards_to_array",
]

RANKS_PER_SUIT: Final[int] = len(ALL_RANKS)
CARD_ID_COUNT: Final[int] = CARD_INDEX_LIMIT


def encode_card(card: Card) -> int:
    """Return the dense identifier for ``card``."""

    return card.to_index()


def decode_card(card_identifier: int) -> Card:
    """Decode a dense identifier, raising ``CardIndexError`` when out of range."""

    return Card.from_index(card_identifier)


def encode_cards(cards: Iterable[Card]) -> list[int]:
    """Return the identifiers for ``cards`` in order."""

    return [card.to_index() for card in cards]


def decode_cards(values: Iterable[int]) -> list[Card]:
    """Decode every identifier in ``values``.

    Decoding is all-or-nothing: the first invalid identifier raises and no
    partial list is returned.
    """

    return [Card.from_index(value) for value in values]


def cards_to_array(cards: Sequence[Card]) -> "UInt8Array":
    """Return the identifiers for ``cards`` as a ``uint8`` numpy array."""

    return np.fromiter((card.to_index() for card in cards), dtype=np.uint8, count=len(cards))
