"""Top-level package for the deckhand playing-card library."""

from . import cards, comparators, deck, encoding, factories, serialization
from .cards import Card, Color, Rank, Suit
from .comparators import (
    AceLowComparator,
    BridgeComparator,
    CardComparator,
    StandardComparator,
    TrumpComparator,
)
from .deck import Deck
from .errors import (
    CardIndexError,
    CardParseError,
    DeckhandError,
    DeckParseError,
    DeckSerializationError,
)
from .factories import DeckFactory, Pinochle48, Standard52, Standard54

__all__ = [
    "cards",
    "comparators",
    "deck",
    "encoding",
    "factories",
    "serialization",
    "Card",
    "Color",
    "Rank",
    "Suit",
    "CardComparator",
    "StandardComparator",
    "AceLowComparator",
    "BridgeComparator",
    "TrumpComparator",
    "Deck",
    "DeckFactory",
    "Standard52",
    "Standard54",
    "Pinochle48",
    "DeckhandError",
    "CardParseError",
    "CardIndexError",
    "DeckParseError",
    "DeckSerializationError",
]
