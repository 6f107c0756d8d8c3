"""Exception types raised by the deckhand package."""

from __future__ import annotations

__all__ = [
    "DeckhandError",
    "CardParseError",
    "CardIndexError",
    "DeckParseError",
    "DeckSerializationError",
]


class DeckhandError(Exception):
    """Base class for every error raised by deckhand."""


class CardParseError(DeckhandError, ValueError):
    """Raised when a rank, suit, colour or card token cannot be parsed."""

    def __init__(self, message: str, fragment: str) -> None:
        super().__init__(message)
        self.fragment = fragment


class CardIndexError(DeckhandError, ValueError):
    """Raised when a dense card index falls outside ``[0, 56)``."""

    def __init__(self, value: int) -> None:
        super().__init__(f"card index {value} out of range")
        self.value = value


class DeckParseError(DeckhandError, ValueError):
    """Raised when delimited text or CSV input contains a malformed entry."""

    def __init__(self, message: str, token: str, line: int | None = None) -> None:
        super().__init__(message)
        self.token = token
        self.line = line


class DeckSerializationError(DeckhandError):
    """Raised when JSON or YAML payloads cannot be encoded or decoded."""
