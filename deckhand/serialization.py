"""Text, JSON, YAML and CSV adapters for card sequences."""

from __future__ import annotations

import csv
import io
import json
from typing import Any, Final, Iterable

import yaml

from .cards import Card, Rank, Suit
from .errors import CardParseError, DeckParseError, DeckSerializationError
from .log import get_logger

__all__ = [
    "CSV_HEADER",
    "cards_to_text",
    "cards_from_text",
    "cards_to_payload",
    "cards_from_payload",
    "cards_to_json",
    "cards_from_json",
    "cards_to_yaml",
    "cards_from_yaml",
    "cards_to_csv",
    "cards_from_csv",
]

logger = get_logger(__name__)

CSV_HEADER: Final[tuple[str, str]] = ("Rank", "Suit")
_SUIT_TAGS: Final[dict[str, Suit]] = {suit.tag: suit for suit in Suit}
_RANK_TAGS: Final[dict[str, Rank]] = {rank.tag: rank for rank in Rank}


def _check_delimiter(delimiter: str) -> None:
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")


def cards_to_text(cards: Iterable[Card], delimiter: str = " ") -> str:
    """Join the display form of each card with ``delimiter``."""

    _check_delimiter(delimiter)
    return delimiter.join(str(card) for card in cards)


def cards_from_text(text: str, delimiter: str = " ") -> list[Card]:
    """Parse delimited card tokens, ignoring surrounding whitespace and empty tokens."""

    _check_delimiter(delimiter)
    cards: list[Card] = []
    for raw in text.split(delimiter):
        token = raw.strip()
        if not token:
            continue
        try:
            cards.append(Card.parse(token))
        except CardParseError as exc:
            logger.debug("rejected card token %r", token)
            raise DeckParseError(f"invalid card token {token!r}", token=token) from exc
    return cards


def cards_to_payload(cards: Iterable[Card]) -> dict[str, Any]:
    """Return the structured ``{"cards": [{"suit", "rank"}, ...]}`` form."""

    return {"cards": [{"suit": card.suit.tag, "rank": card.rank.tag} for card in cards]}


def _card_from_entry(position: int, entry: Any) -> Card:
    if not isinstance(entry, dict):
        raise DeckSerializationError(f"cards[{position}] must be a mapping, got {type(entry).__name__}")
    suit_tag, rank_tag = entry.get("suit"), entry.get("rank")
    suit = _SUIT_TAGS.get(suit_tag) if isinstance(suit_tag, str) else None
    rank = _RANK_TAGS.get(rank_tag) if isinstance(rank_tag, str) else None
    if suit is None:
        raise DeckSerializationError(f"cards[{position}] has unknown suit {suit_tag!r}")
    if rank is None:
        raise DeckSerializationError(f"cards[{position}] has unknown rank {rank_tag!r}")
    return Card(suit, rank)


def cards_from_payload(payload: Any) -> list[Card]:
    """Decode the structured form produced by :func:`cards_to_payload`."""

    if not isinstance(payload, dict) or "cards" not in payload:
        raise DeckSerializationError("payload must be a mapping with a 'cards' field")
    entries = payload["cards"]
    if not isinstance(entries, list):
        raise DeckSerializationError("'cards' must be a list")
    return [_card_from_entry(position, entry) for position, entry in enumerate(entries)]


def cards_to_json(cards: Iterable[Card], *, indent: int | None = None) -> str:
    return json.dumps(cards_to_payload(cards), ensure_ascii=False, indent=indent)


def cards_from_json(text: str) -> list[Card]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DeckSerializationError(f"invalid JSON: {exc}") from exc
    return cards_from_payload(payload)


def cards_to_yaml(cards: Iterable[Card]) -> str:
    return yaml.safe_dump(cards_to_payload(cards), allow_unicode=True, sort_keys=False)


def cards_from_yaml(text: str) -> list[Card]:
    try:
        payload = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DeckSerializationError(f"invalid YAML: {exc}") from exc
    return cards_from_payload(payload)


def cards_to_csv(cards: Iterable[Card]) -> str:
    """Write a ``Rank,Suit`` header followed by one ``rank,suit`` row per card."""

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerows((card.rank.symbol, card.suit.symbol) for card in cards)
    return buffer.getvalue()


def cards_from_csv(text: str) -> list[Card]:
    """Parse CSV produced by :func:`cards_to_csv`.

    A ``Rank,Suit`` header on the first line is skipped, as are blank lines.
    Malformed rows raise ``DeckParseError`` carrying the 1-based line number.
    """

    reader = csv.reader(io.StringIO(text, newline=""))
    cards: list[Card] = []
    for row in reader:
        line = reader.line_num
        fields = [field.strip() for field in row]
        if not any(fields):
            continue
        if line == 1 and tuple(fields) == CSV_HEADER:
            continue
        if len(fields) != 2:
            raise DeckParseError(
                f"line {line}: expected 2 fields, got {len(fields)}",
                token=",".join(row),
                line=line,
            )
        rank_text, suit_text = fields
        try:
            cards.append(Card(Suit.parse(suit_text), Rank.parse(rank_text)))
        except CardParseError as exc:
            logger.debug("rejected CSV row %d: %r", line, row)
            raise DeckParseError(f"line {line}: {exc}", token=exc.fragment, line=line) from exc
    return cards
