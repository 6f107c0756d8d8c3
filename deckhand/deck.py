"""The Deck collection: an ordered, double-ended sequence of cards."""

from __future__ import annotations

import functools
import random
from collections import deque
from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator, Protocol, overload

from . import encoding, serialization
from .cards import Card
from .comparators import CardComparator
from .config import config
from .factories import DeckFactory
from .log import get_logger

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .encoding import UInt8Array

__all__ = ["RandomSource", "Deck"]

logger = get_logger(__name__)


class RandomSource(Protocol):
    """Uniform random source used for shuffling; ``random.Random`` satisfies it."""

    def shuffle(self, x: list[Any]) -> None:  # pragma: no cover - protocol only
        ...

    def randint(self, a: int, b: int) -> int:  # pragma: no cover - protocol only
        ...


class Deck:
    """Ordered collection of cards that permits duplicates.

    Index 0 is the top of the deck and the last index is the bottom.
    Operations that may legitimately produce nothing (dealing from an empty
    deck, peeking past the end) return ``None``; positional updates that
    cannot be applied return ``False`` and leave the deck untouched.
    """

    __slots__ = ("_cards", "_rng")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, cards: Iterable[Card] = (), *, rng: RandomSource | None = None) -> None:
        self._cards: deque[Card] = deque(cards)
        self._rng: RandomSource = rng if rng is not None else random.Random(config.shuffle_seed)

    @classmethod
    def from_factory(cls, factory: DeckFactory, *, rng: RandomSource | None = None) -> "Deck":
        """Create a deck holding the cards produced by ``factory``."""

        return cls(factory.generate(), rng=rng)

    @property
    def rng(self) -> RandomSource:
        return self._rng

    def _spawn(self, cards: Iterable[Card]) -> "Deck":
        return Deck(cards, rng=self._rng)

    def copy(self) -> "Deck":
        """Return a new deck with the same cards and random source."""

        return self._spawn(self._cards)

    __copy__ = copy

    def __len__(self) -> int:
        return len(self._cards)

    def is_empty(self) -> bool:
        return not self._cards

    def cut(self, index: int) -> bool:
        """Move cards ``[index:]`` to the top, ahead of the old ``[:index]``.

        Returns ``False`` without changing the deck when ``index`` is not a
        valid position.
        """

        if not 0 <= index < len(self._cards):
            return False
        self._cards.rotate(-index)
        logger.debug("cut deck of %d cards at %d", len(self._cards), index)
        return True

    def shuffle(self) -> None:
        """Shuffle in place with a uniform random permutation."""

        cards = list(self._cards)
        self._rng.shuffle(cards)
        self._cards = deque(cards)
        logger.debug("shuffled %d cards", len(cards))

    def shuffle_times(self, times: int) -> None:
        for _ in range(times):
            self.shuffle()

    def riffle_shuffle(self) -> None:
        """Interleave the two halves of the deck, bottom half leading.

        The deck is split at ``len // 2``; the result alternates
        ``back[i], front[i]`` and an odd leftover card goes last. The
        operation is deterministic.
        """

        cards = list(self._cards)
        mid = len(cards) // 2
        front, back = cards[:mid], cards[mid:]
        riffled: list[Card] = []
        for lead, follow in zip(back, front):
            riffled.append(lead)
            riffled.append(follow)
        riffled.extend(back[mid:])
        self._cards = deque(riffled)

    def riffle_shuffle_times(self, times: int) -> None:
        for _ in range(times):
            self.riffle_shuffle()

    def overhand_shuffle(self) -> None:
        """Move random-sized packets from the top onto a new pile until none remain.

        Each packet holds between one and half of the remaining cards and is
        placed on top of the pile, so packet order is reversed.
        """

        remaining = list(self._cards)
        pile: list[Card] = []
        while remaining:
            if len(remaining) == 1:
                size = 1
            else:
                size = self._rng.randint(1, max(1, len(remaining) // 2))
            packet, remaining = remaining[:size], remaining[size:]
            pile[:0] = packet
        self._cards = deque(pile)
        logger.debug("overhand shuffled %d cards", len(pile))

    def overhand_shuffle_times(self, times: int) -> None:
        for _ in range(times):
            self.overhand_shuffle()

    def reverse(self) -> None:
        self._cards.reverse()

    def clear(self) -> None:
        self._cards.clear()

    def deal(self) -> Card | None:
        """Remove and return the top card, or ``None`` if the deck is empty."""

        return self._cards.popleft() if self._cards else None

    def deal_bottom(self) -> Card | None:
        return self._cards.pop() if self._cards else None

    def deal_n(self, count: int) -> list[Card] | None:
        """Deal ``count`` cards from the top, or ``None`` if fewer remain.

        Nothing is removed when the request cannot be satisfied in full.
        """

        if not 0 <= count <= len(self._cards):
            logger.debug("refused to deal %d of %d cards", count, len(self._cards))
            return None
        return [self._cards.popleft() for _ in range(count)]

    def deal_n_bottom(self, count: int) -> list[Card] | None:
        """Deal ``count`` cards from the bottom, bottom card first."""

        if not 0 <= count <= len(self._cards):
            logger.debug("refused to deal %d of %d cards", count, len(self._cards))
            return None
        return [self._cards.pop() for _ in range(count)]

    def deal_from(self, index: int) -> Card | None:
        return self.remove_at(index)

    def deal_n_from(self, index: int, count: int) -> list[Card] | None:
        """Deal ``count`` consecutive cards starting at ``index``, all or nothing."""

        if index < 0 or count < 0 or index + count > len(self._cards):
            logger.debug("refused to deal %d cards from %d of %d", count, index, len(self._cards))
            return None
        cards = list(self._cards)
        dealt = cards[index : index + count]
        del cards[index : index + count]
        self._cards = deque(cards)
        return dealt

    def add_card(self, card: Card) -> None:
        """Place ``card`` on top of the deck."""

        self._cards.appendleft(card)

    def add_card_bottom(self, card: Card) -> None:
        self._cards.append(card)

    def add_cards(self, cards: Iterable[Card]) -> None:
        """Place ``cards`` on top, keeping their given order."""

        self._cards.extendleft(reversed(list(cards)))

    def add_cards_bottom(self, cards: Iterable[Card]) -> None:
        self._cards.extend(cards)

    def insert_at(self, card: Card, index: int) -> bool:
        """Insert ``card`` before position ``index``; ``index == len`` appends."""

        if not 0 <= index <= len(self._cards):
            return False
        self._cards.insert(index, card)
        return True

    def peek(self) -> Card | None:
        return self._cards[0] if self._cards else None

    def peek_bottom(self) -> Card | None:
        return self._cards[-1] if self._cards else None

    def peek_at(self, index: int) -> Card | None:
        if not 0 <= index < len(self._cards):
            return None
        return self._cards[index]

    def remove_at(self, index: int) -> Card | None:
        """Remove and return the card at ``index``, or ``None`` if out of range."""

        if not 0 <= index < len(self._cards):
            return None
        card = self._cards[index]
        del self._cards[index]
        return card

    def contains(self, card: Card) -> bool:
        return card in self._cards

    def find(self, card: Card) -> int | None:
        """Return the first position holding ``card``, or ``None``."""

        return next((idx for idx, held in enumerate(self._cards) if held == card), None)

    def count(self, card: Card) -> int:
        return self._cards.count(card)

    def split_at(self, index: int) -> tuple["Deck", "Deck"]:
        """Return new decks for ``[:index]`` and ``[index:]``.

        ``index`` is clamped to the deck, so a value past the end yields the
        whole deck and an empty remainder.
        """

        index = max(0, min(index, len(self._cards)))
        cards = list(self._cards)
        return self._spawn(cards[:index]), self._spawn(cards[index:])

    def sort_by_comparator(self, comparator: CardComparator) -> None:
        self._cards = deque(sorted(self._cards, key=comparator.key))

    def sort_by(self, compare: Callable[[Card, Card], int]) -> None:
        """Sort with a two-argument function returning negative, zero or positive."""

        self._cards = deque(sorted(self._cards, key=functools.cmp_to_key(compare)))

    def sort(self, *, key: Callable[[Card], Any] | None = None, reverse: bool = False) -> None:
        """Sort by natural card order (suit, then rank) or by ``key``."""

        self._cards = deque(sorted(self._cards, key=key, reverse=reverse))

    def map_in_place(self, func: Callable[[Card], Card]) -> None:
        """Replace every card with ``func(card)``, keeping positions."""

        for idx, card in enumerate(list(self._cards)):
            self._cards[idx] = func(card)

    def with_card_added(self, card: Card) -> "Deck":
        """Return a copy with ``card`` on top."""

        result = self.copy()
        result.add_card(card)
        return result

    def with_card_removed(self, card: Card) -> "Deck":
        """Return a copy without the first occurrence of ``card``, if any."""

        result = self.copy()
        result._discard_one(card)
        return result

    def concatenated(self, other: "Deck") -> "Deck":
        """Return a deck holding this deck's cards followed by ``other``'s."""

        return self._spawn([*self._cards, *other._cards])

    def without_cards(self, other: Iterable[Card]) -> "Deck":
        """Return a copy with one occurrence removed for each card of ``other``."""

        result = self.copy()
        for card in other:
            result._discard_one(card)
        return result

    def repeated(self, times: int) -> "Deck":
        """Return ``times`` back-to-back copies of this deck's sequence."""

        if times < 0:
            raise ValueError("times must be non-negative")
        return self._spawn(list(self._cards) * times)

    def _discard_one(self, card: Card) -> None:
        if card in self._cards:
            self._cards.remove(card)

    def __add__(self, other: object) -> "Deck":
        if isinstance(other, Card):
            return self.with_card_added(other)
        if isinstance(other, Deck):
            return self.concatenated(other)
        return NotImplemented

    def __sub__(self, other: object) -> "Deck":
        if isinstance(other, Card):
            return self.with_card_removed(other)
        if isinstance(other, Deck):
            return self.without_cards(other)
        return NotImplemented

    def __mul__(self, times: object) -> "Deck":
        if not isinstance(times, int):
            return NotImplemented
        return self.repeated(times)

    __rmul__ = __mul__

    def __iadd__(self, other: object) -> "Deck":
        if isinstance(other, Card):
            self.add_card(other)
        elif isinstance(other, Deck):
            self.add_cards_bottom(list(other._cards))
        else:
            return NotImplemented
        return self

    def __isub__(self, other: object) -> "Deck":
        if isinstance(other, Card):
            self._discard_one(other)
        elif isinstance(other, Deck):
            for card in list(other._cards):
                self._discard_one(card)
        else:
            return NotImplemented
        return self

    def __imul__(self, times: object) -> "Deck":
        if not isinstance(times, int):
            return NotImplemented
        if times < 0:
            raise ValueError("times must be non-negative")
        self._cards = deque(list(self._cards) * times)
        return self

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __reversed__(self) -> Iterator[Card]:
        return reversed(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    @overload
    def __getitem__(self, index: int) -> Card: ...

    @overload
    def __getitem__(self, index: slice) -> "Deck": ...

    def __getitem__(self, index: int | slice) -> Card | "Deck":
        if isinstance(index, slice):
            return self._spawn(list(self._cards)[index])
        return self._cards[index]

    def __setitem__(self, index: int, card: Card) -> None:
        self._cards[index] = card

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deck):
            return NotImplemented
        return self._cards == other._cards

    def __repr__(self) -> str:
        return f"Deck([{', '.join(repr(card) for card in self._cards)}])"

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self, delimiter: str = " ") -> str:
        return serialization.cards_to_text(self._cards, delimiter)

    @classmethod
    def from_string(cls, text: str, delimiter: str = " ", *, rng: RandomSource | None = None) -> "Deck":
        return cls(serialization.cards_from_text(text, delimiter), rng=rng)

    def to_dict(self) -> dict[str, Any]:
        return serialization.cards_to_payload(self._cards)

    @classmethod
    def from_dict(cls, data: Any, *, rng: RandomSource | None = None) -> "Deck":
        return cls(serialization.cards_from_payload(data), rng=rng)

    def to_json(self, *, indent: int | None = None) -> str:
        return serialization.cards_to_json(self._cards, indent=indent)

    @classmethod
    def from_json(cls, text: str, *, rng: RandomSource | None = None) -> "Deck":
        return cls(serialization.cards_from_json(text), rng=rng)

    def to_yaml(self) -> str:
        return serialization.cards_to_yaml(self._cards)

    @classmethod
    def from_yaml(cls, text: str, *, rng: RandomSource | None = None) -> "Deck":
        return cls(serialization.cards_from_yaml(text), rng=rng)

    def to_csv(self) -> str:
        return serialization.cards_to_csv(self._cards)

    @classmethod
    def from_csv(cls, text: str, *, rng: RandomSource | None = None) -> "Deck":
        return cls(serialization.cards_from_csv(text), rng=rng)

    def to_indices(self) -> list[int]:
        return encoding.encode_cards(self._cards)

    @classmethod
    def from_indices(cls, values: Iterable[int], *, rng: RandomSource | None = None) -> "Deck":
        """Build a deck from dense identifiers; any invalid value fails the whole call."""

        return cls(encoding.decode_cards(values), rng=rng)

    def to_array(self) -> "UInt8Array":
        return encoding.cards_to_array(list(self._cards))
