from __future__ import annotations

import numpy as np
import pytest

from deckhand import encoding
from deckhand.cards import Card, Rank, Suit
from deckhand.errors import CardIndexError


def test_identifier_space() -> None:
    assert encoding.RANKS_PER_SUIT == 14
    assert encoding.CARD_ID_COUNT == 56


def test_encode_decode_full_domain() -> None:
    for card_id in range(encoding.CARD_ID_COUNT):
        assert encoding.encode_card(encoding.decode_card(card_id)) == card_id


def test_encode_cards_preserves_order() -> None:
    cards = [Card(Suit.SPADES, Rank.KING), Card(Suit.HEARTS, Rank.TWO), Card(Suit.SPADES, Rank.KING)]
    assert encoding.encode_cards(cards) == [53, 0, 53]
    assert encoding.decode_cards([53, 0, 53]) == cards


def test_decode_cards_is_all_or_nothing() -> None:
    with pytest.raises(CardIndexError) as error:
        encoding.decode_cards([0, 1, 56, 2])
    assert error.value.value == 56


def test_decode_accepts_numpy_integers() -> None:
    assert encoding.decode_card(np.uint8(12)) == Card(Suit.HEARTS, Rank.ACE)


def test_cards_to_array() -> None:
    cards = [Card(Suit.HEARTS, Rank.JOKER), Card(Suit.CLUBS, Rank.ACE)]
    array = encoding.cards_to_array(cards)
    assert array.dtype == np.uint8
    assert array.tolist() == [13, 40]
    assert encoding.cards_to_array([]).shape == (0,)
