from __future__ import annotations

import pytest

from deckhand.cards import (
    ALL_RANKS,
    BLACK_SUITS,
    RED_SUITS,
    STANDARD_RANKS,
    SUITS,
    Card,
    Color,
    Rank,
    Suit,
)
from deckhand.errors import CardIndexError, CardParseError


def test_suit_metadata() -> None:
    assert [suit.value for suit in SUITS] == [0, 1, 2, 3]
    assert [str(suit) for suit in SUITS] == ["♥", "♦", "♣", "♠"]
    assert Suit.HEARTS.color is Color.RED
    assert Suit.SPADES.color is Color.BLACK
    assert all(suit.is_red for suit in RED_SUITS)
    assert all(suit.is_black for suit in BLACK_SUITS)
    assert Suit.DIAMONDS.tag == "Diamonds"


def test_color_order_and_display() -> None:
    assert Color.RED < Color.BLACK
    assert str(Color.RED) == "R"
    assert str(Color.BLACK) == "B"
    assert Color.parse("b") is Color.BLACK
    assert Color.parse("Red") is Color.RED


def test_rank_constants() -> None:
    assert len(ALL_RANKS) == 14
    assert len(STANDARD_RANKS) == 13
    assert Rank.JOKER not in STANDARD_RANKS
    assert "".join(rank.symbol for rank in ALL_RANKS) == "23456789TJQKAU"
    assert Rank.TWO < Rank.ACE < Rank.JOKER
    assert Rank.JOKER.tag == "Joker"


@pytest.mark.parametrize(
    ("text", "expected"),
    [("hearts", Suit.HEARTS), ("D", Suit.DIAMONDS), ("♣", Suit.CLUBS), (" Spades ", Suit.SPADES)],
)
def test_suit_parse(text: str, expected: Suit) -> None:
    assert Suit.parse(text) is expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [("10", Rank.TEN), ("t", Rank.TEN), ("ace", Rank.ACE), ("U", Rank.JOKER), ("JOKER", Rank.JOKER), ("7", Rank.SEVEN)],
)
def test_rank_parse(text: str, expected: Rank) -> None:
    assert Rank.parse(text) is expected


def test_parse_errors_carry_fragment() -> None:
    with pytest.raises(CardParseError) as suit_error:
        Suit.parse("X")
    assert suit_error.value.fragment == "X"

    with pytest.raises(CardParseError) as rank_error:
        Rank.parse("1")
    assert rank_error.value.fragment == "1"

    with pytest.raises(CardParseError):
        Color.parse("green")


def test_card_display() -> None:
    card = Card(Suit.SPADES, Rank.ACE)
    assert str(card) == "A♠"
    assert repr(card) == "Card(A♠)"
    assert str(Card(Suit.HEARTS, Rank.TEN)) == "T♥"
    assert str(Card(Suit.CLUBS, Rank.JOKER)) == "U♣"


@pytest.mark.parametrize(
    "text",
    ["A♠", "♠A", "AceSpades", "SpadesA", "as", "sa", "aceS"],
)
def test_card_parse_accepts_both_orders(text: str) -> None:
    assert Card.parse(text) == Card(Suit.SPADES, Rank.ACE)


def test_card_parse_ten_and_joker() -> None:
    assert Card.parse("10h") == Card(Suit.HEARTS, Rank.TEN)
    assert Card.parse("Th") == Card(Suit.HEARTS, Rank.TEN)
    assert Card.parse("UH") == Card(Suit.HEARTS, Rank.JOKER)
    assert Card.parse("jokerSpades") == Card(Suit.SPADES, Rank.JOKER)


def test_card_parse_probes_splits_left_to_right() -> None:
    # "SSIX" resolves at the first split as suit "S" + rank "SIX".
    assert Card.parse("SSIX") == Card(Suit.SPADES, Rank.SIX)
    # "SIXS" only resolves at the last split as rank "SIX" + suit "S".
    assert Card.parse("SIXS") == Card(Suit.SPADES, Rank.SIX)
    assert Card.parse("HK") == Card(Suit.HEARTS, Rank.KING)
    assert Card.parse("KH") == Card(Suit.HEARTS, Rank.KING)


@pytest.mark.parametrize("text", ["", "A", "ZZ", "A♠♠", "11H"])
def test_card_parse_rejects_garbage(text: str) -> None:
    with pytest.raises(CardParseError) as error:
        Card.parse(text)
    assert error.value.fragment == text


def test_card_parse_round_trips_display() -> None:
    for suit in SUITS:
        for rank in ALL_RANKS:
            card = Card(suit, rank)
            assert Card.parse(str(card)) == card


def test_card_predicates() -> None:
    ace = Card(Suit.HEARTS, Rank.ACE)
    jack = Card(Suit.CLUBS, Rank.JACK)
    ten = Card(Suit.DIAMONDS, Rank.TEN)
    joker = Card(Suit.SPADES, Rank.JOKER)

    assert ace.is_ace and not ace.is_face_card and not ace.is_value_card
    assert jack.is_face_card and not jack.is_value_card
    assert ten.is_value_card and not ten.is_face_card
    assert joker.is_joker and not joker.is_value_card
    assert ace.is_same_color(ten)
    assert not ace.is_same_color(jack)
    assert ace.is_same_suit(Card(Suit.HEARTS, Rank.TWO))
    assert ace.is_same_rank(Card(Suit.SPADES, Rank.ACE))
    assert ace.color is Color.RED


def test_card_default_order_is_suit_then_rank() -> None:
    cards = [
        Card(Suit.SPADES, Rank.TWO),
        Card(Suit.HEARTS, Rank.ACE),
        Card(Suit.HEARTS, Rank.TWO),
        Card(Suit.DIAMONDS, Rank.KING),
    ]
    assert sorted(cards) == [
        Card(Suit.HEARTS, Rank.TWO),
        Card(Suit.HEARTS, Rank.ACE),
        Card(Suit.DIAMONDS, Rank.KING),
        Card(Suit.SPADES, Rank.TWO),
    ]


def test_card_is_hashable_value() -> None:
    assert len({Card(Suit.HEARTS, Rank.ACE), Card(Suit.HEARTS, Rank.ACE)}) == 1
    with pytest.raises(AttributeError):
        Card(Suit.HEARTS, Rank.ACE).rank = Rank.TWO  # type: ignore[misc]


def test_card_rejects_non_enum_fields() -> None:
    with pytest.raises(TypeError):
        Card(0, 0)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("card", "index"),
    [
        (Card(Suit.HEARTS, Rank.TWO), 0),
        (Card(Suit.HEARTS, Rank.ACE), 12),
        (Card(Suit.HEARTS, Rank.JOKER), 13),
        (Card(Suit.DIAMONDS, Rank.TWO), 14),
        (Card(Suit.SPADES, Rank.KING), 53),
        (Card(Suit.SPADES, Rank.JOKER), 55),
    ],
)
def test_card_index_layout(card: Card, index: int) -> None:
    assert card.to_index() == index
    assert int(card) == index
    assert Card.from_index(index) == card


def test_card_index_round_trip_full_domain() -> None:
    for value in range(56):
        assert Card.from_index(value).to_index() == value


@pytest.mark.parametrize("value", [56, 100, -1])
def test_card_index_rejects_out_of_range(value: int) -> None:
    with pytest.raises(CardIndexError) as error:
        Card.from_index(value)
    assert error.value.value == value


def test_display_ascii_box() -> None:
    lines = Card(Suit.SPADES, Rank.ACE).display_ascii().splitlines()
    assert lines == [
        "┌─────┐",
        "│A    │",
        "│  ♠  │",
        "│    A│",
        "└─────┘",
    ]
    assert len({len(line) for line in lines}) == 1
