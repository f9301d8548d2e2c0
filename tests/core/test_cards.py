"""Tests for Card, Rank, and Suit classes and card codes."""

import pytest
from hypothesis import given

from strategies import card_strategy
from core.cards import (
    Card,
    ParseError,
    Rank,
    Suit,
    encode,
    parse_card,
    parse_cards,
)


class TestRankAndSuit:
    """Tests for rank and suit ordering and names."""

    def test_rank_order(self):
        """Test that Ace is low and King is high."""
        ranks = list(Rank)
        assert ranks[0] == Rank.ACE
        assert ranks[-1] == Rank.KING
        assert sorted(ranks, reverse=True)[0] == Rank.KING
        assert Rank.ACE < Rank.TWO < Rank.TEN < Rank.JACK < Rank.QUEEN < Rank.KING

    def test_suit_order(self):
        """Test Spades > Diamonds > Clubs > Hearts."""
        assert Suit.HEARTS < Suit.CLUBS < Suit.DIAMONDS < Suit.SPADES
        assert max(Suit) == Suit.SPADES
        assert min(Suit) == Suit.HEARTS

    def test_rank_codes(self):
        """Test compact rank codes."""
        assert Rank.ACE.code == "A"
        assert Rank.TWO.code == "2"
        assert Rank.TEN.code == "10"
        assert Rank.JACK.code == "J"
        assert Rank.QUEEN.code == "Q"
        assert Rank.KING.code == "K"

    def test_rank_display(self):
        """Test full rank names."""
        assert Rank.ACE.display == "ACE"
        assert Rank.SEVEN.display == "7"
        assert Rank.TEN.display == "10"
        assert Rank.KING.display == "KING"
        assert str(Rank.QUEEN) == "QUEEN"

    def test_suit_codes_are_distinct(self):
        """Test that every suit letter maps to its own suit."""
        assert Suit.from_code("S") == Suit.SPADES
        assert Suit.from_code("D") == Suit.DIAMONDS
        assert Suit.from_code("C") == Suit.CLUBS
        assert Suit.from_code("H") == Suit.HEARTS
        assert len({s.code for s in Suit}) == 4

    def test_suit_display(self):
        """Test full suit names."""
        assert Suit.SPADES.display == "SPADES"
        assert str(Suit.HEARTS) == "HEARTS"

    def test_unknown_codes_raise(self):
        """Test that unknown rank and suit codes raise ParseError."""
        with pytest.raises(ParseError):
            Rank.from_code("1")
        with pytest.raises(ParseError):
            Suit.from_code("X")


class TestCard:
    """Tests for the Card class."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_card_immutability(self):
        """Test that cards are immutable."""
        card = Card(Rank.ACE, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_card_code(self):
        """Test compact codes."""
        assert Card(Rank.ACE, Suit.SPADES).code == "AS"
        assert Card(Rank.TEN, Suit.HEARTS).code == "10H"
        assert Card(Rank.KING, Suit.DIAMONDS).code == "KD"
        assert encode(Card(Rank.TWO, Suit.CLUBS)) == "2C"
        assert str(Card(Rank.JACK, Suit.CLUBS)) == "JC"

    def test_card_display_differs_from_code(self):
        """Test that the display name and compact code are separate forms."""
        card = Card(Rank.ACE, Suit.SPADES)
        assert card.display == "ACE of SPADES"
        assert card.display != card.code

    def test_card_equality(self):
        """Test card equality."""
        card1 = Card(Rank.ACE, Suit.SPADES)
        card2 = Card(Rank.ACE, Suit.SPADES)
        card3 = Card(Rank.KING, Suit.SPADES)
        assert card1 == card2
        assert card1 != card3

    def test_card_hash(self):
        """Test that cards can be used in sets/dicts."""
        cards = {Card(Rank.ACE, Suit.SPADES), Card(Rank.ACE, Suit.SPADES)}
        assert len(cards) == 1

    def test_card_repr(self):
        """Test debug representation."""
        assert repr(Card(Rank.ACE, Suit.SPADES)) == "Card(ACE, SPADES)"


class TestParseCard:
    """Tests for parsing card codes."""

    def test_parse_card(self):
        """Test parsing valid codes."""
        assert parse_card("AS") == Card(Rank.ACE, Suit.SPADES)
        assert parse_card("2H") == Card(Rank.TWO, Suit.HEARTS)
        assert parse_card("10D") == Card(Rank.TEN, Suit.DIAMONDS)
        assert parse_card("KC") == Card(Rank.KING, Suit.CLUBS)

    @pytest.mark.parametrize("code", ["as", "qd", "10h", " QD", "QD "])
    def test_parse_card_is_exact(self, code):
        """Test that lower case and padded codes are rejected."""
        with pytest.raises(ParseError):
            parse_card(code)

    def test_from_string(self):
        """Test the Card.from_string alias."""
        assert Card.from_string("JH") == Card(Rank.JACK, Suit.HEARTS)

    @pytest.mark.parametrize("code", ["A?", "1S", "ZZ", "", "S", "11H", "AS5"])
    def test_parse_card_invalid(self, code):
        """Test that invalid codes raise ParseError."""
        with pytest.raises(ParseError):
            parse_card(code)

    def test_parse_error_is_value_error(self):
        """Test that ParseError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_card("A?")

    def test_roundtrip_all_cards(self):
        """Test that every rank and suit pair survives encode then parse."""
        for suit in Suit:
            for rank in Rank:
                card = Card(rank, suit)
                assert parse_card(encode(card)) == card

    @given(card_strategy())
    def test_roundtrip_property(self, card):
        """Property: parsing a card's code yields the card."""
        assert parse_card(card.code) == card


class TestParseCards:
    """Tests for parsing lists of card codes."""

    def test_parse_comma_separated(self):
        """Test parsing a comma-separated list keeps order."""
        assert parse_cards("AS,KD,AC") == [
            Card(Rank.ACE, Suit.SPADES),
            Card(Rank.KING, Suit.DIAMONDS),
            Card(Rank.ACE, Suit.CLUBS),
        ]

    def test_parse_iterable(self):
        """Test parsing an iterable of codes."""
        assert parse_cards(["10H", "2C"]) == [
            Card(Rank.TEN, Suit.HEARTS),
            Card(Rank.TWO, Suit.CLUBS),
        ]

    @pytest.mark.parametrize("codes", [",", "AS,,KD", "AS,KD,", ",AS"])
    def test_blank_item_fails_all(self, codes):
        """Test that an empty item between commas rejects the whole list."""
        with pytest.raises(ParseError, match="Invalid card code: ''"):
            parse_cards(codes)

    def test_parse_keeps_duplicates(self):
        """Test that duplicates are allowed."""
        assert len(parse_cards("AS,AS")) == 2

    def test_one_bad_code_fails_all(self):
        """Test that a single bad code rejects the whole list."""
        with pytest.raises(ParseError, match="A\\?"):
            parse_cards("A?,KD,AC,2C,KH")
