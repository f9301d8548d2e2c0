"""Card, Rank, and Suit - immutable card representations and card codes."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class ParseError(ValueError):
    """Raised when a card code does not name a known rank and suit."""


class Suit(Enum):
    """Card suits, valued by their one-letter code."""

    HEARTS = "H"
    CLUBS = "C"
    DIAMONDS = "D"
    SPADES = "S"

    def __str__(self) -> str:
        return self.display

    def __lt__(self, other: "Suit") -> bool:
        if not isinstance(other, Suit):
            return NotImplemented
        return self.order < other.order

    @property
    def code(self) -> str:
        """Return the one-letter code used in card codes."""
        return self.value

    @property
    def display(self) -> str:
        """Return the full uppercase name, e.g. 'SPADES'."""
        return self.name

    @property
    def order(self) -> int:
        """Return the domain rank of the suit (Spades high, Hearts low)."""
        return _SUIT_ORDER[self]

    @classmethod
    def from_code(cls, code: str) -> "Suit":
        """Look up a suit by its one-letter code."""
        try:
            return cls(code)
        except ValueError:
            raise ParseError(f"Invalid suit: {code}") from None


class Rank(Enum):
    """Card ranks, valued by their compact code."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    def __str__(self) -> str:
        return self.display

    def __lt__(self, other: "Rank") -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.order < other.order

    @property
    def code(self) -> str:
        """Return the compact code ('10' is the only two-character one)."""
        return self.value

    @property
    def display(self) -> str:
        """Return the display name: 'ACE', '2'..'10', 'JACK', 'QUEEN', 'KING'."""
        if self in _FACE_RANKS:
            return self.name
        return self.value

    @property
    def order(self) -> int:
        """Return the position of the rank, Ace low and King high."""
        return _RANK_ORDER[self]

    @classmethod
    def from_code(cls, code: str) -> "Rank":
        """Look up a rank by its compact code."""
        try:
            return cls(code)
        except ValueError:
            raise ParseError(f"Invalid rank: {code}") from None


# Construction order of a standard deck: Spades first, Hearts last.
DECK_SUITS = (Suit.SPADES, Suit.DIAMONDS, Suit.CLUBS, Suit.HEARTS)
RANKS = tuple(Rank)

_SUIT_ORDER = {suit: len(DECK_SUITS) - i for i, suit in enumerate(DECK_SUITS)}
_RANK_ORDER = {rank: i for i, rank in enumerate(RANKS)}
_FACE_RANKS = frozenset({Rank.ACE, Rank.JACK, Rank.QUEEN, Rank.KING})


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def code(self) -> str:
        """Return the compact code, e.g. 'AS', '10H'."""
        return f"{self.rank.code}{self.suit.code}"

    @property
    def display(self) -> str:
        """Return the human-readable name, e.g. 'ACE of SPADES'."""
        return f"{self.rank.display} of {self.suit.display}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a code like 'AS', '10D' or 'KH'."""
        return parse_card(s)


def encode(card: Card) -> str:
    """Return the compact code of a card."""
    return card.code


def parse_card(code: str) -> Card:
    """
    Parse a compact card code.

    The suit is the last character and the rank is everything before it.

    Raises:
        ParseError: if the code is too short or either part is unknown
    """
    if len(code) < 2:
        raise ParseError(f"Invalid card code: {code!r}")

    try:
        rank = Rank.from_code(code[:-1])
        suit = Suit.from_code(code[-1])
    except ParseError as exc:
        raise ParseError(f"Failed to parse {code!r} into a card: {exc}") from None

    return Card(rank, suit)


def parse_cards(codes: str | Iterable[str]) -> list[Card]:
    """
    Parse a comma-separated string (or iterable) of card codes.

    Parsing is all-or-nothing: the first bad code raises and no cards are
    returned.
    """
    if isinstance(codes, str):
        codes = codes.split(",")
    return [parse_card(code) for code in codes]
