"""Core deck engine - 100% transport-agnostic."""

from core.cards import Card, ParseError, Rank, Suit, encode, parse_card, parse_cards
from core.deck import Deck

__all__ = [
    "Card",
    "Deck",
    "ParseError",
    "Rank",
    "Suit",
    "encode",
    "parse_card",
    "parse_cards",
]
