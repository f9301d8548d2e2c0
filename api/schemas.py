"""Pydantic schemas for API responses."""

from pydantic import BaseModel, ConfigDict

from core.cards import Card
from core.deck import Deck


class CardResponse(BaseModel):
    """Card representation."""

    model_config = ConfigDict(from_attributes=True)

    value: str  # Rank display name, e.g. "ACE"
    suit: str  # Suit display name, e.g. "SPADES"
    code: str  # Compact code, e.g. "AS"

    @classmethod
    def from_card(cls, card: Card) -> "CardResponse":
        return cls(value=card.rank.display, suit=card.suit.display, code=card.code)


class CreatedDeckResponse(BaseModel):
    """Deck summary without card contents."""

    deck_id: str
    shuffled: bool
    remaining: int

    @classmethod
    def from_deck(cls, deck: Deck) -> "CreatedDeckResponse":
        return cls(
            deck_id=str(deck.deck_id),
            shuffled=deck.is_shuffled,
            remaining=deck.cards_remaining,
        )


class OpenDeckResponse(CreatedDeckResponse):
    """Deck summary with every remaining card in current order."""

    cards: list[CardResponse]

    @classmethod
    def from_deck(cls, deck: Deck) -> "OpenDeckResponse":
        return cls(
            deck_id=str(deck.deck_id),
            shuffled=deck.is_shuffled,
            remaining=deck.cards_remaining,
            cards=[CardResponse.from_card(c) for c in deck],
        )
