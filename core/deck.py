"""Deck - an identified, ordered pile of cards."""

from random import Random
from typing import Iterable, Iterator
from uuid import UUID, uuid4

from core.cards import Card, DECK_SUITS, RANKS


def canonical_key(card: Card) -> tuple[int, int]:
    """Sort key for unshuffled order: suits descending, ranks ascending."""
    return (-card.suit.order, card.rank.order)


class Deck:
    """
    An ordered sequence of cards with a unique identifier.

    The end of the sequence is the top of the deck. Any composition is
    legal: subsets, duplicates and empty decks included.
    """

    def __init__(
        self,
        cards: Iterable[Card] = (),
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a deck holding a copy of the given cards.

        Args:
            cards: Cards in order, bottom first
            rng: Random number generator for shuffling
        """
        self._deck_id = uuid4()
        self._rng = rng or Random()
        self._cards: list[Card] = list(cards)

    @classmethod
    def standard(cls, rng: Random | None = None) -> "Deck":
        """Create a 52-card deck in unshuffled order."""
        return cls(
            [Card(rank, suit) for suit in DECK_SUITS for rank in RANKS],
            rng=rng,
        )

    @classmethod
    def empty(cls, rng: Random | None = None) -> "Deck":
        """Create a deck with no cards."""
        return cls([], rng=rng)

    @property
    def deck_id(self) -> UUID:
        """Return the identifier assigned at construction."""
        return self._deck_id

    @property
    def cards(self) -> tuple[Card, ...]:
        """Return the cards in order, bottom first."""
        return tuple(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def is_shuffled(self) -> bool:
        """
        Check whether the cards are out of canonical order.

        Canonical order has suits non-increasing (Spades > Diamonds > Clubs >
        Hearts) and, within a suit, ranks non-decreasing (Ace low).
        """
        for card, next_card in zip(self._cards, self._cards[1:]):
            if canonical_key(card) > canonical_key(next_card):
                return True
        return False

    def shuffle(self) -> None:
        """Shuffle the deck in place."""
        self._rng.shuffle(self._cards)

    def unshuffle(self) -> None:
        """Restore canonical order in place (stable for duplicates)."""
        self._cards.sort(key=canonical_key)

    def draw(self, count: int = 1) -> list[Card]:
        """
        Draw up to `count` cards from the top of the deck.

        Cards are returned topmost first. A count below 1 draws nothing and
        a count above the remaining cards draws everything that is left.
        """
        if count < 1:
            return []

        split = max(len(self._cards) - count, 0)
        drawn = self._cards[split:]
        self._cards = self._cards[:split]
        drawn.reverse()
        return drawn

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"Deck({self._deck_id}, remaining={len(self._cards)})"
