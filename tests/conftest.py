"""Pytest fixtures for deck service tests."""

import pytest
from random import Random

from api.store import InMemoryDeckStore
from core.cards import Card, Rank, Suit
from core.deck import Deck


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def standard_deck(rng):
    """An unshuffled 52-card deck."""
    return Deck.standard(rng=rng)


@pytest.fixture
def shuffled_deck(rng):
    """A shuffled 52-card deck."""
    d = Deck.standard(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def mixed_deck(rng):
    """A small deck out of canonical order (AS, KH, AC)."""
    return Deck(
        [
            Card(Rank.ACE, Suit.SPADES),
            Card(Rank.KING, Suit.HEARTS),
            Card(Rank.ACE, Suit.CLUBS),
        ],
        rng=rng,
    )


@pytest.fixture
def store():
    """A fresh in-memory deck store."""
    return InMemoryDeckStore()

