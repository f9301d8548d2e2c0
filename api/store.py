"""Deck registry with per-deck locking and TTL eviction."""

import asyncio
import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from datetime import datetime, timedelta
from typing import AsyncIterator
from uuid import UUID

from config import config
from core.deck import Deck

logger = logging.getLogger(__name__)


class DeckStore(ABC):
    """Abstract deck store keyed by deck identifier."""

    @abstractmethod
    async def get(self, deck_id: UUID) -> Deck | None:
        """Get a deck, or None if it is unknown."""
        ...

    @abstractmethod
    async def put(self, deck: Deck, ttl: int | None = None) -> None:
        """Store a deck under its own identifier."""
        ...

    @abstractmethod
    async def delete(self, deck_id: UUID) -> None:
        """Delete a deck."""
        ...

    @abstractmethod
    def lock(self, deck_id: UUID) -> "asyncio.Lock":
        """Return the lock serializing access to one deck."""
        ...

    @abstractmethod
    async def cleanup_expired(self) -> int:
        """Remove expired decks, returning how many were removed."""
        ...

    async def exists(self, deck_id: UUID) -> bool:
        """Check if a deck exists."""
        return await self.get(deck_id) is not None

    @asynccontextmanager
    async def locked(self, deck_id: UUID) -> AsyncIterator[Deck | None]:
        """
        Hold a deck's lock for a read-modify-write sequence.

        Yields:
            The stored deck, or None if it is unknown
        """
        async with self.lock(deck_id):
            yield await self.get(deck_id)


class InMemoryDeckStore(DeckStore):
    """In-memory deck store; contents are lost on restart."""

    def __init__(self) -> None:
        self._decks: dict[UUID, tuple[Deck, datetime]] = {}
        self._locks: dict[UUID, asyncio.Lock] = {}
        self._lock_users: dict[UUID, int] = {}  # Holders plus waiters per lock

    async def get(self, deck_id: UUID) -> Deck | None:
        """Get a deck, dropping it if expired."""
        if deck_id not in self._decks:
            return None

        deck, expiry = self._decks[deck_id]
        if expiry < datetime.now():
            logger.info("Deck %s expired", deck_id)
            await self.delete(deck_id)
            return None

        return deck

    async def put(self, deck: Deck, ttl: int | None = None) -> None:
        """Store a deck and refresh its expiry."""
        ttl = ttl if ttl is not None else config.deck.ttl
        expiry = datetime.now() + timedelta(seconds=ttl)
        self._decks[deck.deck_id] = (deck, expiry)

    async def delete(self, deck_id: UUID) -> None:
        """Delete a deck and its lock, unless the lock is in use."""
        self._decks.pop(deck_id, None)
        self._release_lock(deck_id)

    def lock(self, deck_id: UUID) -> asyncio.Lock:
        """Return the lock for a deck, creating it on first use."""
        lock = self._locks.get(deck_id)
        if lock is None:
            lock = self._locks[deck_id] = asyncio.Lock()
        return lock

    @asynccontextmanager
    async def locked(self, deck_id: UUID) -> AsyncIterator[Deck | None]:
        """
        Hold a deck's lock for a read-modify-write sequence.

        The lock is dropped on exit once nobody holds or waits for it and
        the deck is gone, so lookups of unknown ids leave nothing behind.
        """
        lock = self.lock(deck_id)
        self._lock_users[deck_id] = self._lock_users.get(deck_id, 0) + 1
        try:
            async with lock:
                yield await self.get(deck_id)
        finally:
            self._lock_users[deck_id] -= 1
            if not self._lock_users[deck_id]:
                del self._lock_users[deck_id]
            self._release_lock(deck_id)

    def _release_lock(self, deck_id: UUID) -> None:
        """Forget a deck's lock if the deck is gone and the lock is idle."""
        if deck_id in self._decks or deck_id in self._lock_users:
            return
        self._locks.pop(deck_id, None)

    async def cleanup_expired(self) -> int:
        """Remove expired decks and their idle locks."""
        now = datetime.now()
        expired = [
            did for did, (_, expiry) in self._decks.items() if expiry < now
        ]
        for did in expired:
            await self.delete(did)
        if expired:
            logger.info("Evicted %d expired decks", len(expired))
        return len(expired)

    def __len__(self) -> int:
        return len(self._decks)


# Global deck store instance
_deck_store: DeckStore | None = None


def get_deck_store() -> DeckStore:
    """Get or create the deck store."""
    global _deck_store
    if _deck_store is None:
        _deck_store = InMemoryDeckStore()
    return _deck_store
