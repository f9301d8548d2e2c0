"""Deck API endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException

from api.schemas import CardResponse, CreatedDeckResponse, OpenDeckResponse
from api.store import get_deck_store
from config import config
from core.cards import ParseError, parse_cards
from core.deck import Deck

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse_deck_id(deck_id: str) -> UUID:
    """Parse a deck identifier from the URL path."""
    try:
        return UUID(deck_id)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid deck id: {deck_id}") from None


def _parse_count(count: str | None) -> int:
    """Parse a draw count, falling back to the default when absent or not a number."""
    if count is None:
        return config.deck.default_draw_count
    try:
        return int(count)
    except ValueError:
        return config.deck.default_draw_count


def _build_deck(cards: str | None, shuffled: bool) -> Deck:
    """Build a deck from optional card codes."""
    if cards is None or not cards.strip():
        deck = Deck.standard()
    else:
        try:
            deck = Deck(parse_cards(cards))
        except ParseError as exc:
            logger.warning("Rejected deck creation: %s", exc)
            raise HTTPException(status_code=400, detail=str(exc)) from None

    if shuffled:
        deck.shuffle()
    return deck


@router.api_route("/create", methods=["GET", "POST"])
async def create_deck(
    cards: str | None = None,
    shuffled: bool = False,
) -> CreatedDeckResponse:
    """Create a deck, optionally from card codes and optionally shuffled."""
    deck = _build_deck(cards, shuffled)

    store = get_deck_store()
    await store.put(deck)
    logger.info("Created deck %s with %d cards", deck.deck_id, deck.cards_remaining)

    return CreatedDeckResponse.from_deck(deck)


@router.api_route("/open/{deck_id}", methods=["GET", "POST"])
async def open_deck(deck_id: str) -> OpenDeckResponse:
    """Show a deck and all of its remaining cards."""
    guid = _parse_deck_id(deck_id)

    store = get_deck_store()
    async with store.locked(guid) as deck:
        if deck is None:
            raise HTTPException(status_code=404, detail=f"Deck not found: {guid}")
        return OpenDeckResponse.from_deck(deck)


@router.api_route("/draw/{deck_id}", methods=["GET", "POST"])
async def draw_cards(
    deck_id: str,
    count: str | None = None,
) -> list[CardResponse]:
    """Draw cards from the top of a deck."""
    guid = _parse_deck_id(deck_id)
    n = _parse_count(count)

    store = get_deck_store()
    async with store.locked(guid) as deck:
        if deck is None:
            raise HTTPException(status_code=404, detail=f"Deck not found: {guid}")
        drawn = deck.draw(n)
        await store.put(deck)

    logger.debug("Drew %d cards from deck %s", len(drawn), guid)
    return [CardResponse.from_card(c) for c in drawn]
