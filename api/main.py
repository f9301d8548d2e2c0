"""FastAPI application entry point."""

import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from api.routes import decks
from api.store import DeckStore, get_deck_store
from config import config, setup_logging

setup_logging()

logger = logging.getLogger(__name__)

# Initialize rate limiter
limiter = Limiter(
    key_func=get_remote_address,
    enabled=config.rate_limit.enabled,
    default_limits=[f"{config.rate_limit.requests_per_minute}/minute"],
)


def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Handle rate limit exceeded errors."""
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded: {exc.detail}"},
    )


async def evict_expired_decks(store: DeckStore, interval: float) -> None:
    """Sweep expired decks out of the store every `interval` seconds."""
    while True:
        await asyncio.sleep(interval)
        removed = await store.cleanup_expired()
        logger.debug("Deck sweep removed %d decks", removed)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Run the expired-deck sweeper for the lifetime of the app."""
    sweeper = asyncio.create_task(
        evict_expired_decks(get_deck_store(), config.deck.cleanup_interval)
    )
    yield
    sweeper.cancel()


app = FastAPI(
    title="Deck Service",
    description="Create, shuffle, open and draw from decks of playing cards",
    version="0.1.0",
    debug=config.debug,
    lifespan=lifespan,
)

# Add rate limiter to app state and exception handler
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# CORS middleware with configurable origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors.allowed_origins,
    allow_credentials=config.cors.allow_credentials,
    allow_methods=config.cors.allow_methods,
    allow_headers=config.cors.allow_headers,
)

@app.get("/api/health")
@limiter.limit(f"{config.rate_limit.requests_per_minute}/minute")
async def health_check(request: Request) -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


# Include routers
app.include_router(decks.router, prefix="/api/deck", tags=["deck"])
