"""Flashdeck API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FlashdeckError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - No startup resources: database sessions are built per request

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flashdeck.api.error_handlers import register_error_handlers
from flashdeck.api.routes import (
    ai_flashcards, deck, flashcard, folder, health, library,
)
from flashdeck.config import get_settings
from flashdeck.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Flashdeck API started")
    yield
    logger.info("Flashdeck API shutting down")


app = FastAPI(
    title="Flashdeck API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(library.router)
app.include_router(folder.router)
app.include_router(deck.router)
app.include_router(flashcard.router)
app.include_router(ai_flashcards.router)

register_error_handlers(app)
