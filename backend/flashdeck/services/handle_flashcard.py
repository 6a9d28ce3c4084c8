"""Flashcard Handlers — update by id, single create, bulk create.

Invariants:
    - Bulk batches are cleaned by core/bulk_items.py BEFORE the single insert call
    - Bulk insert is all-or-nothing: one call, no per-item status
    - Zero matched rows on update → ResourceNotFoundError (404)
"""

import logging

from flashdeck.core.bulk_items import clean_bulk_items
from flashdeck.core.domain_types import CardFace, DeckId, FlashcardId, Row
from flashdeck.core.errors import ResourceNotFoundError
from flashdeck.core.repository_protocols import ContentStore

logger = logging.getLogger(__name__)


class FlashcardHandlers:
    """Flashcard mutations bound to one request's store."""

    def __init__(self, store: ContentStore):
        self.store = store

    async def update(self, flashcard_id: FlashcardId, fields: dict) -> Row:
        flashcard = await self.store.update_flashcard(flashcard_id, fields)
        if flashcard is None:
            raise ResourceNotFoundError("Flashcard", flashcard_id)
        return flashcard

    async def create(self, deck_id: DeckId, front: str, back: str) -> Row:
        return await self.store.create_flashcard(
            deck_id, CardFace(front=front, back=back),
        )

    async def create_bulk(self, deck_id: DeckId, raw_items: list) -> list[Row]:
        # ── PURE: trim, filter, bound ──
        faces = clean_bulk_items(raw_items)
        if len(faces) < len(raw_items):
            logger.info(
                f"Bulk create dropped {len(raw_items) - len(faces)} incomplete item(s)",
            )
        # ── IMPURE: one batch insert ──
        return await self.store.create_flashcards(deck_id, faces)
