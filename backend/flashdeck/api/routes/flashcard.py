"""Flashcard Routes — POST /api/flashcard: update (id), single create, or bulk create (items).

Invariants:
    - Update → 200 {flashcard}; single create → 201 {flashcard}
    - Bulk create → 201 {createdCount, flashcards}; rejected batches never reach the store
"""

from fastapi import APIRouter, Depends, Response, status

from flashdeck.api.bearer_route import BearerFirstRoute
from flashdeck.api.dependencies import get_content_store, get_current_user_id
from flashdeck.core.domain_types import DeckId, FlashcardId
from flashdeck.core.repository_protocols import ContentStore
from flashdeck.schemas.content import FlashcardUpsert
from flashdeck.services.handle_flashcard import FlashcardHandlers

router = APIRouter(
    prefix="/api/flashcard", tags=["flashcards"], route_class=BearerFirstRoute,
    dependencies=[Depends(get_current_user_id)],
)


@router.post("")
async def upsert_flashcard(
    body: FlashcardUpsert,
    response: Response,
    store: ContentStore = Depends(get_content_store),
):
    """Update, create, or bulk-create flashcards depending on the body shape."""
    handlers = FlashcardHandlers(store)
    if body.id:
        flashcard = await handlers.update(
            FlashcardId(body.id), body.update_fields(),
        )
        return {"flashcard": flashcard}

    deck_id = DeckId(body.deck_id)
    if body.is_bulk:
        created = await handlers.create_bulk(deck_id, body.items)
        response.status_code = status.HTTP_201_CREATED
        return {"createdCount": len(created), "flashcards": created}

    flashcard = await handlers.create(deck_id, body.front, body.back)
    response.status_code = status.HTTP_201_CREATED
    return {"flashcard": flashcard}
