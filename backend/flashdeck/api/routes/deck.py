"""Deck Routes — POST /api/deck (create/rename) and DELETE /api/deck/{deck_id}.

Invariants:
    - Identity is resolved on both endpoints even though the deck rows are
      authorized by row-level security
    - Create → 201 {deck}; rename → 200 {deck}; delete → 200 {ok, id}
"""

from fastapi import APIRouter, Depends, Response, status

from flashdeck.api.bearer_route import BearerFirstRoute
from flashdeck.api.dependencies import get_content_store, get_current_user_id
from flashdeck.core.domain_types import DeckId, FolderId
from flashdeck.core.repository_protocols import ContentStore
from flashdeck.schemas.content import DeckUpsert
from flashdeck.services.handle_deck import DeckHandlers

router = APIRouter(
    prefix="/api/deck", tags=["decks"], route_class=BearerFirstRoute,
    dependencies=[Depends(get_current_user_id)],
)


@router.post("")
async def upsert_deck(
    body: DeckUpsert,
    response: Response,
    store: ContentStore = Depends(get_content_store),
):
    """Rename a deck when `id` is given, otherwise create one in `folder_id`."""
    handlers = DeckHandlers(store)
    if body.id:
        deck = await handlers.rename(DeckId(body.id), body.deck_fields())
        return {"deck": deck}

    deck = await handlers.create(FolderId(body.folder_id), body.deck_fields())
    response.status_code = status.HTTP_201_CREATED
    return {"deck": deck}


@router.delete("/{deck_id}")
async def delete_deck(
    deck_id: str,
    store: ContentStore = Depends(get_content_store),
):
    """Delete one deck by id."""
    deleted_id = await DeckHandlers(store).delete(deck_id)
    return {"ok": True, "id": deleted_id}
