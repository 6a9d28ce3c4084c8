"""Deck Handlers — create in a folder, rename by id, delete by id.

Invariants:
    - Rename writes title, description, difficulty and objective together
      (absent optional fields are written as null)
    - Zero matched rows on rename/delete → ResourceNotFoundError (404)
"""

from flashdeck.core.domain_types import DeckId, FolderId, Row
from flashdeck.core.errors import InvalidRequestError, ResourceNotFoundError
from flashdeck.core.repository_protocols import ContentStore


class DeckHandlers:
    """Deck mutations bound to one request's store."""

    def __init__(self, store: ContentStore):
        self.store = store

    async def create(self, folder_id: FolderId, fields: dict) -> Row:
        return await self.store.create_deck(folder_id, fields)

    async def rename(self, deck_id: DeckId, fields: dict) -> Row:
        deck = await self.store.update_deck(deck_id, fields)
        if deck is None:
            raise ResourceNotFoundError("Deck", deck_id)
        return deck

    async def delete(self, deck_id: str) -> DeckId:
        """Delete one deck. Returns the deleted id."""
        deck_id = deck_id.strip()
        if not deck_id:
            raise InvalidRequestError("Missing deck id", "id")
        deleted = await self.store.delete_deck(DeckId(deck_id))
        if deleted is None:
            raise ResourceNotFoundError("Deck", deck_id)
        return DeckId(deck_id)
