"""Boundary Protocols — contracts between the request handlers and the external services.

Invariants:
    - Handlers never import the Supabase or Anthropic SDKs, only these Protocols
    - Each store method is exactly one round trip to the database service
    - update_* / delete_* return None when zero rows matched; handlers turn that into 404
    - Implementations raise DatabaseError / ModelAPIError for upstream failures

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - One store per request: the implementation is bound to the caller's token
"""

from typing import Protocol

from flashdeck.core.domain_types import (
    CardFace, DeckId, FlashcardId, FolderId, LibraryId, Row, UserId,
)


class IdentityResolver(Protocol):
    """Contract for token verification — implemented by the auth service client."""
    async def resolve_user_id(self, token: str) -> UserId | None: ...


class ContentStore(Protocol):
    """Contract for library/folder/deck/flashcard persistence."""

    # libraries
    async def find_library_id(self, user_id: UserId) -> LibraryId | None: ...
    async def create_library(self, user_id: UserId, name: str) -> LibraryId: ...
    async def find_library_tree(self, user_id: UserId) -> Row | None: ...
    async def create_library_tree(self, user_id: UserId, name: str) -> Row: ...

    # folders
    async def create_folder(self, library_id: LibraryId, name: str) -> Row: ...
    async def update_folder(self, folder_id: FolderId, name: str) -> Row | None: ...

    # decks
    async def create_deck(self, folder_id: FolderId, fields: dict) -> Row: ...
    async def update_deck(self, deck_id: DeckId, fields: dict) -> Row | None: ...
    async def delete_deck(self, deck_id: DeckId) -> Row | None: ...

    # flashcards
    async def create_flashcard(self, deck_id: DeckId, face: CardFace) -> Row: ...
    async def create_flashcards(
        self, deck_id: DeckId, faces: list[CardFace],
    ) -> list[Row]: ...
    async def update_flashcard(
        self, flashcard_id: FlashcardId, fields: dict,
    ) -> Row | None: ...


class FlashcardGenerator(Protocol):
    """Contract for the model service — returns the raw JSON text of the cards document."""
    async def generate_cards_json(
        self, *, instructions: str, user_prompt: str, count: int,
    ) -> str: ...
