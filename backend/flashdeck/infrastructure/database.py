"""Supabase Gateway — per-request database session, token verification, and row operations.

Invariants:
    - One AsyncClient per request, built from the caller's bearer token, never reused
    - request_client closes the PostgREST and auth HTTP clients when the request ends
    - The client attaches "Authorization: Bearer <token>" to every call,
      persists no session, and never refreshes the token
    - Every row operation is exactly one PostgREST round trip (library tree create: two)
    - All PostgREST and transport exceptions mapped to DatabaseError (core/errors.py)
    - Auth API 4xx or an empty user → None (caller answers 401); anything else → DatabaseError

Design Decisions:
    - Row-level security does the authorization: queries filter by id only,
      except library lookups which filter by user_id
    - Zero matched rows on update/delete is None, not an error; handlers own the 404
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from supabase import (
    AsyncClient, AuthApiError, AuthError, PostgrestAPIError, acreate_client,
)
from supabase.lib.client_options import AsyncClientOptions

from flashdeck.config import Settings
from flashdeck.core.domain_types import (
    CardFace, DeckId, FlashcardId, FolderId, LibraryId, Row, Table, UserId,
    DECK_COLUMNS, FLASHCARD_COLUMNS, FOLDER_COLUMNS, LIBRARY_TREE_COLUMNS,
)
from flashdeck.core.errors import DatabaseError, ErrorContext

logger = logging.getLogger(__name__)


async def create_request_client(token: str, settings: Settings) -> AsyncClient:
    """Build a fresh Supabase client bound to the caller's token."""
    options = AsyncClientOptions(
        headers={"Authorization": f"Bearer {token}"},
        persist_session=False,
        auto_refresh_token=False,
    )
    return await acreate_client(
        settings.supabase_url, settings.supabase_anon_key, options=options,
    )


async def close_request_client(client: AsyncClient) -> None:
    """Release the PostgREST and auth HTTP connections of one request's client."""
    try:
        await client.postgrest.aclose()
    finally:
        await client.auth.close()


@asynccontextmanager
async def request_client(
    token: str, settings: Settings,
) -> AsyncGenerator[AsyncClient, None]:
    """Token-bound client for the duration of one request."""
    client = await create_request_client(token, settings)
    try:
        yield client
    finally:
        await close_request_client(client)


def _pick(row: Row, columns: str) -> Row:
    """Project a returned row onto a flat column list."""
    return {name: row.get(name) for name in columns.split(", ")}


class SupabaseIdentityResolver:
    """Verifies bearer tokens against the Supabase auth service."""

    def __init__(self, client: AsyncClient):
        self.client = client

    async def resolve_user_id(self, token: str) -> UserId | None:
        try:
            response = await self.client.auth.get_user(token)
        except AuthApiError as e:
            if e.status is not None and e.status < 500:
                logger.info(f"Token rejected by auth service ({e.status})")
                return None
            logger.error(f"Auth service error: {e.message}")
            raise DatabaseError(e.message, "get_user")
        except (AuthError, httpx.HTTPError) as e:
            logger.error(f"Auth service unreachable: {e}")
            raise DatabaseError(str(e), "get_user")
        if not response or not response.user:
            return None
        return UserId(response.user.id)


class SupabaseContentStore:
    """ContentStore over PostgREST, scoped to one request's client."""

    def __init__(self, client: AsyncClient):
        self.client = client

    async def _execute(self, query, table: Table, operation: str) -> list[Row]:
        """Run one query, mapping upstream failures to DatabaseError."""
        context = ErrorContext(table=table.value)
        try:
            response = await query.execute()
        except PostgrestAPIError as e:
            logger.error(
                f"DB {operation} on {table.value} failed: {e.message}",
                extra={"table": table.value, "operation": operation},
            )
            raise DatabaseError(e.message or str(e), operation, context)
        except httpx.HTTPError as e:
            logger.error(
                f"DB {operation} on {table.value} unreachable: {e}",
                extra={"table": table.value, "operation": operation},
            )
            raise DatabaseError(str(e), operation, context)
        return list(response.data or [])

    def _table(self, table: Table):
        return self.client.table(table.value)

    # ─── Libraries ───────────────────────────────────────────────

    async def find_library_id(self, user_id: UserId) -> LibraryId | None:
        rows = await self._execute(
            self._table(Table.LIBRARIES)
            .select("id")
            .eq("user_id", user_id)
            .order("created_at")
            .limit(1),
            Table.LIBRARIES, "select",
        )
        return LibraryId(rows[0]["id"]) if rows else None

    async def create_library(self, user_id: UserId, name: str) -> LibraryId:
        rows = await self._execute(
            self._table(Table.LIBRARIES).insert(
                {"user_id": user_id, "name": name},
            ),
            Table.LIBRARIES, "insert",
        )
        if not rows:
            raise DatabaseError("Insert returned no row", "insert")
        logger.info("Library created", extra={"table": Table.LIBRARIES.value})
        return LibraryId(rows[0]["id"])

    async def find_library_tree(self, user_id: UserId) -> Row | None:
        rows = await self._execute(
            self._table(Table.LIBRARIES)
            .select(LIBRARY_TREE_COLUMNS)
            .eq("user_id", user_id)
            .order("created_at")
            .limit(1),
            Table.LIBRARIES, "select",
        )
        return rows[0] if rows else None

    async def create_library_tree(self, user_id: UserId, name: str) -> Row:
        library_id = await self.create_library(user_id, name)
        rows = await self._execute(
            self._table(Table.LIBRARIES)
            .select(LIBRARY_TREE_COLUMNS)
            .eq("id", library_id),
            Table.LIBRARIES, "select",
        )
        if not rows:
            raise DatabaseError("Created library is not readable", "select")
        return rows[0]

    # ─── Folders ─────────────────────────────────────────────────

    async def create_folder(self, library_id: LibraryId, name: str) -> Row:
        rows = await self._execute(
            self._table(Table.FOLDERS).insert(
                {"library_id": library_id, "name": name},
            ),
            Table.FOLDERS, "insert",
        )
        if not rows:
            raise DatabaseError("Insert returned no row", "insert")
        return _pick(rows[0], FOLDER_COLUMNS)

    async def update_folder(self, folder_id: FolderId, name: str) -> Row | None:
        rows = await self._execute(
            self._table(Table.FOLDERS).update({"name": name}).eq("id", folder_id),
            Table.FOLDERS, "update",
        )
        return _pick(rows[0], FOLDER_COLUMNS) if rows else None

    # ─── Decks ───────────────────────────────────────────────────

    async def create_deck(self, folder_id: FolderId, fields: dict) -> Row:
        rows = await self._execute(
            self._table(Table.DECKS).insert({"folder_id": folder_id, **fields}),
            Table.DECKS, "insert",
        )
        if not rows:
            raise DatabaseError("Insert returned no row", "insert")
        return _pick(rows[0], DECK_COLUMNS)

    async def update_deck(self, deck_id: DeckId, fields: dict) -> Row | None:
        rows = await self._execute(
            self._table(Table.DECKS).update(fields).eq("id", deck_id),
            Table.DECKS, "update",
        )
        return _pick(rows[0], DECK_COLUMNS) if rows else None

    async def delete_deck(self, deck_id: DeckId) -> Row | None:
        rows = await self._execute(
            self._table(Table.DECKS).delete().eq("id", deck_id),
            Table.DECKS, "delete",
        )
        return {"id": rows[0].get("id")} if rows else None

    # ─── Flashcards ──────────────────────────────────────────────

    async def create_flashcard(self, deck_id: DeckId, face: CardFace) -> Row:
        rows = await self._execute(
            self._table(Table.FLASHCARDS).insert({"deck_id": deck_id, **face}),
            Table.FLASHCARDS, "insert",
        )
        if not rows:
            raise DatabaseError("Insert returned no row", "insert")
        return _pick(rows[0], FLASHCARD_COLUMNS)

    async def create_flashcards(
        self, deck_id: DeckId, faces: list[CardFace],
    ) -> list[Row]:
        rows = await self._execute(
            self._table(Table.FLASHCARDS).insert(
                [{"deck_id": deck_id, **face} for face in faces],
            ),
            Table.FLASHCARDS, "insert",
        )
        return [_pick(row, FLASHCARD_COLUMNS) for row in rows]

    async def update_flashcard(
        self, flashcard_id: FlashcardId, fields: dict,
    ) -> Row | None:
        rows = await self._execute(
            self._table(Table.FLASHCARDS).update(fields).eq("id", flashcard_id),
            Table.FLASHCARDS, "update",
        )
        return _pick(rows[0], FLASHCARD_COLUMNS) if rows else None
