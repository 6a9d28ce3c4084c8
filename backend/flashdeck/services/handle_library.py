"""Library Handlers — find-or-create of the caller's library and the nested library read.

Invariants:
    - A user with no library gets exactly one, named default_library_name
    - A user with a library never gets a second one from these handlers
    - Lookups are scoped by user_id; everything else is delegated to row-level security

Design Decisions:
    - Read-then-write find-or-create: two concurrent first requests can each create a
      library; a unique constraint on libraries.user_id in the database closes that gap
"""

import logging

from flashdeck.core.domain_types import LibraryId, Row, UserId
from flashdeck.core.repository_protocols import ContentStore

logger = logging.getLogger(__name__)


class LibraryHandlers:
    """Library lookups bound to one request's store."""

    def __init__(self, store: ContentStore, default_name: str):
        self.store = store
        self.default_name = default_name

    async def ensure_library_id(self, user_id: UserId) -> LibraryId:
        """Return the caller's library id, creating the library if absent."""
        library_id = await self.store.find_library_id(user_id)
        if library_id is not None:
            return library_id
        logger.info("No library for user, creating default library")
        return await self.store.create_library(user_id, self.default_name)

    async def get_library(self, user_id: UserId) -> Row:
        """Return the caller's library with folders → decks, creating it if absent."""
        library = await self.store.find_library_tree(user_id)
        if library is not None:
            return library
        logger.info("No library for user, creating default library")
        return await self.store.create_library_tree(user_id, self.default_name)
