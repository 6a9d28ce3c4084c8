"""Folder Handlers — rename by id, or create in the caller's library."""

from flashdeck.core.domain_types import FolderId, Row, UserId
from flashdeck.core.errors import ResourceNotFoundError
from flashdeck.core.repository_protocols import ContentStore
from flashdeck.services.handle_library import LibraryHandlers


class FolderHandlers:
    """Folder mutations. Both paths resolve the library first."""

    def __init__(self, store: ContentStore, libraries: LibraryHandlers):
        self.store = store
        self.libraries = libraries

    async def create(self, user_id: UserId, name: str) -> Row:
        library_id = await self.libraries.ensure_library_id(user_id)
        return await self.store.create_folder(library_id, name)

    async def rename(self, user_id: UserId, folder_id: FolderId, name: str) -> Row:
        # Ownership of folder_id is left to row-level security.
        await self.libraries.ensure_library_id(user_id)
        folder = await self.store.update_folder(folder_id, name)
        if folder is None:
            raise ResourceNotFoundError("Folder", folder_id)
        return folder
