"""Folder Routes — POST /api/folder: rename (id) or create in the caller's library.

Invariants:
    - Identity is resolved before the body is read
    - The caller's library is found or created before either branch
    - Create → 201 {folder}; rename → 200 {folder}; zero rows → 404
"""

from fastapi import APIRouter, Depends, Response, status

from flashdeck.api.bearer_route import BearerFirstRoute
from flashdeck.api.dependencies import get_content_store, get_current_user_id
from flashdeck.config import Settings, get_settings
from flashdeck.core.domain_types import FolderId, UserId
from flashdeck.core.repository_protocols import ContentStore
from flashdeck.schemas.content import FolderUpsert
from flashdeck.services.handle_folder import FolderHandlers
from flashdeck.services.handle_library import LibraryHandlers

router = APIRouter(
    prefix="/api/folder", tags=["folders"], route_class=BearerFirstRoute,
)


@router.post("")
async def upsert_folder(
    body: FolderUpsert,
    response: Response,
    user_id: UserId = Depends(get_current_user_id),
    store: ContentStore = Depends(get_content_store),
    settings: Settings = Depends(get_settings),
):
    """Rename a folder when `id` is given, otherwise create one."""
    handlers = FolderHandlers(
        store, LibraryHandlers(store, settings.default_library_name),
    )
    if body.id:
        folder = await handlers.rename(user_id, FolderId(body.id), body.name)
        return {"folder": folder}

    folder = await handlers.create(user_id, body.name)
    response.status_code = status.HTTP_201_CREATED
    return {"folder": folder}
