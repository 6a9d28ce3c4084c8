"""Library Routes — GET /api/library: the caller's library with folders → decks."""

from fastapi import APIRouter, Depends

from flashdeck.api.bearer_route import BearerFirstRoute
from flashdeck.api.dependencies import get_content_store, get_current_user_id
from flashdeck.config import Settings, get_settings
from flashdeck.core.domain_types import UserId
from flashdeck.core.repository_protocols import ContentStore
from flashdeck.services.handle_library import LibraryHandlers

router = APIRouter(
    prefix="/api/library", tags=["library"], route_class=BearerFirstRoute,
)


@router.get("")
async def get_library(
    user_id: UserId = Depends(get_current_user_id),
    store: ContentStore = Depends(get_content_store),
    settings: Settings = Depends(get_settings),
):
    """Return the caller's library; an empty default one is created on first read."""
    handlers = LibraryHandlers(store, settings.default_library_name)
    return {"library": await handlers.get_library(user_id)}
