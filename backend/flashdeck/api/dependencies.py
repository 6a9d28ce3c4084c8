"""Request Dependencies — credential → per-request session → identity, as FastAPI dependencies.

Invariants:
    - get_bearer_token raises UnauthorizedError for an absent or malformed header
    - get_request_client builds one Supabase client per request and closes it when
      the request is done (FastAPI caches it within the request, never across requests)
    - get_current_user_id raises the same UnauthorizedError when the token is rejected
    - Dependencies resolve before the body is validated: 401 wins over 400
      (a missing credential is refused even earlier, by api/bearer_route.py)

Design Decisions:
    - Store, resolver and generator are separate dependencies so tests can
      override each with an in-memory fake
"""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends, Header
from supabase import AsyncClient

from flashdeck.config import Settings, get_settings
from flashdeck.core.bearer import extract_bearer_token
from flashdeck.core.domain_types import UserId
from flashdeck.core.errors import UnauthorizedError
from flashdeck.core.repository_protocols import (
    ContentStore, FlashcardGenerator, IdentityResolver,
)
from flashdeck.infrastructure.anthropic_client import AnthropicFlashcardClient
from flashdeck.infrastructure.database import (
    SupabaseContentStore, SupabaseIdentityResolver, request_client,
)


async def get_bearer_token(
    authorization: str | None = Header(default=None),
) -> str:
    token = extract_bearer_token(authorization)
    if token is None:
        raise UnauthorizedError()
    return token


async def get_request_client(
    token: str = Depends(get_bearer_token),
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI dependency for the request's Supabase client; closed after the response."""
    async with request_client(token, settings) as client:
        yield client


async def get_identity_resolver(
    client: AsyncClient = Depends(get_request_client),
) -> IdentityResolver:
    return SupabaseIdentityResolver(client)


async def get_content_store(
    client: AsyncClient = Depends(get_request_client),
) -> ContentStore:
    return SupabaseContentStore(client)


async def get_current_user_id(
    token: str = Depends(get_bearer_token),
    resolver: IdentityResolver = Depends(get_identity_resolver),
) -> UserId:
    user_id = await resolver.resolve_user_id(token)
    if user_id is None:
        raise UnauthorizedError()
    return user_id


@lru_cache
def get_flashcard_generator() -> FlashcardGenerator:
    settings = get_settings()
    return AnthropicFlashcardClient(
        api_key=settings.anthropic_api_key,
        model=settings.generation_model,
        max_tokens=settings.generation_max_tokens,
        timeout_seconds=settings.anthropic_timeout_seconds,
    )
