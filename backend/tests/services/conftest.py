"""Service test fixtures — in-memory store + FastAPI test client.

Invariants:
    - Every test gets a fresh InMemoryContentStore
    - get_content_store / get_identity_resolver / get_flashcard_generator are
      overridden; no Supabase or Anthropic client is ever built
    - Token "token-alice" resolves to user "user-alice"; any other token is rejected

Design Decisions:
    - Overrides at the dependency seam leave bearer parsing and the 401 path real
"""

import pytest
from httpx import ASGITransport, AsyncClient

from flashdeck.api.dependencies import (
    get_content_store, get_flashcard_generator, get_identity_resolver,
)
from flashdeck.main import app

from tests.services.fake_store import (
    ALICE_ID, ALICE_TOKEN, FakeIdentityResolver, InMemoryContentStore,
)
from tests.services.mock_anthropic import MockFlashcardGenerator


@pytest.fixture
def store():
    return InMemoryContentStore()


@pytest.fixture
def resolver():
    return FakeIdentityResolver({ALICE_TOKEN: ALICE_ID})


@pytest.fixture
def generator():
    """Generator with no configured responses; tests replace ._responses."""
    return MockFlashcardGenerator([])


@pytest.fixture
async def client(store, resolver, generator):
    """FastAPI test client with external services overridden."""
    app.dependency_overrides[get_content_store] = lambda: store
    app.dependency_overrides[get_identity_resolver] = lambda: resolver
    app.dependency_overrides[get_flashcard_generator] = lambda: generator

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def alice_library(store):
    """Alice already owns a library."""
    return store.seed_library(ALICE_ID, "Alice's library")


@pytest.fixture
def alice_folder(store, alice_library):
    return store.seed_folder(alice_library, "Japanese")


@pytest.fixture
def alice_deck(store, alice_folder):
    return store.seed_deck(alice_folder, "Kana")
