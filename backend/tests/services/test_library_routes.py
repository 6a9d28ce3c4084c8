"""Library Route — nested read and first-read creation."""

from tests.services.fake_store import ALICE_ID, AUTH


async def test_returns_nested_folders_and_decks(client, store, alice_library, alice_deck):
    res = await client.get("/api/library", headers=AUTH)

    assert res.status_code == 200
    library = res.json()["library"]
    assert library["id"] == alice_library
    assert library["folders"][0]["name"] == "Japanese"
    assert library["folders"][0]["decks"][0]["id"] == alice_deck


async def test_first_read_creates_empty_default_library(client, store):
    res = await client.get("/api/library", headers=AUTH)

    assert res.status_code == 200
    library = res.json()["library"]
    assert library["name"] == "My Library"
    assert library["folders"] == []
    assert [lib["user_id"] for lib in store.libraries.values()] == [ALICE_ID]


async def test_second_read_does_not_create_again(client, store):
    await client.get("/api/library", headers=AUTH)
    await client.get("/api/library", headers=AUTH)

    assert len(store.libraries) == 1
