"""Flashcard Routes — update, single create, bulk create, validation.

Invariants:
    - Bulk inserts exactly the items with non-empty trimmed front and back, in one call
    - Bulk with 0 raw items, > 300 raw items, or 0 valid items → 400 before any insert
    - Single create without front/back → 400; without deck_id → 400
    - Update writes status only when supplied; missing row → 404
"""

import pytest

from tests.services.fake_store import AUTH


async def test_single_create(client, store, alice_deck):
    res = await client.post(
        "/api/flashcard",
        json={"deck_id": alice_deck, "front": " 山 ", "back": " mountain "},
        headers=AUTH,
    )

    assert res.status_code == 201
    card = res.json()["flashcard"]
    assert card["front"] == "山"
    assert card["back"] == "mountain"
    assert card["deck_id"] == alice_deck
    assert card["status"] == "new"


@pytest.mark.parametrize("body", [
    {"front": "a"},
    {"back": "b"},
    {"front": "  ", "back": "b"},
    {"front": "a", "back": ""},
])
async def test_single_create_missing_face_returns_400(client, store, alice_deck, body):
    res = await client.post(
        "/api/flashcard", json={"deck_id": alice_deck, **body}, headers=AUTH,
    )

    assert res.status_code == 400
    assert store.mutations == []


async def test_create_without_deck_id_returns_400(client, store):
    res = await client.post(
        "/api/flashcard", json={"front": "a", "back": "b"}, headers=AUTH,
    )

    assert res.status_code == 400
    assert store.mutations == []


async def test_bulk_inserts_filtered_items_in_one_call(client, store, alice_deck):
    items = [
        {"front": " one ", "back": "un"},
        {"front": "", "back": "deux"},
        {"front": "three", "back": "   "},
        {"front": "four"},
        "not an object",
        {"front": "five", "back": "cinq"},
    ]

    res = await client.post(
        "/api/flashcard", json={"deck_id": alice_deck, "items": items}, headers=AUTH,
    )

    assert res.status_code == 201
    body = res.json()
    assert body["createdCount"] == 2
    assert [(c["front"], c["back"]) for c in body["flashcards"]] == [
        ("one", "un"), ("five", "cinq"),
    ]
    assert store.mutations == ["create_flashcards"]


async def test_bulk_at_limit_is_accepted(client, store, alice_deck):
    items = [{"front": f"f{i}", "back": f"b{i}"} for i in range(300)]

    res = await client.post(
        "/api/flashcard", json={"deck_id": alice_deck, "items": items}, headers=AUTH,
    )

    assert res.status_code == 201
    assert res.json()["createdCount"] == 300


async def test_bulk_over_limit_rejected_before_insert(client, store, alice_deck):
    items = [{"front": f"f{i}", "back": f"b{i}"} for i in range(301)]

    res = await client.post(
        "/api/flashcard", json={"deck_id": alice_deck, "items": items}, headers=AUTH,
    )

    assert res.status_code == 400
    assert "300" in res.json()["error"]["message"]
    assert store.mutations == []


async def test_bulk_empty_rejected_before_insert(client, store, alice_deck):
    res = await client.post(
        "/api/flashcard", json={"deck_id": alice_deck, "items": []}, headers=AUTH,
    )

    assert res.status_code == 400
    assert store.mutations == []


async def test_bulk_with_no_valid_items_rejected_before_insert(client, store, alice_deck):
    items = [{"front": " ", "back": "x"}, {"back": "y"}]

    res = await client.post(
        "/api/flashcard", json={"deck_id": alice_deck, "items": items}, headers=AUTH,
    )

    assert res.status_code == 400
    assert res.json()["error"]["message"] == "No valid items (need front + back)"
    assert store.mutations == []


async def test_update_flashcard(client, store, alice_deck):
    card_id = store.seed_flashcard(alice_deck, "old", "old")

    res = await client.post(
        "/api/flashcard",
        json={"id": card_id, "front": "new front", "back": "new back", "status": "learned"},
        headers=AUTH,
    )

    assert res.status_code == 200
    card = res.json()["flashcard"]
    assert (card["front"], card["back"], card["status"]) == (
        "new front", "new back", "learned",
    )


async def test_update_without_status_keeps_status(client, store, alice_deck):
    card_id = store.seed_flashcard(alice_deck)

    await client.post(
        "/api/flashcard", json={"id": card_id, "front": "f", "back": "b"}, headers=AUTH,
    )

    _, (_, fields) = store.calls[-1]
    assert "status" not in fields
    assert store.flashcards[card_id]["status"] == "new"


async def test_update_requires_front_and_back(client, store, alice_deck):
    card_id = store.seed_flashcard(alice_deck)

    res = await client.post(
        "/api/flashcard", json={"id": card_id, "front": "only front"}, headers=AUTH,
    )

    assert res.status_code == 400
    assert store.mutations == []


async def test_update_missing_flashcard_returns_404(client):
    res = await client.post(
        "/api/flashcard", json={"id": "missing", "front": "f", "back": "b"}, headers=AUTH,
    )
    assert res.status_code == 404


@pytest.mark.parametrize("items", ["a--b", {"front": "a", "back": "b"}, 3])
async def test_non_array_items_is_single_create(client, store, alice_deck, items):
    res = await client.post(
        "/api/flashcard",
        json={"deck_id": alice_deck, "items": items, "front": "a", "back": "b"},
        headers=AUTH,
    )

    assert res.status_code == 201
    assert res.json()["flashcard"]["front"] == "a"
    assert store.mutations == ["create_flashcard"]


async def test_non_array_items_without_faces_returns_400(client, store, alice_deck):
    res = await client.post(
        "/api/flashcard", json={"deck_id": alice_deck, "items": "x"}, headers=AUTH,
    )

    assert res.status_code == 400
    assert store.mutations == []
