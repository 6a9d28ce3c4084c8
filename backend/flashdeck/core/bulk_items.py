"""Bulk Flashcard Items — trim, filter, and bound a batch before it reaches the database.

Invariants:
    - Raw batch size is checked before filtering: 0 or > MAX_BULK_ITEMS is rejected
    - An item survives only if both front and back are non-empty strings after trimming
    - A batch with no survivors is rejected
    - Input order is preserved
"""

from typing import Any

from flashdeck.core.domain_types import CardFace, MAX_BULK_ITEMS
from flashdeck.core.errors import InvalidRequestError


def _trimmed(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def clean_bulk_items(raw_items: list[Any]) -> list[CardFace]:
    """Return the insertable front/back pairs of a bulk request."""
    if not raw_items:
        raise InvalidRequestError("No items to insert", "items")
    if len(raw_items) > MAX_BULK_ITEMS:
        raise InvalidRequestError(
            f"Too many items (max {MAX_BULK_ITEMS})", "items",
        )

    items: list[CardFace] = []
    for item in raw_items:
        if not isinstance(item, dict):
            continue
        front = _trimmed(item.get("front"))
        back = _trimmed(item.get("back"))
        if front and back:
            items.append(CardFace(front=front, back=back))

    if not items:
        raise InvalidRequestError(
            "No valid items (need front + back)", "items",
        )
    return items
