"""Flashcard Line Formatting — turns a parsed model document into "front--back" lines.

Invariants:
    - A document without a "cards" list yields an empty string
    - Newlines inside a field become spaces; fields are trimmed
    - One "front--back" pair per line, lines joined by "\\n"
"""

import json
from typing import Any

from flashdeck.core.domain_types import LINE_SEPARATOR
from flashdeck.core.errors import InvalidModelOutputError


def parse_cards_document(raw: str) -> Any:
    """Parse the model's JSON text. Raises InvalidModelOutputError with the raw text."""
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        raise InvalidModelOutputError(raw)


def _flatten(value: Any) -> str:
    text = "" if value is None else str(value)
    return text.replace("\r\n", " ").replace("\n", " ").strip()


def format_card_lines(document: Any) -> str:
    """Join each card of the document as "front--back", one per line."""
    cards = document.get("cards") if isinstance(document, dict) else None
    if not isinstance(cards, list):
        return ""
    lines = []
    for card in cards:
        card = card if isinstance(card, dict) else {}
        front = _flatten(card.get("front"))
        back = _flatten(card.get("back"))
        lines.append(f"{front}{LINE_SEPARATOR}{back}")
    return "\n".join(lines)
