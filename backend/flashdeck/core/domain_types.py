"""Domain Types — identifiers, row shapes, and the fixed limits of the content tree.

Invariants:
    - UserId, LibraryId, FolderId, DeckId, FlashcardId are opaque strings issued by the database
    - Rows are plain dicts exactly as the database service returns them
    - Column lists are the single source for what each endpoint returns

Design Decisions:
    - NewType over dataclass wrappers: rows pass through untouched to the JSON response
"""

from enum import Enum
from typing import Any, NewType, TypedDict


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
LibraryId = NewType("LibraryId", str)
FolderId = NewType("FolderId", str)
DeckId = NewType("DeckId", str)
FlashcardId = NewType("FlashcardId", str)

Row = dict[str, Any]


class CardFace(TypedDict):
    """Front/back pair as inserted or generated."""
    front: str
    back: str


# ─── Tables ──────────────────────────────────────────────────────

class Table(str, Enum):
    """Tables exposed by the database service."""
    LIBRARIES = "libraries"
    FOLDERS = "folders"
    DECKS = "decks"
    FLASHCARDS = "flashcards"


LIBRARY_TREE_COLUMNS = (
    "id, name, created_at, "
    "folders (id, name, created_at, "
    "decks (id, title, description, difficulty, objective, created_at))"
)
FOLDER_COLUMNS = "id, library_id, name, created_at"
DECK_COLUMNS = "id, folder_id, title, description, difficulty, objective, created_at"
FLASHCARD_COLUMNS = "id, deck_id, front, back, status, created_at"


# ─── Limits ──────────────────────────────────────────────────────

MAX_BULK_ITEMS = 300
MIN_GENERATED_CARDS = 1
MAX_GENERATED_CARDS = 50
LINE_SEPARATOR = "--"
