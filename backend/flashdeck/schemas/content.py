"""Content Schemas — request bodies for folder, deck, and flashcard endpoints.

Invariants:
    - Required strings are stripped and must be non-empty
    - Non-string values for optional string fields count as absent; blank
      identifiers too ("" id → create, not update)
    - items selects bulk mode only when it is a JSON array
    - id present → update branch: parent id not required
    - id absent → create branch: parent id required (folder: implicit library)
    - Flashcard single mode requires front and back; bulk mode (items) is
      filtered and bounded by core/bulk_items.py in the service

Design Decisions:
    - Cross-field rules in model_validator: one error per request, raised before
      any database call
"""

from typing import Any

from pydantic import BaseModel, field_validator, model_validator


def _strip_required(v: str, field_name: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError(f"{field_name} cannot be empty or whitespace")
    return v


def _blank_to_none(v: Any) -> str | None:
    """Optional string field: non-strings and blanks are absent."""
    if not isinstance(v, str):
        return None
    return v.strip() or None


class FolderUpsert(BaseModel):
    """Folder rename (id) or create in the caller's library."""
    id: str | None = None
    name: str

    @field_validator("id", mode="before")
    @classmethod
    def blank_id(cls, v: Any) -> str | None:
        return _blank_to_none(v)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_required(v, "name")


class DeckUpsert(BaseModel):
    """Deck rename (id) or create in a folder (folder_id)."""
    id: str | None = None
    folder_id: str | None = None
    title: str
    description: str | None = None
    difficulty: str | None = None
    objective: str | None = None

    @field_validator("id", "folder_id", mode="before")
    @classmethod
    def blank_ids(cls, v: Any) -> str | None:
        return _blank_to_none(v)

    @field_validator("description", "difficulty", "objective", mode="before")
    @classmethod
    def text_or_none(cls, v: Any) -> str | None:
        # Stored as sent; only non-strings are dropped.
        return v if isinstance(v, str) else None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_required(v, "title")

    @model_validator(mode="after")
    def require_folder_on_create(self):
        if self.id is None and self.folder_id is None:
            raise ValueError('Missing "folder_id"')
        return self

    def deck_fields(self) -> dict:
        """Columns written on both create and rename."""
        return {
            "title": self.title,
            "description": self.description,
            "difficulty": self.difficulty,
            "objective": self.objective,
        }


class FlashcardUpsert(BaseModel):
    """Flashcard update (id), single create (front/back) or bulk create (items)."""
    id: str | None = None
    deck_id: str | None = None
    front: str | None = None
    back: str | None = None
    status: str | None = None
    items: list[Any] | None = None

    @field_validator("id", "deck_id", "front", "back", "status", mode="before")
    @classmethod
    def blank_strings(cls, v: Any) -> str | None:
        return _blank_to_none(v)

    @field_validator("items", mode="before")
    @classmethod
    def list_or_none(cls, v: Any) -> list | None:
        """Only a JSON array selects bulk mode."""
        return v if isinstance(v, list) else None

    @model_validator(mode="after")
    def validate_mode_fields(self):
        if self.id is not None:
            _require_faces(self)
        elif self.deck_id is None:
            raise ValueError('Missing "deck_id"')
        elif self.items is None:
            _require_faces(self)
        return self

    @property
    def is_bulk(self) -> bool:
        return self.id is None and self.items is not None

    def update_fields(self) -> dict:
        """Columns written on update; status only when supplied."""
        fields = {"front": self.front, "back": self.back}
        if self.status:
            fields["status"] = self.status
        return fields


def _require_faces(body: FlashcardUpsert) -> None:
    if not body.front:
        raise ValueError('Missing "front"')
    if not body.back:
        raise ValueError('Missing "back"')
