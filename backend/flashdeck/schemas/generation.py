"""Generation Schemas — request and response for AI flashcard generation.

Invariants:
    - theme and difficulty: stripped, non-empty
    - count: integer in [1, 50]; numeric strings are coerced, booleans and
      anything else rejected
    - objective and details: optional, stripped, "" when absent
"""

from pydantic import BaseModel, Field, field_validator

from flashdeck.core.domain_types import MAX_GENERATED_CARDS, MIN_GENERATED_CARDS


class FlashcardGenerationRequest(BaseModel):
    """Parameters of one generation batch."""
    theme: str
    difficulty: str
    count: int = Field(ge=MIN_GENERATED_CARDS, le=MAX_GENERATED_CARDS)
    objective: str = ""
    details: str = ""

    @field_validator("theme", "difficulty")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v

    @field_validator("count", mode="before")
    @classmethod
    def reject_boolean_count(cls, v):
        # bool is an int subclass; lax mode would read true as 1.
        if isinstance(v, bool):
            raise ValueError("count must be an integer")
        return v

    @field_validator("objective", "details", mode="before")
    @classmethod
    def strip_optional(cls, v):
        return v.strip() if isinstance(v, str) else ""


class FlashcardGenerationResponse(BaseModel):
    """Newline-joined "front--back" pairs."""
    lines: str
