"""Flashcard Generation Prompt — pure builders for instructions, user content, and output schema.

Invariants:
    - Instructions interpolate only the requested count
    - User content lists theme and difficulty, then objective/details only when non-empty
    - Output schema demands exactly `count` cards, each with non-empty front and back,
      and no extra properties
    - The emit tool's input_schema IS the output schema

Design Decisions:
    - Structured output via a single forced tool (Anthropic Tool Use format):
      the model's tool input is the JSON document the schema describes
"""

from flashdeck.core.domain_types import LINE_SEPARATOR

EMIT_TOOL_NAME = "emit_flashcards"


def build_instructions(count: int) -> str:
    """System prompt for a batch of `count` flashcards."""
    return (
        "You are a flashcard generator.\n"
        f"You produce exactly {count} flashcards.\n"
        '- "front": short question / term / prompt\n'
        '- "back": short, useful answer\n'
        "- avoid long lists, 1 to 2 sentences max per field\n"
        "- no markdown\n"
        f'- never use the "{LINE_SEPARATOR}" separator inside a field '
        "(it is reserved for display)\n"
    )


def build_user_prompt(
    theme: str,
    difficulty: str,
    objective: str = "",
    details: str = "",
) -> str:
    """User content block assembled from the request fields."""
    prompt = f"Theme: {theme}\nDifficulty: {difficulty}\n"
    if objective:
        prompt += f"Objective: {objective}\n"
    if details:
        prompt += f"Additional details: {details}\n"
    return prompt


def build_cards_schema(count: int) -> dict:
    """Strict JSON schema: {"cards": [exactly `count` x {front, back}]}."""
    return {
        "type": "object",
        "properties": {
            "cards": {
                "type": "array",
                "minItems": count,
                "maxItems": count,
                "items": {
                    "type": "object",
                    "properties": {
                        "front": {"type": "string", "minLength": 1},
                        "back": {"type": "string", "minLength": 1},
                    },
                    "required": ["front", "back"],
                    "additionalProperties": False,
                },
            },
        },
        "required": ["cards"],
        "additionalProperties": False,
    }


def build_emit_tool(count: int) -> dict:
    """Tool definition whose input is the flashcard JSON document."""
    return {
        "name": EMIT_TOOL_NAME,
        "description": (
            f"Returns the {count} generated flashcards. "
            "Call exactly once with every card."
        ),
        "input_schema": build_cards_schema(count),
    }
