"""Flashcard prompt — instructions, user content, and the strict cards schema."""

from flashdeck.core.flashcard_prompt import (
    EMIT_TOOL_NAME,
    build_cards_schema,
    build_emit_tool,
    build_instructions,
    build_user_prompt,
)


def test_instructions_interpolate_count():
    text = build_instructions(7)
    assert "exactly 7 flashcards" in text
    assert '"--"' in text


def test_user_prompt_minimal():
    assert build_user_prompt("colors", "easy") == "Theme: colors\nDifficulty: easy\n"


def test_user_prompt_optional_lines():
    prompt = build_user_prompt("colors", "hard", "exam prep", "French names")
    assert prompt.splitlines() == [
        "Theme: colors",
        "Difficulty: hard",
        "Objective: exam prep",
        "Additional details: French names",
    ]


def test_user_prompt_skips_empty_optionals():
    prompt = build_user_prompt("colors", "hard", "", "only details")
    assert "Objective" not in prompt
    assert "Additional details: only details" in prompt


def test_schema_pins_card_count():
    cards = build_cards_schema(12)["properties"]["cards"]
    assert cards["minItems"] == 12
    assert cards["maxItems"] == 12


def test_schema_is_strict():
    schema = build_cards_schema(1)
    item = schema["properties"]["cards"]["items"]
    assert schema["required"] == ["cards"]
    assert schema["additionalProperties"] is False
    assert item["required"] == ["front", "back"]
    assert item["additionalProperties"] is False
    assert item["properties"]["front"]["minLength"] == 1
    assert item["properties"]["back"]["minLength"] == 1


def test_emit_tool_wraps_schema():
    tool = build_emit_tool(5)
    assert tool["name"] == EMIT_TOOL_NAME
    assert tool["input_schema"] == build_cards_schema(5)
