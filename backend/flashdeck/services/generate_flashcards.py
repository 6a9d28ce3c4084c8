"""Flashcard Generation — prompt, one model call, parse, format as lines.

Invariants:
    - Exactly one model call per request
    - Unparseable model output → InvalidModelOutputError carrying the raw text
    - A parsed document without a cards list → empty lines (not an error)

Design Decisions:
    - Impureim sandwich: pure prompt build → model call → pure parse/format
"""

from flashdeck.core.flashcard_prompt import build_instructions, build_user_prompt
from flashdeck.core.format_lines import format_card_lines, parse_cards_document
from flashdeck.core.repository_protocols import FlashcardGenerator
from flashdeck.schemas.generation import FlashcardGenerationRequest


async def generate_flashcard_lines(
    generator: FlashcardGenerator, request: FlashcardGenerationRequest,
) -> str:
    """Generate `request.count` cards and return them as "front--back" lines."""
    raw = await generator.generate_cards_json(
        instructions=build_instructions(request.count),
        user_prompt=build_user_prompt(
            request.theme, request.difficulty,
            request.objective, request.details,
        ),
        count=request.count,
    )
    document = parse_cards_document(raw)
    return format_card_lines(document)
