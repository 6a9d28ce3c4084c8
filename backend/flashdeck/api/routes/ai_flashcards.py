"""AI Flashcard Routes — POST /api/ai/flashcards: generate "front--back" lines.

Invariants:
    - Only the presence of a bearer token is checked; identity is NOT resolved
    - One model call per request, no retry
    - Invalid model JSON → 500 with the raw text in the error envelope
"""

import logging

from fastapi import APIRouter, Depends

from flashdeck.api.bearer_route import BearerFirstRoute
from flashdeck.api.dependencies import get_bearer_token, get_flashcard_generator
from flashdeck.core.repository_protocols import FlashcardGenerator
from flashdeck.schemas.generation import (
    FlashcardGenerationRequest, FlashcardGenerationResponse,
)
from flashdeck.services.generate_flashcards import generate_flashcard_lines

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/ai", tags=["ai"], route_class=BearerFirstRoute,
    dependencies=[Depends(get_bearer_token)],
)


@router.post("/flashcards", response_model=FlashcardGenerationResponse)
async def generate_flashcards(
    body: FlashcardGenerationRequest,
    generator: FlashcardGenerator = Depends(get_flashcard_generator),
):
    """Generate `count` flashcards for a theme and difficulty."""
    lines = await generate_flashcard_lines(generator, body)
    logger.info("Flashcards generated", extra={"card_count": body.count})
    return FlashcardGenerationResponse(lines=lines)
