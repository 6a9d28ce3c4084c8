"""Anthropic Flashcard Client — wraps AsyncAnthropic with structured output and error mapping.

Invariants:
    - One messages.create call per generation request, no retry, no backoff
    - The model is forced to answer through the emit_flashcards tool, whose
      input_schema is the strict cards schema
    - Returns the cards document as JSON text: the tool input serialized, or the
      concatenated text blocks when no tool_use block came back
    - All SDK failures mapped to ModelAPIError (core/errors.py)

Design Decisions:
    - Timeout delegated to the SDK client (anthropic_timeout_seconds); the SDK's own
      retries are disabled with max_retries=0
"""

import json
import logging

import anthropic
from anthropic import (
    APIError,
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
)

from flashdeck.core.errors import ModelAPIError, ErrorContext
from flashdeck.core.flashcard_prompt import EMIT_TOOL_NAME, build_emit_tool

logger = logging.getLogger(__name__)


class AnthropicFlashcardClient:
    """Generates flashcard documents through the Anthropic Messages API."""

    def __init__(
        self,
        api_key: str,
        model: str,
        max_tokens: int = 8192,
        timeout_seconds: int = 120,
    ):
        self.client = anthropic.AsyncAnthropic(
            api_key=api_key,
            timeout=timeout_seconds,
            max_retries=0,
        )
        self.model = model
        self.max_tokens = max_tokens

    async def generate_cards_json(
        self,
        *,
        instructions: str,
        user_prompt: str,
        count: int,
        context: ErrorContext | None = None,
    ) -> str:
        """Ask for exactly `count` cards and return the document as JSON text."""
        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                system=instructions,
                tools=[build_emit_tool(count)],
                tool_choice={"type": "tool", "name": EMIT_TOOL_NAME},
                messages=[{"role": "user", "content": user_prompt}],
            )
        except APITimeoutError:
            raise ModelAPIError("API timeout", "timeout", context=context)
        except APIConnectionError as e:
            raise ModelAPIError(str(e), "connection_error", context=context)
        except APIStatusError as e:
            raise ModelAPIError(
                str(e), f"status_{e.status_code}", context=context,
            )
        except APIError as e:
            raise ModelAPIError(str(e), "client_error", context=context)

        self._log_success(response, count)
        return _extract_document_text(response)

    def _log_success(self, response, count: int) -> None:
        """Log successful API call with token usage."""
        usage = response.usage
        logger.info(
            "Anthropic API success",
            extra={
                "model": self.model,
                "card_count": count,
                "input_tokens": usage.input_tokens,
                "output_tokens": usage.output_tokens,
            },
        )


def _extract_document_text(response) -> str:
    """Tool input as JSON text, else the text blocks as returned."""
    texts = []
    for block in response.content:
        if block.type == "tool_use" and block.name == EMIT_TOOL_NAME:
            return json.dumps(block.input, ensure_ascii=False)
        if block.type == "text":
            texts.append(block.text)
    return "".join(texts)
