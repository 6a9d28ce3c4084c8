"""AnthropicFlashcardClient — request shape, document extraction, SDK error mapping.

Tests cover:
    - Forced emit_flashcards tool carrying the count-pinned schema
    - Instructions sent as system, prompt as the single user message
    - Tool input returned as JSON text; text blocks as the fallback
    - Timeout / connection / status errors → ModelAPIError with a typed reason
"""

import json

import anthropic
import httpx
import pytest

from flashdeck.core.errors import ModelAPIError
from flashdeck.core.flashcard_prompt import EMIT_TOOL_NAME, build_cards_schema
from flashdeck.infrastructure.anthropic_client import AnthropicFlashcardClient

from tests.services.mock_anthropic import (
    FakeMessages, cards, text_message, tool_message,
)

_REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


def _client(outcome):
    client = AnthropicFlashcardClient(api_key="test-key", model="test-model", max_tokens=1024)
    client.client.messages = FakeMessages(outcome)
    return client


async def _generate(client, count=3):
    return await client.generate_cards_json(
        instructions="be precise", user_prompt="Theme: x\n", count=count,
    )


async def test_forces_emit_tool_with_pinned_schema():
    client = _client(tool_message(cards(3)))

    await _generate(client)

    call = client.client.messages.calls[0]
    assert call["model"] == "test-model"
    assert call["max_tokens"] == 1024
    assert call["system"] == "be precise"
    assert call["messages"] == [{"role": "user", "content": "Theme: x\n"}]
    assert call["tool_choice"] == {"type": "tool", "name": EMIT_TOOL_NAME}
    assert call["tools"][0]["input_schema"] == build_cards_schema(3)


async def test_returns_tool_input_as_json():
    document = {"cards": [{"front": "été", "back": "summer"}]}
    client = _client(tool_message(document))

    raw = await _generate(client, count=1)

    assert json.loads(raw) == document
    assert "été" in raw


async def test_falls_back_to_text_blocks():
    client = _client(text_message('{"cards": []}'))
    assert await _generate(client) == '{"cards": []}'


async def test_ignores_unrelated_tool():
    client = _client(tool_message(cards(1), name="other_tool"))
    assert await _generate(client) == ""


@pytest.mark.parametrize("error,reason", [
    (anthropic.APITimeoutError(request=_REQUEST), "timeout"),
    (anthropic.APIConnectionError(request=_REQUEST), "connection_error"),
    (
        anthropic.RateLimitError(
            "rate limited", response=httpx.Response(429, request=_REQUEST), body=None,
        ),
        "status_429",
    ),
    (
        anthropic.InternalServerError(
            "overloaded", response=httpx.Response(529, request=_REQUEST), body=None,
        ),
        "status_529",
    ),
])
async def test_sdk_errors_map_to_model_api_error(error, reason):
    client = _client(error)

    with pytest.raises(ModelAPIError) as exc:
        await _generate(client)

    assert exc.value.api_error_type == reason
    assert exc.value.http_status == 500
    assert len(client.client.messages.calls) == 1
