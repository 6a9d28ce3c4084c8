"""Bearer extraction — pure tests for extract_bearer_token.

Tests cover:
    - Well-formed headers, any scheme casing
    - Missing, empty, scheme-only, token-only, wrong-scheme, extra-part headers → None
"""

import pytest

from flashdeck.core.bearer import extract_bearer_token


@pytest.mark.parametrize("header", [
    "Bearer abc.def.ghi",
    "bearer abc.def.ghi",
    "BEARER abc.def.ghi",
    "  Bearer   abc.def.ghi  ",
])
def test_extracts_token(header):
    assert extract_bearer_token(header) == "abc.def.ghi"


@pytest.mark.parametrize("header", [
    None,
    "",
    "   ",
    "Bearer",
    "Bearer ",
    "abc.def.ghi",
    "Basic abc.def.ghi",
    "Token abc.def.ghi",
    "Bearer abc def",
    "Bearerabc",
])
def test_rejects_malformed_header(header):
    assert extract_bearer_token(header) is None
