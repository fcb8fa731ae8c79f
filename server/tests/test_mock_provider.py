"""Tests for the mock token source used when no API key is configured."""

import pytest

from aibot.providers import mock
from aibot.providers.mock import (
    CODE_EXAMPLE,
    EXPLANATION,
    LIST_CONTENT,
    MockProvider,
    get_mock_response,
    split_words,
)
from aibot.schemas.chat import ModelSelection

SELECTION = ModelSelection(requested_model="llama3-8b", resolved_model="llama3-8b-8192")


def test_mock_response_is_deterministic():
    msg = "What is the capital of France?"
    assert get_mock_response(msg) == get_mock_response(msg)


def test_template_selected_by_char_code_sum():
    msg = "hi"
    templates = mock._templates(msg)
    expected = templates[(ord("h") + ord("i")) % len(templates)]
    assert get_mock_response(msg) == expected


def test_explanation_block_appended():
    msg = "explain how recursion works"
    out = get_mock_response(msg)
    assert out.endswith(EXPLANATION)
    assert "1. **First Point**" in out
    assert "2. **Second Point**" in out
    assert "3. **Third Point**" in out
    assert CODE_EXAMPLE not in out


def test_code_block_appended():
    out = get_mock_response("show me some code")
    assert out.endswith(CODE_EXAMPLE)
    assert "```javascript" in out


def test_list_block_appended():
    out = get_mock_response("give me a list")
    assert out.endswith(LIST_CONTENT)


def test_first_keyword_match_wins():
    # "code" and "explain" both match; only the code block is added
    out = get_mock_response("explain this code")
    assert out.endswith(CODE_EXAMPLE)
    assert EXPLANATION not in out


def test_keyword_match_is_case_insensitive():
    assert get_mock_response("FUNCTION please").endswith(CODE_EXAMPLE)


def test_no_contextual_block_for_plain_text():
    out = get_mock_response("hello there")
    assert CODE_EXAMPLE not in out and EXPLANATION not in out and LIST_CONTENT not in out


def test_split_words_keeps_text():
    text = "one two  three\nfour"
    words = split_words(text)
    assert "".join(words) == text
    assert words[-1] == "three\nfour"
    assert all(w.endswith(" ") for w in words[:-1])


@pytest.mark.asyncio
async def test_mock_stream_shape():
    tokens = [t async for t in MockProvider().stream("hello there", SELECTION)]
    assert tokens[0].finished is False
    assert "API Key Required" in tokens[0].content
    assert "(Requested: llama3-8b)" in tokens[0].content
    assert tokens[-1].finished is True
    assert not any(t.finished for t in tokens[:-1])
    assert not tokens[-1].content.endswith(" ")


@pytest.mark.asyncio
async def test_mock_stream_reproducible():
    provider = MockProvider()
    first = "".join([t.content async for t in provider.stream("explain how recursion works", SELECTION)])
    second = "".join([t.content async for t in provider.stream("explain how recursion works", SELECTION)])
    assert first == second
    assert first.endswith(get_mock_response("explain how recursion works"))


def test_explanation_keeps_markdown_line_break():
    # two trailing spaces force a hard line break in markdown renderers
    assert "the mechanics  \n3. **Third Point**" in EXPLANATION
