"""Shared helpers for building token streams and reading SSE bodies."""

import json
from typing import AsyncIterator, Iterable, List

from aibot.providers.base import TokenStream
from aibot.schemas.chat import Token


async def _agen(tokens: Iterable[Token]) -> AsyncIterator[Token]:
    for token in tokens:
        yield token


def make_stream(*tokens: Token) -> TokenStream:
    return TokenStream(_agen(tokens))


def parse_frames(body: str) -> List[dict]:
    frames = []
    for block in body.split("\n\n"):
        if not block:
            continue
        assert block.startswith("data: ")
        frames.append(json.loads(block[len("data: "):]))
    return frames
