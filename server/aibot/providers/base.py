from __future__ import annotations
from typing import AsyncIterator, Optional, Protocol

from aibot.schemas.chat import ModelSelection, Token


class TokenStream:
    """One-shot, ordered sequence of tokens with explicit pull semantics.

    ``next()`` returns the next Token or ``None`` once the sequence is
    exhausted. Nothing is returned after a finished Token. ``aclose()``
    releases the underlying generator (and any upstream connection it holds).
    """

    def __init__(self, source: AsyncIterator[Token]) -> None:
        self._source = source
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    async def next(self) -> Optional[Token]:
        if self._done:
            return None
        try:
            token = await self._source.__anext__()
        except StopAsyncIteration:
            self._done = True
            return None
        except BaseException:
            self._done = True
            raise
        if token.finished:
            self._done = True
        return token

    async def aclose(self) -> None:
        self._done = True
        aclose = getattr(self._source, "aclose", None)
        if aclose is not None:
            await aclose()

    def __aiter__(self) -> "TokenStream":
        return self

    async def __anext__(self) -> Token:
        token = await self.next()
        if token is None:
            raise StopAsyncIteration
        return token


class TokenSource(Protocol):
    id: str

    def stream(self, prompt: str, selection: ModelSelection) -> AsyncIterator[Token]:
        """Yield Tokens for ``prompt``; the last one has ``finished=True``."""
        ...
