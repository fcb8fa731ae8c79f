from __future__ import annotations
import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import AsyncIterator, Awaitable, Callable, Dict, Optional

from aibot.config import get_settings
from aibot.constants import STREAMING_INTERRUPTED
from aibot.providers.base import TokenStream
from aibot.schemas.chat import DoneMessage, ErrorMessage, TokenMessage, WireMessage

logger = logging.getLogger(__name__)

# Headers that switch the response into unbuffered event-stream mode
SSE_HEADERS: Dict[str, str] = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}
SSE_MEDIA_TYPE = "text/event-stream"


class RelayState(str, Enum):
    STARTED = "started"
    STREAMING = "streaming"
    COMPLETED = "completed"
    FAILED = "failed"
    CLIENT_GONE = "client_gone"


def format_sse(message: WireMessage) -> str:
    return "data: " + message.model_dump_json() + "\n\n"


@dataclass
class StreamSession:
    """Per-request bookkeeping for one relay run."""

    state: RelayState = RelayState.STARTED
    frames_sent: int = 0

    def frame(self, message: WireMessage) -> str:
        self.frames_sent += 1
        return format_sse(message)


class StreamingRelay:
    """Drains a TokenStream into SSE frames.

    The generator returned by ``relay`` is handed to a ``StreamingResponse``;
    every yielded string is one frame written to the client. Exactly one
    terminal frame (done or error) is produced, unless the client went away,
    in which case nothing more is written at all.
    """

    def __init__(self, token_delay: Optional[float] = None) -> None:
        self._token_delay = token_delay

    @property
    def token_delay(self) -> float:
        if self._token_delay is not None:
            return self._token_delay
        return get_settings().token_delay_seconds

    async def relay(
        self,
        tokens: TokenStream,
        session: Optional[StreamSession] = None,
        is_disconnected: Optional[Callable[[], Awaitable[bool]]] = None,
    ) -> AsyncIterator[str]:
        session = session if session is not None else StreamSession()
        session.state = RelayState.STREAMING
        try:
            while True:
                if is_disconnected is not None and await is_disconnected():
                    session.state = RelayState.CLIENT_GONE
                    logger.info("Client disconnected from stream after %d frames", session.frames_sent)
                    return

                token = await tokens.next()
                if token is None:
                    break
                if token.content:
                    yield session.frame(TokenMessage(content=token.content, finished=token.finished))
                if token.finished:
                    break
                if token.content:
                    # Pacing so incremental arrival is visible to the reader
                    await asyncio.sleep(self.token_delay)

            yield session.frame(DoneMessage())
            session.state = RelayState.COMPLETED
        except (asyncio.CancelledError, GeneratorExit):
            session.state = RelayState.CLIENT_GONE
            logger.info("Client disconnected from stream after %d frames", session.frames_sent)
            raise
        except Exception:
            logger.exception("Streaming error after %d frames", session.frames_sent)
            session.state = RelayState.FAILED
            yield session.frame(ErrorMessage(message=STREAMING_INTERRUPTED))
        finally:
            await tokens.aclose()


relay = StreamingRelay()
