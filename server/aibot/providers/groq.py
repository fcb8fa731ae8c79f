from __future__ import annotations
import json
import logging
from typing import Any, AsyncIterator, Dict, Optional
import httpx

from aibot.config import Settings, get_settings
from aibot.constants import (
    INVALID_API_KEY,
    NETWORK_ERROR,
    RATE_LIMIT_EXCEEDED,
    SYSTEM_PROMPT,
)
from aibot.schemas.chat import ModelSelection, Token

logger = logging.getLogger(__name__)

ERROR_HEADER = "❌ **API Error**\n\n"
ERROR_FOOTER = "\n\n*Please try again or check the server configuration.*"


def classify_upstream_error(exc: BaseException) -> str:
    """Map an upstream failure onto a human-readable message."""
    status = None
    response = getattr(exc, "response", None)
    if isinstance(exc, httpx.HTTPStatusError) and response is not None:
        status = response.status_code

    text = str(exc)
    if status in (401, 403) or "401" in text:
        return INVALID_API_KEY
    if status == 429 or "429" in text:
        return RATE_LIMIT_EXCEEDED
    lowered = text.lower()
    if isinstance(exc, httpx.TransportError) or "network" in lowered or "fetch" in lowered:
        return NETWORK_ERROR
    return f"Unexpected error: {text or exc.__class__.__name__}"


def diagnostic_token(exc: BaseException) -> Token:
    return Token(content=ERROR_HEADER + classify_upstream_error(exc) + ERROR_FOOTER, finished=True)


def parse_chunk(data: str) -> Optional[Token]:
    """Turn one upstream ``data:`` payload into a Token, or None if it carries nothing."""
    obj = json.loads(data)
    choices = obj.get("choices") or [{}]
    choice = choices[0]
    content = (choice.get("delta") or {}).get("content") or ""
    finished = choice.get("finish_reason") is not None
    if not content and not finished:
        return None
    return Token(content=content, finished=finished)


class GroqProvider:
    id = "groq"

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    def _payload(self, prompt: str, selection: ModelSelection) -> Dict[str, Any]:
        return {
            "model": selection.resolved_model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.settings.temperature,
            "max_tokens": self.settings.max_tokens,
            "stream": True,
        }

    async def stream(self, prompt: str, selection: ModelSelection) -> AsyncIterator[Token]:
        settings = self.settings
        headers = {
            "Authorization": f"Bearer {settings.groq_api_key}",
            "Content-Type": "application/json",
        }
        url = settings.groq_base_url.rstrip("/") + "/chat/completions"
        timeout = httpx.Timeout(connect=10.0, read=settings.upstream_timeout, write=30.0, pool=10.0)

        try:
            async with httpx.AsyncClient(timeout=timeout, trust_env=True, transport=self._transport) as client:
                async with client.stream("POST", url, headers=headers, json=self._payload(prompt, selection)) as resp:
                    if resp.is_error:
                        # Load the body while the stream is still open so it can be logged
                        await resp.aread()
                    resp.raise_for_status()
                    async for line in resp.aiter_lines():
                        if not line or not line.startswith("data: "):
                            continue
                        data = line[len("data: "):].strip()
                        if data == "[DONE]":
                            break
                        try:
                            token = parse_chunk(data)
                        except (ValueError, AttributeError, IndexError):
                            # malformed chunk, skip it
                            continue
                        if token is None:
                            continue
                        yield token
                        if token.finished:
                            return
            # Upstream closed without a stop reason
            yield Token(content="", finished=True)
        except Exception as e:
            body = e.response.text if isinstance(e, httpx.HTTPStatusError) else None
            logger.warning(
                "Groq API error model=%s: %s%s",
                selection.resolved_model,
                e,
                f" body={body}" if body else "",
            )
            yield diagnostic_token(e)
