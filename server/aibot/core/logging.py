from __future__ import annotations
import logging
import re


REDACT_PATTERNS = [
    re.compile(r"(gsk_[A-Za-z0-9]{20,})"),  # Groq API keys
    re.compile(r"(sk-[A-Za-z0-9]{20,})"),
]


def redact(value: str) -> str:
    redacted = value
    for pat in REDACT_PATTERNS:
        redacted = pat.sub("***", redacted)
    return redacted


class RedactingFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        # Redact after %-interpolation so keys passed as args are covered too
        formatted = super().format(record)
        return redact(formatted)


def setup_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger()
    logger.setLevel(level)
    # Clear existing handlers in reload scenarios
    logger.handlers.clear()

    handler = logging.StreamHandler()
    formatter = RedactingFormatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    logging.getLogger("uvicorn.error").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(level)
    # httpx logs every upstream request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
