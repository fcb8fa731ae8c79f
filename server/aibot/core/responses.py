from __future__ import annotations
import time
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

MAX_INPUT_LENGTH = 10_000

_STARTED_AT = time.monotonic()


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def uptime() -> float:
    return round(time.monotonic() - _STARTED_AT, 3)


def create_success_response(data: Any, message: str = "Success") -> Dict[str, Any]:
    return {
        "success": True,
        "message": message,
        "data": data,
        "timestamp": utcnow_iso(),
    }


def create_error_response(message: str, status_code: int = 500, details: Any = None) -> Dict[str, Any]:
    return {
        "success": False,
        "error": {
            "message": message,
            "statusCode": status_code,
            "details": details,
        },
        "timestamp": utcnow_iso(),
    }


def success_response(data: Any, message: str = "Success", status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=create_success_response(data, message))


def error_response(
    message: str,
    status_code: int = 500,
    details: Any = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=create_error_response(message, status_code, details),
        headers=headers,
    )


def create_health_response(status: str, **extra: Any) -> Dict[str, Any]:
    return {
        "status": status,
        "uptime": uptime(),
        "timestamp": utcnow_iso(),
        **extra,
    }


def missing_fields(body: Dict[str, Any], required: Iterable[str]) -> List[str]:
    """Fields that are absent, falsy or whitespace-only strings."""
    missing = []
    for field in required:
        value = body.get(field)
        if not value or (isinstance(value, str) and not value.strip()):
            missing.append(field)
    return missing


def sanitize_input(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    return value.strip().replace("<", "").replace(">", "")[:MAX_INPUT_LENGTH]


def client_host(request: Request) -> str:
    xff = request.headers.get("x-forwarded-for")
    if xff:
        return xff.split(",")[0].strip()
    return request.client.host if request.client else "unknown"
