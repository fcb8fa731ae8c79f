from __future__ import annotations
import logging
import traceback
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from aibot.config import get_settings
from aibot.core.responses import error_response

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """An error that is reported to the client as a JSON error envelope."""

    def __init__(self, message: str, status_code: int = 500, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


async def api_error_handler(request: Request, exc: ApiError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(exc.message, exc.status_code, exc.details)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return error_response(
            f"Route {request.url.path} not found",
            404,
            {"method": request.method, "url": str(request.url.path)},
        )
    return error_response(str(exc.detail), exc.status_code, None, headers=getattr(exc, "headers", None))


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return error_response("Validation Error", 400, {"errors": jsonable_encoder(exc.errors())})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    details = None
    if get_settings().is_development:
        details = {"stack": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))}
    return error_response(str(exc) or "Internal Server Error", 500, details)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
