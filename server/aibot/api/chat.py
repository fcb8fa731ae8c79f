import logging
import platform
from typing import Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import StreamingResponse

from aibot.constants import FAILED_TO_GENERATE_RESPONSE, FAILED_TO_START_STREAM, MESSAGE_REQUIRED
from aibot.core.errors import ApiError
from aibot.core.responses import missing_fields, sanitize_input, success_response, uptime
from aibot.providers.mock import get_random_tip
from aibot.schemas.chat import ChatRequest
from aibot.services.ai_service import ai_service
from aibot.services.streaming import SSE_HEADERS, SSE_MEDIA_TYPE, StreamSession, relay

router = APIRouter()
logger = logging.getLogger(__name__)


def _validated_message(request: ChatRequest) -> str:
    missing = missing_fields(request.model_dump(), ["message"])
    if missing:
        raise ApiError(MESSAGE_REQUIRED, 400, {"missingFields": missing})
    return sanitize_input(request.message)


@router.post("/chat/stream")
async def stream_chat(request: ChatRequest, http_request: Request):
    """Stream a chat reply as Server-Sent Events."""
    message = _validated_message(request)
    try:
        selection = ai_service.validate_model(request.model)
        logger.info("/chat/stream start model=%s length=%d", selection.resolved_model, len(message))
        tokens = ai_service.generate_response(message, selection)
        session = StreamSession()
        return StreamingResponse(
            relay.relay(tokens, session, http_request.is_disconnected),
            media_type=SSE_MEDIA_TYPE,
            headers=SSE_HEADERS,
        )
    except Exception as e:
        # Nothing has been written yet, so the normal JSON error path applies
        logger.exception("Stream setup error: %s", e)
        raise ApiError(FAILED_TO_START_STREAM, 500, {"error": str(e)})


@router.post("/chat")
async def chat(request: ChatRequest):
    """Return the full chat reply in one JSON envelope."""
    message = _validated_message(request)
    selection = ai_service.validate_model(request.model)
    try:
        full_response = await ai_service.generate_complete_response(message, selection)
    except Exception as e:
        logger.exception("Chat error model=%s: %s", selection.resolved_model, e)
        raise ApiError(FAILED_TO_GENERATE_RESPONSE, 500, {"error": str(e)})

    return success_response(
        {
            "response": full_response,
            "model": selection.to_public(),
            "messageLength": len(message),
            "responseLength": len(full_response),
        },
        "Chat response generated successfully",
    )


@router.get("/chat/models")
async def get_models():
    return success_response(ai_service.get_available_models(), "Available models retrieved successfully")


@router.get("/chat/test")
async def test_chat(
    message: str = Query("Hello, this is a test message"),
    model: Optional[str] = Query(None),
):
    """Development helper: run a non-streaming round trip from query params."""
    test_message = sanitize_input(message) or "Hello, this is a test message"
    selection = ai_service.validate_model(model)
    try:
        response = await ai_service.generate_complete_response(test_message, selection)
    except Exception as e:
        logger.exception("Test chat error: %s", e)
        raise ApiError("Test chat failed", 500, {"error": str(e)})
    return success_response(
        {"testMessage": test_message, "response": response, "model": selection.to_public()},
        "Test chat completed successfully",
    )


@router.get("/chat/stats")
async def get_chat_stats():
    stats = {
        "availableModels": len(ai_service.get_available_models()["models"]),
        "apiStatus": ai_service.get_health_status(),
        "serverUptime": uptime(),
        "pythonVersion": platform.python_version(),
        "tip": get_random_tip(),
    }
    return success_response(stats, "Chat statistics retrieved successfully")
