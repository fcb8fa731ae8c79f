from fastapi import APIRouter

from aibot.core.responses import success_response
from aibot.services.ai_service import ai_service

router = APIRouter()


@router.get("/models")
async def get_models():
    """Legacy alias of /api/chat/models."""
    return success_response(ai_service.get_available_models(), "Available models retrieved successfully")
