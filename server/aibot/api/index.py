from fastapi import APIRouter

from aibot.constants import PROVIDER_LABEL, SERVER_RUNNING, VERSION
from aibot.core.responses import utcnow_iso

router = APIRouter()


@router.get("/")
def root():
    return {
        "message": "Welcome to AI Bot API",
        "status": SERVER_RUNNING,
        "timestamp": utcnow_iso(),
        "version": VERSION,
        "endpoints": {
            "api": "/api",
            "health": "/health",
            "chat": "/api/chat",
            "models": "/api/models",
            "documents": "/api/documents/extract",
        },
    }


@router.get("/api")
def api_index():
    return {
        "name": "AI Bot API",
        "version": VERSION,
        "description": "AI-powered chat API with streaming support",
        "endpoints": {
            "health": {
                "/health": "Basic health check",
                "/health/detailed": "Detailed health check",
                "/health/ready": "Readiness probe",
                "/health/live": "Liveness probe",
            },
            "chat": {
                "POST /api/chat/stream": "Stream chat response",
                "POST /api/chat": "Get complete chat response",
                "GET /api/chat/models": "Get available models",
                "GET /api/chat/test": "Test endpoint",
                "GET /api/chat/stats": "Service statistics",
            },
            "models": {"GET /api/models": "Get available models (legacy)"},
            "documents": {"POST /api/documents/extract": "Extract text from an uploaded document"},
        },
        "provider": PROVIDER_LABEL,
    }
