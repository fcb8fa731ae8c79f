import os
import platform
import sys

from fastapi import APIRouter

from aibot.config import get_settings, is_api_key_configured
from aibot.constants import PROVIDER_LABEL, SERVER_RUNNING, VERSION
from aibot.core.responses import create_health_response, success_response, uptime, utcnow_iso
from aibot.services.ai_service import ai_service

router = APIRouter()


def _load_average():
    try:
        return list(os.getloadavg())
    except (AttributeError, OSError):
        # Not available on Windows
        return [0.0, 0.0, 0.0]


@router.get("")
async def get_health():
    settings = get_settings()
    health = create_health_response(
        SERVER_RUNNING,
        **ai_service.get_health_status(),
        environment=settings.environment,
        version=VERSION,
    )
    return success_response(health, "Health check completed")


@router.get("/detailed")
async def get_detailed_health():
    settings = get_settings()
    health = {
        "status": SERVER_RUNNING,
        "timestamp": utcnow_iso(),
        "uptime": uptime(),
        "environment": settings.environment,
        "api": {
            **ai_service.get_health_status(),
            "configured": is_api_key_configured(settings),
            "provider": PROVIDER_LABEL,
        },
        "system": {
            "pythonVersion": platform.python_version(),
            "implementation": platform.python_implementation(),
            "platform": sys.platform,
            "arch": platform.machine(),
            "cpu": {"loadAverage": _load_average(), "cpus": os.cpu_count()},
        },
        "config": {
            "port": settings.port,
            "cors": settings.cors_origin,
            "streaming": {
                "tokenDelay": settings.token_delay,
                "maxTokens": settings.max_tokens,
                "temperature": settings.temperature,
            },
        },
        "services": {"aiService": "healthy", "streamingService": "healthy"},
    }
    return success_response(health, "Detailed health check completed")


@router.get("/ready")
async def get_readiness():
    return success_response({"ready": True}, "Service is ready")


@router.get("/live")
async def get_liveness():
    return success_response({"alive": True}, "Service is alive")
