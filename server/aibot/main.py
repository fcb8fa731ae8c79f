import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings, is_api_key_configured
from .constants import API_CONFIGURED, SETUP_STEPS, VERSION
from .core.errors import register_exception_handlers
from .core.logging import setup_logging
from .core.responses import client_host

# API routers
from .api.index import router as index_router
from .api.health import router as health_router
from .api.chat import router as chat_router
from .api.models import router as models_router
from .api.documents import router as documents_router

logger = logging.getLogger("aibot")


def _log_startup() -> None:
    settings = get_settings()
    logger.info("Server running on port %s (%s)", settings.port, settings.environment)
    if not is_api_key_configured(settings):
        logger.warning("SETUP REQUIRED:")
        for i, step in enumerate(SETUP_STEPS, start=1):
            logger.warning("  %d. %s", i, step)
    else:
        logger.info(API_CONFIGURED)


def create_app() -> FastAPI:
    # Setup logging early
    setup_logging()
    app = FastAPI(title="AI Bot API", version=VERSION)

    settings = get_settings()
    origins = [o.strip() for o in settings.cors_origin.split(",") if o.strip()] or ["*"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentials with a wildcard origin
        allow_credentials=origins != ["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Accept", "Origin", "X-Requested-With", "Cache-Control"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=86400,
    )

    if settings.is_development:

        @app.middleware("http")
        async def _log_requests(request: Request, call_next):
            logger.info("%s %s - %s", request.method, request.url.path, client_host(request))
            return await call_next(request)

    register_exception_handlers(app)

    app.include_router(index_router)
    app.include_router(health_router, prefix="/health")
    app.include_router(chat_router, prefix="/api")
    app.include_router(models_router, prefix="/api")
    app.include_router(documents_router, prefix="/api")

    @app.on_event("startup")
    async def _startup() -> None:
        _log_startup()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("aibot.main:app", host="0.0.0.0", port=get_settings().port)
