from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from aibot.config import is_api_key_configured
from aibot.constants import AVAILABLE_MODELS, DEFAULT_MODEL_ALIAS, MODEL_PROVIDERS, PROVIDER_LABEL
from aibot.providers.base import TokenStream
from aibot.providers.router import ProviderRouter, router as default_router
from aibot.schemas.chat import ModelSelection

logger = logging.getLogger(__name__)


class AIService:
    def __init__(self, provider_router: Optional[ProviderRouter] = None) -> None:
        self.router = provider_router or default_router

    def validate_model(self, model: Optional[str]) -> ModelSelection:
        return self.router.validate_model(model)

    def generate_response(self, message: str, selection: ModelSelection) -> TokenStream:
        """Open a fresh token stream for one request."""
        provider = self.router.get_provider(selection)
        logger.info(
            "Generating response provider=%s model=%s",
            provider.id,
            selection.resolved_model,
        )
        return TokenStream(provider.stream(message, selection))

    async def generate_complete_response(self, message: str, selection: ModelSelection) -> str:
        """Drain the token stream into a single string (non-streaming path)."""
        stream = self.generate_response(message, selection)
        parts = []
        try:
            while True:
                token = await stream.next()
                if token is None:
                    break
                parts.append(token.content)
                if token.finished:
                    break
        finally:
            await stream.aclose()
        return "".join(parts)

    def get_available_models(self) -> Dict[str, Any]:
        return {
            "models": dict(AVAILABLE_MODELS),
            "providers": dict(MODEL_PROVIDERS),
            "default": DEFAULT_MODEL_ALIAS,
            "fallbackModel": self.router.settings.default_model,
            "provider": PROVIDER_LABEL,
        }

    def get_health_status(self) -> Dict[str, Any]:
        return {
            "apiConfigured": is_api_key_configured(self.router.settings),
            "availableModels": list(AVAILABLE_MODELS.keys()),
            "currentModel": self.router.settings.default_model,
            "provider": PROVIDER_LABEL,
        }


ai_service = AIService()
