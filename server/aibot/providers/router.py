from __future__ import annotations
from typing import Dict, Optional

from aibot.config import Settings, get_settings, is_api_key_configured
from aibot.constants import AVAILABLE_MODELS, DEFAULT_MODEL_ALIAS, DEFAULT_PROVIDER, MODEL_PROVIDERS
from aibot.providers.base import TokenSource
from aibot.providers.groq import GroqProvider
from aibot.providers.mock import MockProvider
from aibot.schemas.chat import ModelSelection


class ProviderRouter:
    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings
        self.providers: Dict[str, TokenSource] = {
            "groq": GroqProvider(settings),
            "mock": MockProvider(),
        }
        self.model_map: Dict[str, str] = dict(AVAILABLE_MODELS)

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    def validate_model(self, model: Optional[str]) -> ModelSelection:
        """Resolve a requested alias; unknown or missing names get the default."""
        if model and model in self.model_map:
            return ModelSelection(
                requested_model=model,
                resolved_model=self.model_map[model],
                provider=MODEL_PROVIDERS.get(model, DEFAULT_PROVIDER),
            )
        return ModelSelection(
            requested_model=DEFAULT_MODEL_ALIAS,
            resolved_model=self.settings.default_model,
            provider=DEFAULT_PROVIDER,
        )

    def get_provider(self, selection: ModelSelection) -> TokenSource:
        # Without a usable key the live call is never attempted
        if not is_api_key_configured(self.settings):
            return self.providers["mock"]
        return self.providers.get(selection.provider, self.providers["groq"])


router = ProviderRouter()
