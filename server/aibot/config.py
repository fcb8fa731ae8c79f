from functools import lru_cache
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


API_KEY_PLACEHOLDER = "your_groq_api_key_here"


class Settings(BaseSettings):
    port: int = 5000
    # NODE_ENV is still honoured so existing deployment env files keep working
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("environment", "node_env"),
    )
    cors_origin: str = "*"

    # Groq exposes an OpenAI-compatible endpoint
    groq_api_key: Optional[str] = None
    groq_base_url: str = "https://api.groq.com/openai/v1"
    default_model: str = "llama3-8b-8192"

    # Streaming
    token_delay: int = 20  # milliseconds between streamed tokens
    max_tokens: int = 2048
    temperature: float = 0.7
    upstream_timeout: float = 120.0

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=("../.env", ".env"),
        extra="ignore",
    )

    @property
    def token_delay_seconds(self) -> float:
        return max(self.token_delay, 0) / 1000.0

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def is_api_key_configured(settings: Optional[Settings] = None) -> bool:
    settings = settings or get_settings()
    key = (settings.groq_api_key or "").strip()
    return bool(key) and key != API_KEY_PLACEHOLDER
