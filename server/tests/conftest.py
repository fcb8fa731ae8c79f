"""Pytest fixtures and config."""

import pytest
from fastapi.testclient import TestClient

from aibot.config import get_settings


@pytest.fixture(autouse=True)
def env_cleanup(monkeypatch):
    """Run without a real Groq key and without pacing delays."""
    monkeypatch.setenv("GROQ_API_KEY", "")
    monkeypatch.setenv("TOKEN_DELAY", "0")
    monkeypatch.setenv("ENVIRONMENT", "development")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client():
    from aibot.main import create_app

    with TestClient(create_app()) as c:
        yield c
