from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from main import app
from services.config_manager import ConfigManager
from services.llm_service import get_llm_service
from services.workspace import WorkspaceStore, get_workspace_store


class FakeLLMService:
    """Stands in for the Gemini relay; records prompts it receives"""

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str | None]] = []

    async def generate_response(self, prompt: str, model: str | None = None) -> str:
        self.calls.append((prompt, model))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture(autouse=True)
def gemini_env(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "AIzaTestKey1234567890")
    monkeypatch.delenv("GEMINI_MODEL", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    ConfigManager.reset_instance()
    yield
    ConfigManager.reset_instance()


@pytest.fixture
def fake_llm():
    return FakeLLMService()


@pytest.fixture
def store():
    return WorkspaceStore()


@pytest.fixture
def client(fake_llm, store):
    app.dependency_overrides[get_llm_service] = lambda: fake_llm
    app.dependency_overrides[get_workspace_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
