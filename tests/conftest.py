"""Shared pytest fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("OPENAI_API_KEY", "test-key")
os.environ.setdefault("ENVIRONMENT", "test")

from app.config import get_settings  # noqa: E402
from app.main import create_app  # noqa: E402


@pytest.fixture(autouse=True)
def configure_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure required environment variables are present during tests."""

    monkeypatch.setenv("OPENAI_API_KEY", "test-key")
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("REFINE_ENABLED", raising=False)
    get_settings.cache_clear()


@pytest.fixture
def app():
    return create_app()


class RecordingBackend:
    """Backend stub that remembers instructions and replays a canned reply."""

    def __init__(self, reply=None, error: Exception | None = None) -> None:
        self.reply = {"refinedText": "Refined."} if reply is None else reply
        self.error = error
        self.instructions: list[str] = []

    async def complete(self, instruction: str):
        self.instructions.append(instruction)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def make_backend():
    return RecordingBackend
