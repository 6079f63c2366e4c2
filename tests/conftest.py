"""Shared fixtures.

Provides:
- settings pointed at a per-test upload directory with fake credentials
- async HTTP client bound to the FastAPI app
- a patched OpenAI client class for the completion gateway
- a patched smtplib.SMTP for the email gateway
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from unittest.mock import MagicMock, patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from meeting_summarizer.core import config
from meeting_summarizer.main import app


def make_completion(content):
    completion = MagicMock()
    completion.choices = [MagicMock()]
    completion.choices[0].message.content = content
    return completion


@pytest.fixture(autouse=True)
def settings(monkeypatch, tmp_path):
    upload_dir = tmp_path / "uploads"
    monkeypatch.setattr(config, "UPLOAD_DIR", str(upload_dir))
    monkeypatch.setattr(config, "MAX_UPLOAD_BYTES", 5 * 1024 * 1024)
    monkeypatch.setattr(config, "ENVIRONMENT", "production")
    monkeypatch.setattr(config, "GROQ_API_KEY", "test-groq-key")
    monkeypatch.setattr(config, "EMAIL_HOST", "smtp.example.com")
    monkeypatch.setattr(config, "EMAIL_PORT", 587)
    monkeypatch.setattr(config, "EMAIL_USER", "bot@example.com")
    monkeypatch.setattr(config, "EMAIL_PASS", "secret")
    monkeypatch.setattr(config, "EMAIL_SECURE", False)
    monkeypatch.setattr(config, "EMAIL_TLS_VERIFY", False)
    return config


@pytest.fixture
def upload_dir(settings):
    return settings.UPLOAD_DIR


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing the API."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def mock_openai():
    """Patched OpenAI class; ``mock_openai.create`` is the completions.create mock."""
    with patch("meeting_summarizer.core.groq_client.OpenAI") as openai_cls:
        create = openai_cls.return_value.chat.completions.create
        create.return_value = make_completion(
            "1. Overview: the team met.\n2. Discussion: v2.\n3. Decisions: ship v2.\n"
            "4. Action items: none.\n5. Next steps: release."
        )
        openai_cls.create = create
        yield openai_cls


@pytest.fixture
def mock_smtp():
    """Patched smtplib.SMTP; ``mock_smtp.server`` is the connection object."""
    with patch("meeting_summarizer.sharing.mailer.smtplib.SMTP") as smtp_cls:
        server = MagicMock()
        server.has_extn.return_value = True
        smtp_cls.return_value = server
        smtp_cls.server = server
        yield smtp_cls
