"""Root conftest — test infrastructure for all backend tests.

Provides:
- A fresh ConnectionState per test (no shared global session)
- A stub AssistantService (no model calls)
- API client with dependency overrides
- Autouse mock for the connect probe (no outbound GitLab calls)
- A small on-disk codebase tree
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from app.services.assistant import AssistantService
from app.services.gitlab import ConnectionState

REPO_URL = "https://gitlab.example.com/group/project.git"
ACCESS_TOKEN = "glpat-abcdef123456"


# ─────────────────────────────────────────────────────────────────────────────
# Service Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def connection() -> ConnectionState:
    """A disconnected session, independent of the app's own."""
    return ConnectionState()


@pytest.fixture
def connected(connection: ConnectionState) -> ConnectionState:
    """A session already connected to REPO_URL."""
    connection.connect(REPO_URL, ACCESS_TOKEN)
    return connection


@pytest.fixture
def codebase(tmp_path: Path) -> Path:
    """A small codebase folder with ignored and relevant entries."""
    root = tmp_path / "codebase"
    (root / "src").mkdir(parents=True)
    (root / "src" / "index.ts").write_text("export const main = () => 1;\n")
    (root / "README.md").write_text("# Demo\n")
    (root / ".git").mkdir()
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    (root / "node_modules" / "left-pad").mkdir(parents=True)
    (root / "node_modules" / "left-pad" / "index.js").write_text("module.exports = 1;\n")
    return root


@pytest.fixture
def assistant(codebase: Path) -> MagicMock:
    """Stub assistant whose process() is an AsyncMock."""
    stub = MagicMock(spec=AssistantService)
    stub.codebase_path = codebase
    stub.process = AsyncMock()
    return stub


# ─────────────────────────────────────────────────────────────────────────────
# API Client
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
async def api_client(connection: ConnectionState, assistant: MagicMock):
    """HTTP client against the app with the session and assistant overridden.

    App exceptions are rendered by the app's handlers instead of re-raised.
    """
    from app.api.deps import get_assistant_service, get_connection
    from app.main import app

    app.dependency_overrides[get_connection] = lambda: connection
    app.dependency_overrides[get_assistant_service] = lambda: assistant

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


# ─────────────────────────────────────────────────────────────────────────────
# External Service Mocks
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def mock_connect_probe():
    """SAFETY: never let the connect endpoint reach a real GitLab host."""
    with patch("app.api.gitlab.probe_connection", new_callable=AsyncMock) as mock_probe:
        yield mock_probe
