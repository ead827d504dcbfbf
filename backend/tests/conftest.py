import os

# Settings are read at import time; give the clients something to start with.
os.environ.setdefault("OPENAI_API_KEY", "sk-test")
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest
from fastapi import Request
from fastapi.testclient import TestClient

from db.supabase import get_db
from main import app
from middlewares.auth import verify_auth_token

TEST_USER = {"id": "user-123", "email": "coach@example.com"}

QUERY_METHODS = ("select", "insert", "update", "upsert", "delete", "eq", "contains", "order", "limit")


# ── Helpers ───────────────────────────────────────────────────────────────


def make_db(data=None):
    """Mock Supabase client whose query builder chains back to one mock."""
    db = MagicMock()
    query = MagicMock()
    db.table.return_value = query
    for method in QUERY_METHODS:
        getattr(query, method).return_value = query
    query.execute.return_value = SimpleNamespace(data=data if data is not None else [])
    return db, query


def completion(text):
    """Shape of a chat completion as returned by the OpenAI SDK."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=text))])


def api_status_error(status):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    response = httpx.Response(status, request=request)
    return openai.APIStatusError(f"provider returned {status}", response=response, body=None)


def connection_error():
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    return openai.APIConnectionError(request=request)


def mock_openai(reply=None, side_effect=None, transcript=None):
    client = MagicMock()
    client.chat.completions.create = AsyncMock(
        return_value=completion(reply) if reply is not None else None,
        side_effect=side_effect,
    )
    client.audio.transcriptions.create = AsyncMock(return_value=transcript, side_effect=side_effect)
    return client


# ── Fixtures ──────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def clean_app_state():
    app.state.rate_limiter.reset()
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    """Signed-in user plus a mock database; yields (db, query)."""
    mock_db, query = make_db()

    async def fake_auth(request: Request):
        request.state.user = TEST_USER
        request.state.access_token = "test-token"

    app.dependency_overrides[verify_auth_token] = fake_auth
    app.dependency_overrides[get_db] = lambda: mock_db
    return mock_db, query
