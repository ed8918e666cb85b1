"""Pytest fixtures for backend tests."""

from __future__ import annotations

import os
from collections.abc import Iterator
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from tests.fakes import USER_ID, FakeClient


def _set_default_env() -> None:
    os.environ.setdefault("SUPABASE_URL", "https://example.supabase.co")
    os.environ.setdefault("SUPABASE_ANON_KEY", "anon-key")
    os.environ.setdefault("SUPABASE_SERVICE_KEY", "service-key")
    os.environ.setdefault("ENABLE_SCHEDULER", "false")
    os.environ.setdefault("PROFILE_CACHE_TTL_SECONDS", "0")
    os.environ.setdefault("AUTH_TOKEN_CACHE_TTL_SECONDS", "0")


# Settings are read when `app.config` is first imported by a test module.
_set_default_env()


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a FastAPI test client."""
    from app.main import app

    return TestClient(app)


@pytest.fixture
def fake_db() -> FakeClient:
    """Empty in-memory database with one onboarded profile."""
    return FakeClient(
        tables={
            "profiles": [
                {
                    "id": USER_ID,
                    "username": "asha",
                    "experience_level": "mid",
                    "linkedin_url": None,
                    "onboarding_completed": True,
                },
            ],
        },
    )


@pytest.fixture
def api(fake_db: FakeClient) -> Iterator[TestClient]:
    """Test client authenticated as ``USER_ID`` and wired to ``fake_db``."""
    from app.dependencies import get_current_user, get_db_client
    from app.main import app

    app.dependency_overrides[get_current_user] = lambda: SimpleNamespace(id=USER_ID)
    app.dependency_overrides[get_db_client] = lambda: fake_db
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
