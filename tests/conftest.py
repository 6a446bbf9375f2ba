from __future__ import annotations

import os

# Settings are resolved at import time; pin the test profile first.
os.environ["ENV"] = "test"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from maica.api.main import app  # noqa: E402
from maica.core.security import create_access_token  # noqa: E402


@pytest.fixture
def client():  # noqa: D401 - simple factory fixture
    """Provide a FastAPI TestClient bound to the application."""
    return TestClient(app)


@pytest.fixture
def auth_token() -> str:
    return create_access_token("user-123", "owner@example.com")


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {auth_token}"}
