"""Shared fixtures: a TestClient with Supabase Auth bypassed."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from src.api.deps import get_current_user_id
from src.api.main import app

TEST_USER_ID = "11111111-1111-1111-1111-111111111111"


@pytest.fixture
def client() -> Iterator[TestClient]:
    """TestClient whose requests are authenticated as TEST_USER_ID."""
    app.dependency_overrides[get_current_user_id] = lambda: TEST_USER_ID
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_current_user_id, None)


@pytest.fixture
def user_id() -> str:
    return TEST_USER_ID
