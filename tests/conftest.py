"""Pytest configuration and fixtures for ccat-api tests."""

from typing import Generator

import pytest

from ccat_api import CCatClient, with_auth_key, with_base_url, with_user_id


@pytest.fixture
def base_url() -> str:
    """Test base URL."""
    return "http://test.cheshirecat.ai"


@pytest.fixture
def auth_key() -> str:
    """Test auth key."""
    return "test_auth_key"


@pytest.fixture
def client(base_url: str, auth_key: str) -> Generator[CCatClient, None, None]:
    """Create test client."""
    with CCatClient(
        with_base_url(base_url),
        with_auth_key(auth_key),
        with_user_id("alice"),
    ) as client:
        yield client
