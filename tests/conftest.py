"""Shared fixtures for all tests."""

import time
import uuid
from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def mock_env_clear(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear storage-related environment variables for testing.

    This ensures tests don't accidentally use real credentials from the environment.
    """
    env_vars_to_clear = [
        "AZURE_STORAGE_ACCESS_TOKEN",
        "DEBUG",
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def mock_token() -> str:
    """Mock bearer token for testing."""
    return "test_token_123456789"


@pytest.fixture
def unique_test_name() -> str:
    """Generate a unique, lower-cased test resource name."""
    timestamp = int(time.time())
    unique_id = uuid.uuid4().hex[:8]
    return f"azstorage-test-{timestamp}-{unique_id}"
