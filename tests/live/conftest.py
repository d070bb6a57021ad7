"""Fixtures for live API tests.

These tests require a real storage account and a bearer token for it:
- ACCTEST: set to anything to opt in
- AZURE_STORAGE_ACCOUNT_NAME: name of an existing storage account
- AZURE_STORAGE_ACCESS_TOKEN_LIVE: OAuth token scoped to https://storage.azure.com/

Provisioning the account itself is out of scope; point these at one that
already exists.
"""

import os
from collections.abc import Generator

import pytest

from azstorage.queues import QueuesClient


def has_storage_credentials() -> bool:
    """Check if live storage account credentials are available."""
    return bool(
        os.getenv("ACCTEST")
        and os.getenv("AZURE_STORAGE_ACCESS_TOKEN_LIVE")
        and os.getenv("AZURE_STORAGE_ACCOUNT_NAME")
    )


@pytest.fixture(autouse=True)
def require_storage_credentials() -> None:
    """Skip every live test unless the account credentials are set."""
    if not has_storage_credentials():
        pytest.skip(
            "Requires ACCTEST, AZURE_STORAGE_ACCOUNT_NAME and "
            "AZURE_STORAGE_ACCESS_TOKEN_LIVE environment variables"
        )


@pytest.fixture
def live_token() -> str:
    return os.environ["AZURE_STORAGE_ACCESS_TOKEN_LIVE"]


@pytest.fixture
def queue_base_uri() -> str:
    return f"https://{os.environ['AZURE_STORAGE_ACCOUNT_NAME']}.queue.core.windows.net"


@pytest.fixture
def queues_client(queue_base_uri: str, live_token: str) -> Generator[QueuesClient, None, None]:
    with QueuesClient(queue_base_uri, token=live_token) as client:
        yield client
