"""Fixtures for integration tests using respx mocking."""

import pytest
import respx

BLOB_BASE_URI = "https://teststorage.blob.core.windows.net"
DFS_BASE_URI = "https://teststorage.dfs.core.windows.net"
FILE_BASE_URI = "https://teststorage.file.core.windows.net"
QUEUE_BASE_URI = "https://teststorage.queue.core.windows.net"


@pytest.fixture
def queue_mock():
    with respx.mock(assert_all_called=False, base_url=QUEUE_BASE_URI) as mock:
        yield mock


@pytest.fixture
def blob_mock():
    with respx.mock(assert_all_called=False, base_url=BLOB_BASE_URI) as mock:
        yield mock


@pytest.fixture
def file_mock():
    with respx.mock(assert_all_called=False, base_url=FILE_BASE_URI) as mock:
        yield mock


@pytest.fixture
def dfs_mock():
    with respx.mock(assert_all_called=False, base_url=DFS_BASE_URI) as mock:
        yield mock
