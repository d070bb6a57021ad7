"""Client library for storage data-plane REST APIs."""

from .blobs import AsyncBlobsClient, BlobsClient
from .directories import AsyncDirectoriesClient, DirectoriesClient
from .errors import (
    BuildRequestError,
    ExecuteRequestError,
    StorageError,
    UnexpectedStatusError,
    ValidationError,
)
from .paths import AsyncPathsClient, PathsClient
from .queues import AsyncQueuesClient, QueuesClient

__version__ = "0.1.0"

__all__ = [
    "BlobsClient",
    "AsyncBlobsClient",
    "DirectoriesClient",
    "AsyncDirectoriesClient",
    "PathsClient",
    "AsyncPathsClient",
    "QueuesClient",
    "AsyncQueuesClient",
    "StorageError",
    "ValidationError",
    "BuildRequestError",
    "ExecuteRequestError",
    "UnexpectedStatusError",
]
