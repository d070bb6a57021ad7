"""Shared HTTP infrastructure for storage data-plane clients."""

from .clients import create_storage_async_client, create_storage_client
from .config import (
    DEFAULT_API_VERSION,
    DEFAULT_TIMEOUT,
    TOKEN_ENV_VAR,
    ClientConfig,
    resolve_token,
)
from .debug import debug
from .iter_coroutine import iter_coroutine
from .transport import AsyncTransport, BaseTransport, BlockingTransport

__all__ = [
    "DEFAULT_API_VERSION",
    "DEFAULT_TIMEOUT",
    "TOKEN_ENV_VAR",
    "ClientConfig",
    "resolve_token",
    "debug",
    "iter_coroutine",
    "BaseTransport",
    "BlockingTransport",
    "AsyncTransport",
    "create_storage_client",
    "create_storage_async_client",
]
