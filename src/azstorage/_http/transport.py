"""HTTP transport implementations for sync and async clients."""

from __future__ import annotations

import abc
from collections.abc import Sequence

import httpx

from .debug import debug

HeaderItems = Sequence[tuple[str, str]]
ParamItems = Sequence[tuple[str, str]]


class BaseTransport(abc.ABC):
    """Abstract base class for HTTP transports.

    Building and executing a request are separate steps so callers can tell
    a request that could not be constructed apart from one that failed on
    the wire.
    """

    _client: httpx.Client | httpx.AsyncClient

    def build_request(
        self,
        method: str,
        path: str,
        *,
        params: ParamItems | None = None,
        headers: HeaderItems | None = None,
        content: bytes | None = None,
        timeout: float | None = None,
    ) -> httpx.Request:
        """Construct an httpx.Request against the client's base URL.

        Headers and params are passed as ordered pairs so repeated keys and
        ordering survive into the final request.
        """
        return self._client.build_request(
            method,
            path.lstrip("/"),
            params=list(params) if params else None,
            headers=list(headers) if headers else None,
            content=content,
            timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
        )

    @abc.abstractmethod
    async def execute(self, request: httpx.Request) -> httpx.Response:
        """Send a built request and return the response."""
        ...


class BlockingTransport(BaseTransport):
    """
    Synchronous HTTP transport using httpx.Client.

    Methods are declared async but don't actually await anything,
    allowing them to be executed via iter_coroutine().
    """

    def __init__(self, client: httpx.Client) -> None:
        self._client = client

    async def execute(self, request: httpx.Request) -> httpx.Response:
        debug(f"{request.method} {request.url}")
        response = self._client.send(request)
        debug(f"{request.method} {request.url} -> {response.status_code}")
        return response

    def close(self) -> None:
        self._client.close()


class AsyncTransport(BaseTransport):
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def execute(self, request: httpx.Request) -> httpx.Response:
        debug(f"{request.method} {request.url}")
        response = await self._client.send(request)
        debug(f"{request.method} {request.url} -> {response.status_code}")
        return response

    async def aclose(self) -> None:
        await self._client.aclose()


__all__ = [
    "BaseTransport",
    "BlockingTransport",
    "AsyncTransport",
]
