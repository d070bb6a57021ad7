"""Shared request execution and client lifecycle for every storage service."""

from __future__ import annotations

from typing import Any, ClassVar

import httpx

from .._http import (
    DEFAULT_API_VERSION,
    DEFAULT_TIMEOUT,
    AsyncTransport,
    BaseTransport,
    BlockingTransport,
    ClientConfig,
    create_storage_async_client,
    create_storage_client,
    debug,
    resolve_token,
)
from ..errors import (
    BuildRequestError,
    ExecuteRequestError,
    UnexpectedStatusError,
    ValidationError,
)
from .request import RequestOptions


def _build_config(
    base_uri: str,
    token: str | None,
    timeout: float | None,
    api_version: str | None,
) -> ClientConfig:
    try:
        url = httpx.URL(base_uri)
    except httpx.InvalidURL:
        url = None
    if not base_uri or url is None or not url.scheme or not url.host:
        raise ValidationError(f"building base client: invalid base URI {base_uri!r}")
    return ClientConfig(
        base_url=base_uri,
        timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
        api_version=api_version or DEFAULT_API_VERSION,
        token=resolve_token(token),
    )


class _BaseStorageClient:
    """Base class that validates, builds, executes and interprets requests."""

    component_name: ClassVar[str]

    _transport: BaseTransport
    _config: ClientConfig

    async def _execute(
        self,
        opts: RequestOptions,
        *,
        timeout: float | None = None,
    ) -> httpx.Response:
        try:
            request = self._transport.build_request(
                opts.http_method,
                opts.path,
                params=opts.query().items(),
                headers=opts.headers().items(),
                content=opts.content,
                timeout=timeout,
            )
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise BuildRequestError(exc) from exc

        try:
            response = await self._transport.execute(request)
        except httpx.HTTPError as exc:
            raise ExecuteRequestError(str(exc) or type(exc).__name__) from exc

        if response.status_code not in opts.expected_status_codes:
            raise UnexpectedStatusError(response, opts.expected_status_codes)
        return response

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(component={self.component_name!r}, "
            f"base_uri={self._config.base_url!r})"
        )


class _SyncStorageClient(_BaseStorageClient):
    _transport: BlockingTransport

    def __init__(
        self,
        base_uri: str,
        *,
        token: str | None = None,
        timeout: float | None = None,
        api_version: str | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._config = _build_config(base_uri, token, timeout, api_version)
        http_client = create_storage_client(
            self._config.base_url,
            token=self._config.token,
            headers=self._config.get_headers(),
            timeout=self._config.timeout,
            client=client,
        )
        self._transport = BlockingTransport(http_client)
        debug(f"created {self.component_name} client for {self._config.base_url}")

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> Any:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class _AsyncStorageClient(_BaseStorageClient):
    _transport: AsyncTransport

    def __init__(
        self,
        base_uri: str,
        *,
        token: str | None = None,
        timeout: float | None = None,
        api_version: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = _build_config(base_uri, token, timeout, api_version)
        http_client = create_storage_async_client(
            self._config.base_url,
            token=self._config.token,
            headers=self._config.get_headers(),
            timeout=self._config.timeout,
            client=client,
        )
        self._transport = AsyncTransport(http_client)
        debug(f"created {self.component_name} client for {self._config.base_url}")

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> Any:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()


__all__ = ["_BaseStorageClient", "_SyncStorageClient", "_AsyncStorageClient"]
