"""Client factory functions for creating pre-configured httpx clients."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence

import httpx

from .config import DEFAULT_TIMEOUT

RequestHook = Callable[[httpx.Request], None]


def _normalize_base_url(base_url: str) -> str:
    """Ensure base_url ends with a trailing slash for consistent URL joining."""
    return base_url.rstrip("/") + "/"


def _create_bearer_auth_hook(token: str) -> RequestHook:
    """Create a request hook that attaches a bearer token.

    Uses setdefault so an Authorization header set by the caller wins.
    """

    def hook(request: httpx.Request) -> None:
        request.headers.setdefault("authorization", f"Bearer {token}")

    return hook


def _create_static_headers_hook(headers: Mapping[str, str]) -> RequestHook:
    """Create a request hook that adds static headers to every request.

    Uses setdefault so per-request headers take precedence.
    """

    def hook(request: httpx.Request) -> None:
        for key, value in headers.items():
            request.headers.setdefault(key, value)

    return hook


def _build_hooks(token: str | None, headers: Mapping[str, str] | None) -> list[RequestHook]:
    hooks: list[RequestHook] = []
    if token:
        hooks.append(_create_bearer_auth_hook(token))
    if headers:
        hooks.append(_create_static_headers_hook(headers))
    return hooks


def _prepend_request_hooks(
    client: httpx.Client | httpx.AsyncClient,
    hooks: Sequence[Callable[[httpx.Request], object]],
) -> None:
    """Prepend request hooks to an existing client's event hooks.

    Prepending ensures our default hooks run first, so hooks the caller
    registered (e.g. a signing scheme) see the final set of headers.
    """
    existing_hooks = list(client.event_hooks.get("request", []))
    client.event_hooks["request"] = list(hooks) + existing_hooks


def create_storage_client(
    base_url: str,
    token: str | None = None,
    headers: Mapping[str, str] | None = None,
    timeout: float | None = None,
    *,
    client: httpx.Client | None = None,
) -> httpx.Client:
    """Create or configure a sync httpx client for a storage endpoint.

    Args:
        base_url: Account endpoint, e.g. ``https://acct.queue.core.windows.net``.
            Only applied to a provided client that has no base_url.
        token: Optional bearer token attached to every request.
        headers: Static headers added to every request (e.g. ``x-ms-version``).
        timeout: Request timeout in seconds. Defaults to DEFAULT_TIMEOUT.
            Ignored if client is provided.
        client: Optional existing client to configure. If provided, hooks
            are prepended to its existing request hooks, and base_url is
            applied when the client has none.

    Returns:
        An httpx.Client with the event hooks configured.
    """
    hooks = _build_hooks(token, headers)

    if client is not None:
        _prepend_request_hooks(client, hooks)
        if not str(client.base_url):
            client.base_url = _normalize_base_url(base_url)
        return client

    effective_timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
    return httpx.Client(
        base_url=_normalize_base_url(base_url),
        timeout=httpx.Timeout(effective_timeout),
        event_hooks={"request": hooks},
    )


def create_storage_async_client(
    base_url: str,
    token: str | None = None,
    headers: Mapping[str, str] | None = None,
    timeout: float | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> httpx.AsyncClient:
    """Create or configure an async httpx client for a storage endpoint.

    See create_storage_client for the arguments.
    """
    sync_hooks = _build_hooks(token, headers)
    hooks = [_as_async_hook(hook) for hook in sync_hooks]

    if client is not None:
        _prepend_request_hooks(client, hooks)
        if not str(client.base_url):
            client.base_url = _normalize_base_url(base_url)
        return client

    effective_timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
    return httpx.AsyncClient(
        base_url=_normalize_base_url(base_url),
        timeout=httpx.Timeout(effective_timeout),
        event_hooks={"request": hooks},
    )


def _as_async_hook(hook: RequestHook) -> Callable[[httpx.Request], object]:
    # httpx.AsyncClient awaits its event hooks
    async def async_hook(request: httpx.Request) -> None:
        hook(request)

    return async_hook


__all__ = [
    "create_storage_client",
    "create_storage_async_client",
]
