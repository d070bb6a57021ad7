"""Tests for HTTP URL construction and client configuration.

The transport joins an account endpoint with an operation path:
- base_url is always normalized to end with a trailing slash
- path is always normalized to not start with a leading slash
"""

import httpx
import pytest
import respx
from httpx import Response

from azstorage._http import (
    AsyncTransport,
    BlockingTransport,
    create_storage_async_client,
    create_storage_client,
    iter_coroutine,
)
from azstorage.queues import QueuesClient, SetMetaDataInput


class TestUrlNormalization:
    @pytest.mark.parametrize(
        "base_url,path,expected_url",
        [
            ("https://acct.queue.example.net", "/myqueue", "https://acct.queue.example.net/myqueue"),
            ("https://acct.queue.example.net/", "/myqueue", "https://acct.queue.example.net/myqueue"),
            ("https://acct.queue.example.net", "myqueue", "https://acct.queue.example.net/myqueue"),
            ("https://acct.queue.example.net/", "myqueue", "https://acct.queue.example.net/myqueue"),
            # Endpoint behind a path prefix (e.g. a local emulator account)
            ("http://127.0.0.1:10001/devacct", "/myqueue", "http://127.0.0.1:10001/devacct/myqueue"),
            ("http://127.0.0.1:10001/devacct/", "myqueue", "http://127.0.0.1:10001/devacct/myqueue"),
        ],
        ids=[
            "no_trailing_with_leading",
            "trailing_with_leading",
            "no_trailing_no_leading",
            "trailing_no_leading",
            "base_with_path_no_trailing_with_leading",
            "base_with_path_trailing_no_leading",
        ],
    )
    @respx.mock
    def test_sync_normalization_consistency(self, base_url: str, path: str, expected_url: str):
        route = respx.delete(expected_url).mock(return_value=Response(204))

        transport = BlockingTransport(create_storage_client(base_url, timeout=30.0))

        try:
            response = iter_coroutine(transport.execute(transport.build_request("DELETE", path)))
            assert response.status_code == 204
            assert route.called
        finally:
            transport.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_async_normalization_consistency(self):
        route = respx.delete("https://acct.queue.example.net/myqueue").mock(
            return_value=Response(204)
        )

        transport = AsyncTransport(create_storage_async_client("https://acct.queue.example.net/"))

        try:
            response = await transport.execute(transport.build_request("DELETE", "/myqueue"))
            assert response.status_code == 204
            assert route.called
        finally:
            await transport.aclose()

    @respx.mock
    def test_query_order_is_preserved(self):
        route = respx.put("https://acct.blob.example.net/c/b").mock(return_value=Response(204))

        transport = BlockingTransport(create_storage_client("https://acct.blob.example.net"))
        try:
            request = transport.build_request(
                "PUT", "/c/b", params=[("comp", "copy"), ("copyid", "x")]
            )
            iter_coroutine(transport.execute(request))
        finally:
            transport.close()

        assert route.calls.last.request.url.query == b"comp=copy&copyid=x"


class TestInjectedClient:
    @respx.mock
    def test_user_hooks_run_after_defaults(self):
        seen: dict[str, str | None] = {}

        def signing_hook(request: httpx.Request) -> None:
            seen["x-ms-version"] = request.headers.get("x-ms-version")
            request.headers["authorization"] = "SharedKey acct:signature"

        route = respx.put("https://acct.queue.example.net/myqueue").mock(
            return_value=Response(204)
        )
        http_client = httpx.Client(event_hooks={"request": [signing_hook]})

        with QueuesClient("https://acct.queue.example.net", client=http_client) as client:
            client.set_metadata("myqueue", SetMetaDataInput(metadata={"owner": "alice"}))

        assert seen["x-ms-version"] == "2020-08-04"
        assert route.calls.last.request.headers["authorization"] == "SharedKey acct:signature"

    @respx.mock
    def test_injected_client_keeps_its_base_url(self):
        route = respx.put("https://proxy.example.net/myqueue").mock(return_value=Response(204))
        http_client = httpx.Client(base_url="https://proxy.example.net/")

        with QueuesClient("https://acct.queue.example.net", client=http_client) as client:
            client.set_metadata("myqueue", SetMetaDataInput())

        assert route.called

    @respx.mock
    @pytest.mark.asyncio
    async def test_async_client_runs_default_hooks(self):
        route = respx.put("https://acct.queue.example.net/myqueue").mock(
            return_value=Response(204)
        )
        client = create_storage_async_client(
            "https://acct.queue.example.net", token="tok", headers={"x-ms-version": "v1"}
        )
        transport = AsyncTransport(client)
        try:
            await transport.execute(transport.build_request("PUT", "/myqueue"))
        finally:
            await transport.aclose()

        request = route.calls.last.request
        assert request.headers["authorization"] == "Bearer tok"
        assert request.headers["x-ms-version"] == "v1"
