"""Integration tests for the Blob service using respx mocking."""

import httpx
import pytest

from azstorage import UnexpectedStatusError, ValidationError
from azstorage.blobs import (
    AbortCopyInput,
    AsyncBlobsClient,
    BlobsClient,
    CopyInput,
    DeleteInput,
    GetMetaDataInput,
    SetMetaDataInput,
)

BLOB_BASE_URI = "https://teststorage.blob.core.windows.net"

BLOB_PATH = "/mycontainer/myblob.txt"


class TestAbortCopySync:
    def test_abort_copy(self, blob_mock):
        route = blob_mock.put(BLOB_PATH).mock(return_value=httpx.Response(204))

        with BlobsClient(BLOB_BASE_URI) as client:
            result = client.abort_copy(
                "mycontainer", "myblob.txt", AbortCopyInput(copy_id="abc123")
            )

        assert result.http_response.status_code == 204
        request = route.calls.last.request
        assert request.method == "PUT"
        assert str(request.url) == f"{BLOB_BASE_URI}{BLOB_PATH}?comp=copy&copyid=abc123"
        assert request.headers["x-ms-copy-action"] == "abort"
        assert "x-ms-lease-id" not in request.headers

    def test_abort_copy_with_lease(self, blob_mock):
        route = blob_mock.put(BLOB_PATH).mock(return_value=httpx.Response(204))

        with BlobsClient(BLOB_BASE_URI) as client:
            client.abort_copy(
                "mycontainer",
                "myblob.txt",
                AbortCopyInput(copy_id="abc123", lease_id="lease-42"),
            )

        request = route.calls.last.request
        assert request.headers["x-ms-lease-id"] == "lease-42"
        assert request.headers["x-ms-copy-action"] == "abort"

    def test_abort_copy_conflict_keeps_response(self, blob_mock):
        blob_mock.put(BLOB_PATH).mock(
            return_value=httpx.Response(409, headers={"x-ms-error-code": "NoPendingCopyOperation"})
        )

        with BlobsClient(BLOB_BASE_URI) as client:
            with pytest.raises(UnexpectedStatusError) as exc_info:
                client.abort_copy("mycontainer", "myblob.txt", AbortCopyInput(copy_id="abc123"))

        err = exc_info.value
        assert err.response.status_code == 409
        assert err.error_code == "NoPendingCopyOperation"
        assert "NoPendingCopyOperation" in str(err)

    @pytest.mark.parametrize(
        "container,blob,copy_id,message",
        [
            ("", "myblob.txt", "abc123", "`container_name` cannot be an empty string"),
            ("MyContainer", "myblob.txt", "abc123", "`container_name` must be a lower-cased"),
            ("mycontainer", "", "abc123", "`blob_name` cannot be an empty string"),
            ("mycontainer", "myblob.txt", "", "`input.copy_id` cannot be an empty string"),
        ],
    )
    def test_abort_copy_validation(self, blob_mock, container, blob, copy_id, message):
        route = blob_mock.route().mock(return_value=httpx.Response(204))

        with BlobsClient(BLOB_BASE_URI) as client:
            with pytest.raises(ValidationError, match=message):
                client.abort_copy(container, blob, AbortCopyInput(copy_id=copy_id))

        assert not route.called


class TestBlobOperationsSync:
    def test_copy(self, blob_mock):
        route = blob_mock.put(BLOB_PATH).mock(
            return_value=httpx.Response(
                202, headers={"x-ms-copy-id": "copy-1", "x-ms-copy-status": "pending"}
            )
        )
        source = "https://other.blob.core.windows.net/src/file.txt"

        with BlobsClient(BLOB_BASE_URI) as client:
            result = client.copy(
                "mycontainer",
                "myblob.txt",
                CopyInput(copy_source=source, metadata={"origin": "other"}),
            )

        assert result.copy_id == "copy-1"
        assert result.copy_status == "pending"
        request = route.calls.last.request
        assert str(request.url) == f"{BLOB_BASE_URI}{BLOB_PATH}"
        assert request.headers["x-ms-copy-source"] == source
        assert request.headers["x-ms-meta-origin"] == "other"
        assert "x-ms-source-lease-id" not in request.headers

    def test_copy_requires_source(self, blob_mock):
        route = blob_mock.route().mock(return_value=httpx.Response(202))

        with BlobsClient(BLOB_BASE_URI) as client:
            with pytest.raises(ValidationError, match="copy_source"):
                client.copy("mycontainer", "myblob.txt", CopyInput(copy_source=""))

        assert not route.called

    def test_delete_with_snapshots(self, blob_mock):
        route = blob_mock.delete(BLOB_PATH).mock(return_value=httpx.Response(202))

        with BlobsClient(BLOB_BASE_URI) as client:
            client.delete("mycontainer", "myblob.txt", DeleteInput(delete_snapshots="include"))

        assert route.calls.last.request.headers["x-ms-delete-snapshots"] == "include"

    def test_delete_rejects_unknown_snapshot_mode(self, blob_mock):
        route = blob_mock.route().mock(return_value=httpx.Response(202))

        with BlobsClient(BLOB_BASE_URI) as client:
            with pytest.raises(ValidationError, match="delete_snapshots"):
                client.delete(
                    "mycontainer",
                    "myblob.txt",
                    DeleteInput(delete_snapshots="all"),  # type: ignore[arg-type]
                )

        assert not route.called

    def test_get_metadata(self, blob_mock):
        route = blob_mock.get(BLOB_PATH).mock(
            return_value=httpx.Response(200, headers={"x-ms-meta-owner": "alice"})
        )

        with BlobsClient(BLOB_BASE_URI) as client:
            result = client.get_metadata(
                "mycontainer", "myblob.txt", GetMetaDataInput(lease_id="l1")
            )

        assert result.metadata == {"owner": "alice"}
        request = route.calls.last.request
        assert str(request.url) == f"{BLOB_BASE_URI}{BLOB_PATH}?comp=metadata"
        assert request.headers["x-ms-lease-id"] == "l1"

    def test_set_metadata(self, blob_mock):
        route = blob_mock.put(BLOB_PATH).mock(return_value=httpx.Response(200))

        with BlobsClient(BLOB_BASE_URI) as client:
            client.set_metadata(
                "mycontainer", "myblob.txt", SetMetaDataInput(metadata={"owner": "alice"})
            )

        request = route.calls.last.request
        assert str(request.url) == f"{BLOB_BASE_URI}{BLOB_PATH}?comp=metadata"
        assert request.headers["x-ms-meta-owner"] == "alice"

    def test_blob_name_with_virtual_directory_and_space(self, blob_mock):
        route = blob_mock.route().mock(return_value=httpx.Response(204))

        with BlobsClient(BLOB_BASE_URI) as client:
            client.abort_copy("mycontainer", "dir/my blob.txt", AbortCopyInput(copy_id="c1"))

        raw_path = route.calls.last.request.url.raw_path
        assert raw_path == b"/mycontainer/dir/my%20blob.txt?comp=copy&copyid=c1"


class TestBlobsAsync:
    @pytest.mark.asyncio
    async def test_abort_copy(self, blob_mock):
        route = blob_mock.put(BLOB_PATH).mock(return_value=httpx.Response(204))

        async with AsyncBlobsClient(BLOB_BASE_URI) as client:
            result = await client.abort_copy(
                "mycontainer", "myblob.txt", AbortCopyInput(copy_id="abc123")
            )

        assert result.http_response.status_code == 204
        request = route.calls.last.request
        assert str(request.url) == f"{BLOB_BASE_URI}{BLOB_PATH}?comp=copy&copyid=abc123"
        assert request.headers["x-ms-copy-action"] == "abort"
        assert "x-ms-lease-id" not in request.headers

    @pytest.mark.asyncio
    async def test_abort_copy_conflict(self, blob_mock):
        blob_mock.put(BLOB_PATH).mock(return_value=httpx.Response(409))

        async with AsyncBlobsClient(BLOB_BASE_URI) as client:
            with pytest.raises(UnexpectedStatusError) as exc_info:
                await client.abort_copy(
                    "mycontainer", "myblob.txt", AbortCopyInput(copy_id="abc123")
                )

        assert exc_info.value.response.status_code == 409

    @pytest.mark.asyncio
    async def test_abort_copy_missing_copy_id(self, blob_mock):
        route = blob_mock.route().mock(return_value=httpx.Response(204))

        async with AsyncBlobsClient(BLOB_BASE_URI) as client:
            with pytest.raises(ValidationError):
                await client.abort_copy("mycontainer", "myblob.txt", AbortCopyInput(copy_id=""))

        assert not route.called

    @pytest.mark.asyncio
    async def test_delete(self, blob_mock):
        route = blob_mock.delete(BLOB_PATH).mock(return_value=httpx.Response(202))

        async with AsyncBlobsClient(BLOB_BASE_URI) as client:
            result = await client.delete("mycontainer", "myblob.txt")

        assert result.http_response.status_code == 202
        assert "x-ms-delete-snapshots" not in route.calls.last.request.headers
