"""Blob service client classes."""

from __future__ import annotations

from .._core import _AsyncStorageClient, _SyncStorageClient
from .._http import iter_coroutine
from ._core import _BaseBlobsClient
from .types import (
    AbortCopyInput,
    AbortCopyResponse,
    CopyInput,
    CopyResponse,
    DeleteInput,
    DeleteResponse,
    GetMetaDataInput,
    GetMetaDataResponse,
    SetMetaDataInput,
    SetMetaDataResponse,
)


class BlobsClient(_BaseBlobsClient, _SyncStorageClient):
    """Synchronous client for the Blob service."""

    def abort_copy(
        self,
        container_name: str,
        blob_name: str,
        input: AbortCopyInput,
        *,
        timeout: float | None = None,
    ) -> AbortCopyResponse:
        """Abort a pending Copy Blob operation.

        The destination blob is left with zero length and full metadata.
        """
        return iter_coroutine(
            self._abort_copy(container_name, blob_name, input, timeout=timeout)
        )

    def copy(
        self,
        container_name: str,
        blob_name: str,
        input: CopyInput,
        *,
        timeout: float | None = None,
    ) -> CopyResponse:
        """Start copying ``input.copy_source`` into this blob.

        The copy runs server-side; poll the blob's properties to follow it.
        """
        return iter_coroutine(self._copy(container_name, blob_name, input, timeout=timeout))

    def delete(
        self,
        container_name: str,
        blob_name: str,
        input: DeleteInput | None = None,
        *,
        timeout: float | None = None,
    ) -> DeleteResponse:
        """Mark a blob (and optionally its snapshots) for deletion."""
        return iter_coroutine(
            self._delete(container_name, blob_name, input or DeleteInput(), timeout=timeout)
        )

    def get_metadata(
        self,
        container_name: str,
        blob_name: str,
        input: GetMetaDataInput | None = None,
        *,
        timeout: float | None = None,
    ) -> GetMetaDataResponse:
        """Return all user-defined metadata for the blob."""
        return iter_coroutine(
            self._get_metadata(
                container_name, blob_name, input or GetMetaDataInput(), timeout=timeout
            )
        )

    def set_metadata(
        self,
        container_name: str,
        blob_name: str,
        input: SetMetaDataInput,
        *,
        timeout: float | None = None,
    ) -> SetMetaDataResponse:
        """Replace the user-defined metadata for the blob."""
        return iter_coroutine(
            self._set_metadata(container_name, blob_name, input, timeout=timeout)
        )


class AsyncBlobsClient(_BaseBlobsClient, _AsyncStorageClient):
    """Asynchronous client for the Blob service."""

    async def abort_copy(
        self,
        container_name: str,
        blob_name: str,
        input: AbortCopyInput,
        *,
        timeout: float | None = None,
    ) -> AbortCopyResponse:
        """Abort a pending Copy Blob operation.

        The destination blob is left with zero length and full metadata.
        """
        return await self._abort_copy(container_name, blob_name, input, timeout=timeout)

    async def copy(
        self,
        container_name: str,
        blob_name: str,
        input: CopyInput,
        *,
        timeout: float | None = None,
    ) -> CopyResponse:
        """Start copying ``input.copy_source`` into this blob.

        The copy runs server-side; poll the blob's properties to follow it.
        """
        return await self._copy(container_name, blob_name, input, timeout=timeout)

    async def delete(
        self,
        container_name: str,
        blob_name: str,
        input: DeleteInput | None = None,
        *,
        timeout: float | None = None,
    ) -> DeleteResponse:
        """Mark a blob (and optionally its snapshots) for deletion."""
        return await self._delete(
            container_name, blob_name, input or DeleteInput(), timeout=timeout
        )

    async def get_metadata(
        self,
        container_name: str,
        blob_name: str,
        input: GetMetaDataInput | None = None,
        *,
        timeout: float | None = None,
    ) -> GetMetaDataResponse:
        """Return all user-defined metadata for the blob."""
        return await self._get_metadata(
            container_name, blob_name, input or GetMetaDataInput(), timeout=timeout
        )

    async def set_metadata(
        self,
        container_name: str,
        blob_name: str,
        input: SetMetaDataInput,
        *,
        timeout: float | None = None,
    ) -> SetMetaDataResponse:
        """Replace the user-defined metadata for the blob."""
        return await self._set_metadata(container_name, blob_name, input, timeout=timeout)


__all__ = ["BlobsClient", "AsyncBlobsClient"]
