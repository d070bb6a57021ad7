"""Queue service client classes."""

from __future__ import annotations

from .._core import _AsyncStorageClient, _SyncStorageClient
from .._http import iter_coroutine
from ._core import _BaseQueuesClient
from .types import (
    CreateInput,
    CreateResponse,
    DeleteResponse,
    GetMetaDataResponse,
    SetMetaDataInput,
    SetMetaDataResponse,
)


class QueuesClient(_BaseQueuesClient, _SyncStorageClient):
    """Synchronous client for the Queue service."""

    def create(
        self,
        queue_name: str,
        input: CreateInput | None = None,
        *,
        timeout: float | None = None,
    ) -> CreateResponse:
        """Create a queue, optionally with metadata."""
        return iter_coroutine(self._create(queue_name, input or CreateInput(), timeout=timeout))

    def delete(self, queue_name: str, *, timeout: float | None = None) -> DeleteResponse:
        """Delete a queue and any messages it contains."""
        return iter_coroutine(self._delete(queue_name, timeout=timeout))

    def get_metadata(
        self,
        queue_name: str,
        *,
        timeout: float | None = None,
    ) -> GetMetaDataResponse:
        """Return the metadata for this queue."""
        return iter_coroutine(self._get_metadata(queue_name, timeout=timeout))

    def set_metadata(
        self,
        queue_name: str,
        input: SetMetaDataInput,
        *,
        timeout: float | None = None,
    ) -> SetMetaDataResponse:
        """Replace the metadata for this queue."""
        return iter_coroutine(self._set_metadata(queue_name, input, timeout=timeout))


class AsyncQueuesClient(_BaseQueuesClient, _AsyncStorageClient):
    """Asynchronous client for the Queue service."""

    async def create(
        self,
        queue_name: str,
        input: CreateInput | None = None,
        *,
        timeout: float | None = None,
    ) -> CreateResponse:
        """Create a queue, optionally with metadata."""
        return await self._create(queue_name, input or CreateInput(), timeout=timeout)

    async def delete(self, queue_name: str, *, timeout: float | None = None) -> DeleteResponse:
        """Delete a queue and any messages it contains."""
        return await self._delete(queue_name, timeout=timeout)

    async def get_metadata(
        self,
        queue_name: str,
        *,
        timeout: float | None = None,
    ) -> GetMetaDataResponse:
        """Return the metadata for this queue."""
        return await self._get_metadata(queue_name, timeout=timeout)

    async def set_metadata(
        self,
        queue_name: str,
        input: SetMetaDataInput,
        *,
        timeout: float | None = None,
    ) -> SetMetaDataResponse:
        """Replace the metadata for this queue."""
        return await self._set_metadata(queue_name, input, timeout=timeout)


__all__ = ["QueuesClient", "AsyncQueuesClient"]
