"""File share directory client classes."""

from __future__ import annotations

from .._core import _AsyncStorageClient, _SyncStorageClient
from .._http import iter_coroutine
from ._core import _BaseDirectoriesClient
from .types import (
    CreateDirectoryInput,
    CreateDirectoryResponse,
    DeleteResponse,
    GetMetaDataResponse,
    SetMetaDataInput,
    SetMetaDataResponse,
)


class DirectoriesClient(_BaseDirectoriesClient, _SyncStorageClient):
    """Synchronous client for directories within a File share."""

    def create(
        self,
        share_name: str,
        path: str,
        input: CreateDirectoryInput | None = None,
        *,
        timeout: float | None = None,
    ) -> CreateDirectoryResponse:
        """Create a directory; its parent must already exist."""
        return iter_coroutine(
            self._create(share_name, path, input or CreateDirectoryInput(), timeout=timeout)
        )

    def delete(self, share_name: str, path: str, *, timeout: float | None = None) -> DeleteResponse:
        """Delete an empty directory."""
        return iter_coroutine(self._delete(share_name, path, timeout=timeout))

    def get_metadata(
        self,
        share_name: str,
        path: str,
        *,
        timeout: float | None = None,
    ) -> GetMetaDataResponse:
        return iter_coroutine(self._get_metadata(share_name, path, timeout=timeout))

    def set_metadata(
        self,
        share_name: str,
        path: str,
        input: SetMetaDataInput,
        *,
        timeout: float | None = None,
    ) -> SetMetaDataResponse:
        return iter_coroutine(self._set_metadata(share_name, path, input, timeout=timeout))


class AsyncDirectoriesClient(_BaseDirectoriesClient, _AsyncStorageClient):
    """Asynchronous client for directories within a File share."""

    async def create(
        self,
        share_name: str,
        path: str,
        input: CreateDirectoryInput | None = None,
        *,
        timeout: float | None = None,
    ) -> CreateDirectoryResponse:
        """Create a directory; its parent must already exist."""
        return await self._create(share_name, path, input or CreateDirectoryInput(), timeout=timeout)

    async def delete(
        self,
        share_name: str,
        path: str,
        *,
        timeout: float | None = None,
    ) -> DeleteResponse:
        """Delete an empty directory."""
        return await self._delete(share_name, path, timeout=timeout)

    async def get_metadata(
        self,
        share_name: str,
        path: str,
        *,
        timeout: float | None = None,
    ) -> GetMetaDataResponse:
        return await self._get_metadata(share_name, path, timeout=timeout)

    async def set_metadata(
        self,
        share_name: str,
        path: str,
        input: SetMetaDataInput,
        *,
        timeout: float | None = None,
    ) -> SetMetaDataResponse:
        return await self._set_metadata(share_name, path, input, timeout=timeout)


__all__ = ["DirectoriesClient", "AsyncDirectoriesClient"]
