"""Data Lake Storage path client classes."""

from __future__ import annotations

from .._core import _AsyncStorageClient, _SyncStorageClient
from .._http import iter_coroutine
from ._core import _BasePathsClient
from .types import (
    CreateInput,
    CreateResponse,
    DeleteResponse,
    GetPropertiesAction,
    GetPropertiesResponse,
    SetAccessControlInput,
    SetAccessControlResponse,
)


class PathsClient(_BasePathsClient, _SyncStorageClient):
    """Synchronous client for Data Lake Storage paths."""

    def create(
        self,
        file_system_name: str,
        path: str,
        input: CreateInput | None = None,
        *,
        timeout: float | None = None,
    ) -> CreateResponse:
        """Create a file or directory at ``path``."""
        return iter_coroutine(
            self._create(file_system_name, path, input or CreateInput(), timeout=timeout)
        )

    def delete(
        self,
        file_system_name: str,
        path: str,
        *,
        timeout: float | None = None,
    ) -> DeleteResponse:
        return iter_coroutine(self._delete(file_system_name, path, timeout=timeout))

    def get_properties(
        self,
        file_system_name: str,
        path: str,
        action: GetPropertiesAction = "getStatus",
        *,
        timeout: float | None = None,
    ) -> GetPropertiesResponse:
        """Return system properties, or the access control list with ``getAccessControl``."""
        return iter_coroutine(
            self._get_properties(file_system_name, path, action, timeout=timeout)
        )

    def set_access_control(
        self,
        file_system_name: str,
        path: str,
        input: SetAccessControlInput,
        *,
        timeout: float | None = None,
    ) -> SetAccessControlResponse:
        """Set the owner, group and/or ACL of a path."""
        return iter_coroutine(
            self._set_access_control(file_system_name, path, input, timeout=timeout)
        )


class AsyncPathsClient(_BasePathsClient, _AsyncStorageClient):
    """Asynchronous client for Data Lake Storage paths."""

    async def create(
        self,
        file_system_name: str,
        path: str,
        input: CreateInput | None = None,
        *,
        timeout: float | None = None,
    ) -> CreateResponse:
        """Create a file or directory at ``path``."""
        return await self._create(file_system_name, path, input or CreateInput(), timeout=timeout)

    async def delete(
        self,
        file_system_name: str,
        path: str,
        *,
        timeout: float | None = None,
    ) -> DeleteResponse:
        return await self._delete(file_system_name, path, timeout=timeout)

    async def get_properties(
        self,
        file_system_name: str,
        path: str,
        action: GetPropertiesAction = "getStatus",
        *,
        timeout: float | None = None,
    ) -> GetPropertiesResponse:
        """Return system properties, or the access control list with ``getAccessControl``."""
        return await self._get_properties(file_system_name, path, action, timeout=timeout)

    async def set_access_control(
        self,
        file_system_name: str,
        path: str,
        input: SetAccessControlInput,
        *,
        timeout: float | None = None,
    ) -> SetAccessControlResponse:
        """Set the owner, group and/or ACL of a path."""
        return await self._set_access_control(file_system_name, path, input, timeout=timeout)


__all__ = ["PathsClient", "AsyncPathsClient"]
