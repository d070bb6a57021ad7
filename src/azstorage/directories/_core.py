"""Core business logic for directories within a File share."""

from __future__ import annotations

import urllib.parse

from .._core import (
    Headers,
    QueryParams,
    RequestOptions,
    _BaseStorageClient,
    parse_from_headers,
    set_into_headers,
    validate_lower_case_name,
    validate_metadata,
    validate_name,
)
from .types import (
    CreateDirectoryInput,
    CreateDirectoryResponse,
    DeleteResponse,
    GetMetaDataResponse,
    SetMetaDataInput,
    SetMetaDataResponse,
)


def _directory_path(share_name: str, path: str) -> str:
    validate_lower_case_name(share_name, "share_name")
    stripped = path.strip("/")
    validate_name(stripped, "path")
    return f"/{share_name}/{urllib.parse.quote(stripped)}"


def _directory_query(comp: str | None = None) -> QueryParams:
    out = QueryParams()
    out.append("restype", "directory")
    if comp is not None:
        out.append("comp", comp)
    return out


class _CreateOptions:
    def __init__(self, input: CreateDirectoryInput) -> None:
        self._input = input

    def to_headers(self) -> Headers:
        headers = Headers()
        headers.merge(set_into_headers(self._input.metadata))
        headers.append("x-ms-file-permission", "inherit")
        headers.append("x-ms-file-attributes", "None")
        headers.append("x-ms-file-creation-time", self._input.created_at)
        headers.append("x-ms-file-last-write-time", self._input.last_modified)
        return headers

    def to_odata(self) -> None:
        return None

    def to_query(self) -> QueryParams:
        return _directory_query()


class _DeleteOptions:
    def to_headers(self) -> None:
        return None

    def to_odata(self) -> None:
        return None

    def to_query(self) -> QueryParams:
        return _directory_query()


class _GetMetaDataOptions:
    def to_headers(self) -> None:
        return None

    def to_odata(self) -> None:
        return None

    def to_query(self) -> QueryParams:
        return _directory_query("metadata")


class _SetMetaDataOptions:
    def __init__(self, input: SetMetaDataInput) -> None:
        self._input = input

    def to_headers(self) -> Headers:
        return set_into_headers(self._input.metadata)

    def to_odata(self) -> None:
        return None

    def to_query(self) -> QueryParams:
        return _directory_query("metadata")


class _BaseDirectoriesClient(_BaseStorageClient):
    """Base class for File share directories with shared async implementation."""

    component_name = "file"

    async def _create(
        self,
        share_name: str,
        path: str,
        input: CreateDirectoryInput,
        *,
        timeout: float | None = None,
    ) -> CreateDirectoryResponse:
        request_path = _directory_path(share_name, path)
        validate_metadata(input.metadata)

        opts = RequestOptions(
            http_method="PUT",
            path=request_path,
            expected_status_codes=frozenset({201}),
            options_object=_CreateOptions(input),
        )
        resp = await self._execute(opts, timeout=timeout)
        return CreateDirectoryResponse(http_response=resp)

    async def _delete(
        self,
        share_name: str,
        path: str,
        *,
        timeout: float | None = None,
    ) -> DeleteResponse:
        opts = RequestOptions(
            http_method="DELETE",
            path=_directory_path(share_name, path),
            expected_status_codes=frozenset({202}),
            options_object=_DeleteOptions(),
        )
        resp = await self._execute(opts, timeout=timeout)
        return DeleteResponse(http_response=resp)

    async def _get_metadata(
        self,
        share_name: str,
        path: str,
        *,
        timeout: float | None = None,
    ) -> GetMetaDataResponse:
        opts = RequestOptions(
            http_method="GET",
            path=_directory_path(share_name, path),
            expected_status_codes=frozenset({200}),
            options_object=_GetMetaDataOptions(),
        )
        resp = await self._execute(opts, timeout=timeout)
        return GetMetaDataResponse(http_response=resp, metadata=parse_from_headers(resp.headers))

    async def _set_metadata(
        self,
        share_name: str,
        path: str,
        input: SetMetaDataInput,
        *,
        timeout: float | None = None,
    ) -> SetMetaDataResponse:
        request_path = _directory_path(share_name, path)
        validate_metadata(input.metadata)

        opts = RequestOptions(
            http_method="PUT",
            path=request_path,
            expected_status_codes=frozenset({200}),
            options_object=_SetMetaDataOptions(input),
        )
        resp = await self._execute(opts, timeout=timeout)
        return SetMetaDataResponse(http_response=resp)


__all__ = ["_BaseDirectoriesClient"]
