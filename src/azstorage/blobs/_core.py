"""Core business logic for the Blob service."""

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
from ..errors import ValidationError
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

_DELETE_SNAPSHOTS_VALUES = ("include", "only")


def _blob_path(container_name: str, blob_name: str) -> str:
    validate_lower_case_name(container_name, "container_name")
    validate_name(blob_name, "blob_name")
    return f"/{container_name}/{urllib.parse.quote(blob_name)}"


def _lease_headers(lease_id: str | None) -> Headers:
    headers = Headers()
    if lease_id is not None:
        headers.append("x-ms-lease-id", lease_id)
    return headers


def _metadata_query() -> QueryParams:
    out = QueryParams()
    out.append("comp", "metadata")
    return out


class _AbortCopyOptions:
    def __init__(self, input: AbortCopyInput) -> None:
        self._input = input

    def to_headers(self) -> Headers:
        headers = Headers()
        headers.append("x-ms-copy-action", "abort")
        headers.merge(_lease_headers(self._input.lease_id))
        return headers

    def to_odata(self) -> None:
        return None

    def to_query(self) -> QueryParams:
        out = QueryParams()
        out.append("comp", "copy")
        out.append("copyid", self._input.copy_id)
        return out


class _CopyOptions:
    def __init__(self, input: CopyInput) -> None:
        self._input = input

    def to_headers(self) -> Headers:
        headers = Headers()
        headers.append("x-ms-copy-source", self._input.copy_source)
        headers.merge(_lease_headers(self._input.lease_id))
        if self._input.source_lease_id is not None:
            headers.append("x-ms-source-lease-id", self._input.source_lease_id)
        if self._input.access_tier is not None:
            headers.append("x-ms-access-tier", self._input.access_tier)
        headers.merge(set_into_headers(self._input.metadata))
        return headers

    def to_odata(self) -> None:
        return None

    def to_query(self) -> None:
        return None


class _DeleteOptions:
    def __init__(self, input: DeleteInput) -> None:
        self._input = input

    def to_headers(self) -> Headers:
        headers = _lease_headers(self._input.lease_id)
        if self._input.delete_snapshots is not None:
            headers.append("x-ms-delete-snapshots", self._input.delete_snapshots)
        return headers

    def to_odata(self) -> None:
        return None

    def to_query(self) -> None:
        return None


class _GetMetaDataOptions:
    def __init__(self, input: GetMetaDataInput) -> None:
        self._input = input

    def to_headers(self) -> Headers:
        return _lease_headers(self._input.lease_id)

    def to_odata(self) -> None:
        return None

    def to_query(self) -> QueryParams:
        return _metadata_query()


class _SetMetaDataOptions:
    def __init__(self, input: SetMetaDataInput) -> None:
        self._input = input

    def to_headers(self) -> Headers:
        headers = _lease_headers(self._input.lease_id)
        headers.merge(set_into_headers(self._input.metadata))
        return headers

    def to_odata(self) -> None:
        return None

    def to_query(self) -> QueryParams:
        return _metadata_query()


class _BaseBlobsClient(_BaseStorageClient):
    """Base class for the Blob service with shared async implementation."""

    component_name = "blob"

    async def _abort_copy(
        self,
        container_name: str,
        blob_name: str,
        input: AbortCopyInput,
        *,
        timeout: float | None = None,
    ) -> AbortCopyResponse:
        path = _blob_path(container_name, blob_name)
        if not input.copy_id:
            raise ValidationError("`input.copy_id` cannot be an empty string")

        opts = RequestOptions(
            http_method="PUT",
            path=path,
            expected_status_codes=frozenset({204}),
            options_object=_AbortCopyOptions(input),
        )
        resp = await self._execute(opts, timeout=timeout)
        return AbortCopyResponse(http_response=resp)

    async def _copy(
        self,
        container_name: str,
        blob_name: str,
        input: CopyInput,
        *,
        timeout: float | None = None,
    ) -> CopyResponse:
        path = _blob_path(container_name, blob_name)
        if not input.copy_source:
            raise ValidationError("`input.copy_source` cannot be an empty string")
        validate_metadata(input.metadata)

        opts = RequestOptions(
            http_method="PUT",
            path=path,
            expected_status_codes=frozenset({202}),
            options_object=_CopyOptions(input),
        )
        resp = await self._execute(opts, timeout=timeout)
        return CopyResponse(
            http_response=resp,
            copy_id=resp.headers.get("x-ms-copy-id"),
            copy_status=resp.headers.get("x-ms-copy-status"),
        )

    async def _delete(
        self,
        container_name: str,
        blob_name: str,
        input: DeleteInput,
        *,
        timeout: float | None = None,
    ) -> DeleteResponse:
        path = _blob_path(container_name, blob_name)
        if (
            input.delete_snapshots is not None
            and input.delete_snapshots not in _DELETE_SNAPSHOTS_VALUES
        ):
            raise ValidationError(
                f"`input.delete_snapshots` must be one of {_DELETE_SNAPSHOTS_VALUES}, "
                f"got {input.delete_snapshots!r}"
            )

        opts = RequestOptions(
            http_method="DELETE",
            path=path,
            expected_status_codes=frozenset({202}),
            options_object=_DeleteOptions(input),
        )
        resp = await self._execute(opts, timeout=timeout)
        return DeleteResponse(http_response=resp)

    async def _get_metadata(
        self,
        container_name: str,
        blob_name: str,
        input: GetMetaDataInput,
        *,
        timeout: float | None = None,
    ) -> GetMetaDataResponse:
        path = _blob_path(container_name, blob_name)

        opts = RequestOptions(
            http_method="GET",
            path=path,
            expected_status_codes=frozenset({200}),
            options_object=_GetMetaDataOptions(input),
        )
        resp = await self._execute(opts, timeout=timeout)
        return GetMetaDataResponse(http_response=resp, metadata=parse_from_headers(resp.headers))

    async def _set_metadata(
        self,
        container_name: str,
        blob_name: str,
        input: SetMetaDataInput,
        *,
        timeout: float | None = None,
    ) -> SetMetaDataResponse:
        path = _blob_path(container_name, blob_name)
        validate_metadata(input.metadata)

        opts = RequestOptions(
            http_method="PUT",
            path=path,
            expected_status_codes=frozenset({200}),
            options_object=_SetMetaDataOptions(input),
        )
        resp = await self._execute(opts, timeout=timeout)
        return SetMetaDataResponse(http_response=resp)


__all__ = ["_BaseBlobsClient"]
