"""Core business logic for the Queue service."""

from __future__ import annotations

from collections.abc import Mapping

from .._core import (
    Headers,
    QueryParams,
    RequestOptions,
    _BaseStorageClient,
    parse_from_headers,
    set_into_headers,
    validate_lower_case_name,
    validate_metadata,
)
from .types import (
    CreateInput,
    CreateResponse,
    DeleteResponse,
    GetMetaDataResponse,
    SetMetaDataInput,
    SetMetaDataResponse,
)

XML_CONTENT_TYPE = "application/xml; charset=utf-8"


def _validate_queue_name(queue_name: str) -> None:
    validate_lower_case_name(queue_name, "queue_name")


class _CreateOptions:
    def __init__(self, metadata: Mapping[str, str]) -> None:
        self._metadata = metadata

    def to_headers(self) -> Headers:
        return set_into_headers(self._metadata)

    def to_odata(self) -> None:
        return None

    def to_query(self) -> None:
        return None


class _GetMetaDataOptions:
    def to_headers(self) -> None:
        return None

    def to_odata(self) -> None:
        return None

    def to_query(self) -> QueryParams:
        out = QueryParams()
        out.append("comp", "metadata")
        return out


class _SetMetaDataOptions:
    def __init__(self, metadata: Mapping[str, str]) -> None:
        self._metadata = metadata

    def to_headers(self) -> Headers:
        headers = Headers()
        headers.merge(set_into_headers(self._metadata))
        return headers

    def to_odata(self) -> None:
        return None

    def to_query(self) -> QueryParams:
        out = QueryParams()
        out.append("comp", "metadata")
        return out


class _BaseQueuesClient(_BaseStorageClient):
    """Base class for the Queue service with shared async implementation."""

    component_name = "queue"

    async def _create(
        self,
        queue_name: str,
        input: CreateInput,
        *,
        timeout: float | None = None,
    ) -> CreateResponse:
        _validate_queue_name(queue_name)
        validate_metadata(input.metadata)

        opts = RequestOptions(
            http_method="PUT",
            path=f"/{queue_name}",
            # 204 when an identical queue already exists
            expected_status_codes=frozenset({201, 204}),
            options_object=_CreateOptions(input.metadata),
            content_type=XML_CONTENT_TYPE,
        )
        resp = await self._execute(opts, timeout=timeout)
        return CreateResponse(http_response=resp)

    async def _delete(
        self,
        queue_name: str,
        *,
        timeout: float | None = None,
    ) -> DeleteResponse:
        _validate_queue_name(queue_name)

        opts = RequestOptions(
            http_method="DELETE",
            path=f"/{queue_name}",
            expected_status_codes=frozenset({204}),
        )
        resp = await self._execute(opts, timeout=timeout)
        return DeleteResponse(http_response=resp)

    async def _get_metadata(
        self,
        queue_name: str,
        *,
        timeout: float | None = None,
    ) -> GetMetaDataResponse:
        _validate_queue_name(queue_name)

        opts = RequestOptions(
            http_method="GET",
            path=f"/{queue_name}",
            expected_status_codes=frozenset({200}),
            options_object=_GetMetaDataOptions(),
        )
        resp = await self._execute(opts, timeout=timeout)
        return GetMetaDataResponse(http_response=resp, metadata=parse_from_headers(resp.headers))

    async def _set_metadata(
        self,
        queue_name: str,
        input: SetMetaDataInput,
        *,
        timeout: float | None = None,
    ) -> SetMetaDataResponse:
        _validate_queue_name(queue_name)
        validate_metadata(input.metadata)

        opts = RequestOptions(
            http_method="PUT",
            path=f"/{queue_name}",
            expected_status_codes=frozenset({204}),
            options_object=_SetMetaDataOptions(input.metadata),
            content_type=XML_CONTENT_TYPE,
        )
        resp = await self._execute(opts, timeout=timeout)
        return SetMetaDataResponse(http_response=resp)


__all__ = ["_BaseQueuesClient", "XML_CONTENT_TYPE"]
