"""Core business logic for Data Lake Storage paths."""

from __future__ import annotations

import urllib.parse

from .._core import (
    Headers,
    QueryParams,
    RequestOptions,
    _BaseStorageClient,
    validate_lower_case_name,
    validate_name,
)
from ..errors import ValidationError
from .types import (
    CreateInput,
    CreateResponse,
    DeleteResponse,
    GetPropertiesAction,
    GetPropertiesResponse,
    SetAccessControlInput,
    SetAccessControlResponse,
)

_RESOURCES = ("file", "directory")
_GET_PROPERTIES_ACTIONS = ("getStatus", "getAccessControl")


def _path(file_system_name: str, path: str) -> str:
    validate_lower_case_name(file_system_name, "file_system_name")
    stripped = path.strip("/")
    validate_name(stripped, "path")
    return f"/{file_system_name}/{urllib.parse.quote(stripped)}"


def _access_control_headers(owner: str | None, group: str | None, acl: str | None) -> Headers:
    headers = Headers()
    if owner is not None:
        headers.append("x-ms-owner", owner)
    if group is not None:
        headers.append("x-ms-group", group)
    if acl is not None:
        headers.append("x-ms-acl", acl)
    return headers


class _CreateOptions:
    def __init__(self, input: CreateInput) -> None:
        self._input = input

    def to_headers(self) -> Headers:
        return _access_control_headers(self._input.owner, self._input.group, self._input.acl)

    def to_odata(self) -> None:
        return None

    def to_query(self) -> QueryParams:
        out = QueryParams()
        out.append("resource", self._input.resource)
        return out


class _GetPropertiesOptions:
    def __init__(self, action: str) -> None:
        self._action = action

    def to_headers(self) -> None:
        return None

    def to_odata(self) -> None:
        return None

    def to_query(self) -> QueryParams:
        out = QueryParams()
        out.append("action", self._action)
        return out


class _SetAccessControlOptions:
    def __init__(self, input: SetAccessControlInput) -> None:
        self._input = input

    def to_headers(self) -> Headers:
        return _access_control_headers(self._input.owner, self._input.group, self._input.acl)

    def to_odata(self) -> None:
        return None

    def to_query(self) -> QueryParams:
        out = QueryParams()
        out.append("action", "setAccessControl")
        return out


class _BasePathsClient(_BaseStorageClient):
    """Base class for Data Lake Storage paths with shared async implementation."""

    component_name = "dfs"

    async def _create(
        self,
        file_system_name: str,
        path: str,
        input: CreateInput,
        *,
        timeout: float | None = None,
    ) -> CreateResponse:
        request_path = _path(file_system_name, path)
        if input.resource not in _RESOURCES:
            raise ValidationError(
                f"`input.resource` must be one of {_RESOURCES}, got {input.resource!r}"
            )

        opts = RequestOptions(
            http_method="PUT",
            path=request_path,
            expected_status_codes=frozenset({201}),
            options_object=_CreateOptions(input),
        )
        resp = await self._execute(opts, timeout=timeout)
        return CreateResponse(http_response=resp)

    async def _delete(
        self,
        file_system_name: str,
        path: str,
        *,
        timeout: float | None = None,
    ) -> DeleteResponse:
        opts = RequestOptions(
            http_method="DELETE",
            path=_path(file_system_name, path),
            expected_status_codes=frozenset({200}),
        )
        resp = await self._execute(opts, timeout=timeout)
        return DeleteResponse(http_response=resp)

    async def _get_properties(
        self,
        file_system_name: str,
        path: str,
        action: GetPropertiesAction,
        *,
        timeout: float | None = None,
    ) -> GetPropertiesResponse:
        request_path = _path(file_system_name, path)
        if action not in _GET_PROPERTIES_ACTIONS:
            raise ValidationError(
                f"`action` must be one of {_GET_PROPERTIES_ACTIONS}, got {action!r}"
            )

        opts = RequestOptions(
            http_method="HEAD",
            path=request_path,
            expected_status_codes=frozenset({200}),
            options_object=_GetPropertiesOptions(action),
        )
        resp = await self._execute(opts, timeout=timeout)
        return GetPropertiesResponse(
            http_response=resp,
            resource_type=resp.headers.get("x-ms-resource-type"),
            owner=resp.headers.get("x-ms-owner"),
            group=resp.headers.get("x-ms-group"),
            acl=resp.headers.get("x-ms-acl"),
        )

    async def _set_access_control(
        self,
        file_system_name: str,
        path: str,
        input: SetAccessControlInput,
        *,
        timeout: float | None = None,
    ) -> SetAccessControlResponse:
        request_path = _path(file_system_name, path)
        if input.owner is None and input.group is None and input.acl is None:
            raise ValidationError("at least one of `owner`, `group` or `acl` must be set")

        opts = RequestOptions(
            http_method="PATCH",
            path=request_path,
            expected_status_codes=frozenset({200}),
            options_object=_SetAccessControlOptions(input),
        )
        resp = await self._execute(opts, timeout=timeout)
        return SetAccessControlResponse(http_response=resp)


__all__ = ["_BasePathsClient"]
