from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import httpx

PathResource = Literal["file", "directory"]
GetPropertiesAction = Literal["getStatus", "getAccessControl"]


@dataclass(slots=True)
class CreateInput:
    resource: PathResource = "directory"
    owner: str | None = None
    group: str | None = None
    # POSIX access control list, e.g. "user::rwx,group::r-x,other::---"
    acl: str | None = None


@dataclass(slots=True)
class SetAccessControlInput:
    owner: str | None = None
    group: str | None = None
    acl: str | None = None


@dataclass(slots=True)
class CreateResponse:
    http_response: httpx.Response


@dataclass(slots=True)
class DeleteResponse:
    http_response: httpx.Response


@dataclass(slots=True)
class GetPropertiesResponse:
    http_response: httpx.Response
    resource_type: str | None
    owner: str | None
    group: str | None
    acl: str | None


@dataclass(slots=True)
class SetAccessControlResponse:
    http_response: httpx.Response


__all__ = [
    "PathResource",
    "GetPropertiesAction",
    "CreateInput",
    "SetAccessControlInput",
    "CreateResponse",
    "DeleteResponse",
    "GetPropertiesResponse",
    "SetAccessControlResponse",
]
