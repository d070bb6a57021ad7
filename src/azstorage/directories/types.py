from __future__ import annotations

from dataclasses import dataclass, field

import httpx


@dataclass(slots=True)
class CreateDirectoryInput:
    metadata: dict[str, str] = field(default_factory=dict)
    # ISO-8601 timestamps, or "now" to let the service stamp them
    created_at: str = "now"
    last_modified: str = "now"


@dataclass(slots=True)
class SetMetaDataInput:
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class CreateDirectoryResponse:
    http_response: httpx.Response


@dataclass(slots=True)
class DeleteResponse:
    http_response: httpx.Response


@dataclass(slots=True)
class GetMetaDataResponse:
    http_response: httpx.Response
    metadata: dict[str, str]


@dataclass(slots=True)
class SetMetaDataResponse:
    http_response: httpx.Response


__all__ = [
    "CreateDirectoryInput",
    "SetMetaDataInput",
    "CreateDirectoryResponse",
    "DeleteResponse",
    "GetMetaDataResponse",
    "SetMetaDataResponse",
]
