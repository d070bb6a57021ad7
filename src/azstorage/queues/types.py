from __future__ import annotations

from dataclasses import dataclass, field

import httpx


@dataclass(slots=True)
class CreateInput:
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class SetMetaDataInput:
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class CreateResponse:
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
    "CreateInput",
    "SetMetaDataInput",
    "CreateResponse",
    "DeleteResponse",
    "GetMetaDataResponse",
    "SetMetaDataResponse",
]
