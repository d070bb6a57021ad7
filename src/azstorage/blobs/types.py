from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

import httpx

DeleteSnapshots = Literal["include", "only"]


@dataclass(slots=True)
class AbortCopyInput:
    # The copy ID which should be aborted
    copy_id: str
    # Required when the blob has an active lease, otherwise the service answers 403
    lease_id: str | None = None


@dataclass(slots=True)
class CopyInput:
    # URL of the source blob or file
    copy_source: str
    metadata: dict[str, str] = field(default_factory=dict)
    lease_id: str | None = None
    source_lease_id: str | None = None
    access_tier: str | None = None


@dataclass(slots=True)
class DeleteInput:
    lease_id: str | None = None
    delete_snapshots: DeleteSnapshots | None = None


@dataclass(slots=True)
class GetMetaDataInput:
    lease_id: str | None = None


@dataclass(slots=True)
class SetMetaDataInput:
    metadata: dict[str, str] = field(default_factory=dict)
    lease_id: str | None = None


@dataclass(slots=True)
class AbortCopyResponse:
    http_response: httpx.Response


@dataclass(slots=True)
class CopyResponse:
    http_response: httpx.Response
    copy_id: str | None
    copy_status: str | None


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
    "DeleteSnapshots",
    "AbortCopyInput",
    "CopyInput",
    "DeleteInput",
    "GetMetaDataInput",
    "SetMetaDataInput",
    "AbortCopyResponse",
    "CopyResponse",
    "DeleteResponse",
    "GetMetaDataResponse",
    "SetMetaDataResponse",
]
