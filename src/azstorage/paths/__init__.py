from .client import AsyncPathsClient, PathsClient
from .types import (
    CreateInput,
    CreateResponse,
    DeleteResponse,
    GetPropertiesAction,
    GetPropertiesResponse,
    PathResource,
    SetAccessControlInput,
    SetAccessControlResponse,
)

__all__ = [
    "PathsClient",
    "AsyncPathsClient",
    "CreateInput",
    "CreateResponse",
    "DeleteResponse",
    "GetPropertiesAction",
    "GetPropertiesResponse",
    "PathResource",
    "SetAccessControlInput",
    "SetAccessControlResponse",
]
