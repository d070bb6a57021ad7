from .client import AsyncDirectoriesClient, DirectoriesClient
from .types import (
    CreateDirectoryInput,
    CreateDirectoryResponse,
    DeleteResponse,
    GetMetaDataResponse,
    SetMetaDataInput,
    SetMetaDataResponse,
)

__all__ = [
    "DirectoriesClient",
    "AsyncDirectoriesClient",
    "CreateDirectoryInput",
    "CreateDirectoryResponse",
    "DeleteResponse",
    "GetMetaDataResponse",
    "SetMetaDataInput",
    "SetMetaDataResponse",
]
