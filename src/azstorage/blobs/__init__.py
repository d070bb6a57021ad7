from .client import AsyncBlobsClient, BlobsClient
from .types import (
    AbortCopyInput,
    AbortCopyResponse,
    CopyInput,
    CopyResponse,
    DeleteInput,
    DeleteResponse,
    DeleteSnapshots,
    GetMetaDataInput,
    GetMetaDataResponse,
    SetMetaDataInput,
    SetMetaDataResponse,
)

__all__ = [
    "BlobsClient",
    "AsyncBlobsClient",
    "AbortCopyInput",
    "AbortCopyResponse",
    "CopyInput",
    "CopyResponse",
    "DeleteInput",
    "DeleteResponse",
    "DeleteSnapshots",
    "GetMetaDataInput",
    "GetMetaDataResponse",
    "SetMetaDataInput",
    "SetMetaDataResponse",
]
