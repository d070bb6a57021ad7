from .client import AsyncQueuesClient, QueuesClient
from .types import (
    CreateInput,
    CreateResponse,
    DeleteResponse,
    GetMetaDataResponse,
    SetMetaDataInput,
    SetMetaDataResponse,
)

__all__ = [
    "QueuesClient",
    "AsyncQueuesClient",
    "CreateInput",
    "CreateResponse",
    "DeleteResponse",
    "GetMetaDataResponse",
    "SetMetaDataInput",
    "SetMetaDataResponse",
]
