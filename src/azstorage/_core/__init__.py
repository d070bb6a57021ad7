"""Core request-shaping machinery shared by every service client."""

from .base import _AsyncStorageClient, _BaseStorageClient, _SyncStorageClient
from .metadata import (
    METADATA_HEADER_PREFIX,
    parse_from_headers,
    set_into_headers,
    validate_metadata,
)
from .request import Headers, OptionsObject, QueryParams, RequestOptions
from .validation import validate_lower_case_name, validate_name

__all__ = [
    "_BaseStorageClient",
    "_SyncStorageClient",
    "_AsyncStorageClient",
    "METADATA_HEADER_PREFIX",
    "parse_from_headers",
    "set_into_headers",
    "validate_metadata",
    "Headers",
    "OptionsObject",
    "QueryParams",
    "RequestOptions",
    "validate_lower_case_name",
    "validate_name",
]
