"""User-defined metadata carried in ``x-ms-meta-*`` headers."""

from __future__ import annotations

import re
from collections.abc import Mapping

import httpx

from ..errors import ValidationError
from .request import Headers

METADATA_HEADER_PREFIX = "x-ms-meta-"

# keys must be valid C# identifiers: the service exposes them that way
_KEY_PATTERN = re.compile(r"[a-z_][a-z0-9_]+")
_VALUE_PATTERN = re.compile(r"[\t\x20-\x7e]*")

CSHARP_KEYWORDS = frozenset(
    {
        "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
        "char", "checked", "class", "const", "continue", "decimal", "default",
        "delegate", "do", "double", "else", "enum", "event", "explicit",
        "extern", "false", "finally", "fixed", "float", "for", "foreach",
        "goto", "if", "implicit", "in", "int", "interface", "internal", "is",
        "lock", "long", "namespace", "new", "null", "object", "operator",
        "out", "override", "params", "private", "protected", "public",
        "readonly", "ref", "return", "sbyte", "sealed", "short", "sizeof",
        "stackalloc", "static", "string", "struct", "switch", "this", "throw",
        "true", "try", "typeof", "uint", "ulong", "unchecked", "unsafe",
        "ushort", "using", "virtual", "void", "volatile", "while",
    }
)  # fmt: skip


def validate_metadata(metadata: Mapping[str, str] | None) -> None:
    """Reject metadata the service would refuse or that can't travel as a header."""
    if not metadata:
        return
    for key, value in metadata.items():
        if not isinstance(key, str):
            raise ValidationError(f"`metadata` is not valid: key {key!r} is not a string")
        if key.lower() in CSHARP_KEYWORDS:
            raise ValidationError(f"`metadata` is not valid: {key!r} is a C# keyword")
        if not _KEY_PATTERN.fullmatch(key):
            raise ValidationError(
                "`metadata` is not valid: keys must start with a lower-case letter or "
                f"underscore and contain only letters, digits and underscores, got {key!r}"
            )
        if not isinstance(value, str) or not _VALUE_PATTERN.fullmatch(value):
            raise ValidationError(
                f"`metadata` is not valid: value for {key!r} contains characters "
                "not allowed in a header"
            )


def set_into_headers(metadata: Mapping[str, str] | None) -> Headers:
    headers = Headers()
    if metadata:
        for key, value in metadata.items():
            headers.append(f"{METADATA_HEADER_PREFIX}{key}", value)
    return headers


def parse_from_headers(headers: httpx.Headers) -> dict[str, str]:
    metadata: dict[str, str] = {}
    for name, value in headers.items():
        lowered = name.lower()
        if lowered.startswith(METADATA_HEADER_PREFIX):
            metadata[lowered[len(METADATA_HEADER_PREFIX) :]] = value
    return metadata


__all__ = [
    "METADATA_HEADER_PREFIX",
    "validate_metadata",
    "set_into_headers",
    "parse_from_headers",
]
