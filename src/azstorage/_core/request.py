"""Request descriptors and the per-operation options protocol."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Protocol


class _Pairs:
    """Ordered, multi-valued collection of string pairs."""

    def __init__(self, items: Iterable[tuple[str, str]] = ()) -> None:
        self._items: list[tuple[str, str]] = list(items)

    def append(self, key: str, value: str) -> None:
        self._items.append((key, value))

    def merge(self, other: _Pairs | None) -> None:
        if other is not None:
            self._items.extend(other.items())

    def items(self) -> list[tuple[str, str]]:
        return list(self._items)

    def get(self, key: str) -> str | None:
        for k, v in self._items:
            if k == key:
                return v
        return None

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Pairs):
            return NotImplemented
        return type(self) is type(other) and self._items == other._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class Headers(_Pairs):
    """Request headers. Lookup by name is case-insensitive."""

    def get(self, key: str) -> str | None:
        lowered = key.lower()
        for k, v in self._items:
            if k.lower() == lowered:
                return v
        return None

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.get(key) is not None


class QueryParams(_Pairs):
    """Query string parameters, kept in insertion order."""


class OptionsObject(Protocol):
    """What varies between operations: their headers and query string."""

    def to_headers(self) -> Headers | None: ...

    def to_odata(self) -> None: ...

    def to_query(self) -> QueryParams | None: ...


@dataclass(frozen=True)
class RequestOptions:
    """Fully specified description of a single data-plane request."""

    http_method: str
    path: str
    expected_status_codes: frozenset[int]
    options_object: OptionsObject | None = None
    content_type: str | None = None
    content: bytes | None = field(default=None, repr=False)

    def headers(self) -> Headers:
        headers = Headers()
        if self.content_type:
            headers.append("content-type", self.content_type)
        if self.options_object is not None:
            headers.merge(self.options_object.to_headers())
        return headers

    def query(self) -> QueryParams:
        query = QueryParams()
        if self.options_object is not None:
            query.merge(self.options_object.to_query())
        return query


__all__ = [
    "Headers",
    "QueryParams",
    "OptionsObject",
    "RequestOptions",
]
