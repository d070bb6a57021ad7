from __future__ import annotations

from collections.abc import Iterable

import httpx


class StorageError(Exception):
    """Base class for every error raised by azstorage."""


class ValidationError(StorageError, ValueError):
    """An operation input was rejected before any request was sent."""


class BuildRequestError(StorageError):
    def __init__(self, cause: Exception) -> None:
        super().__init__(f"building request: {cause}")


class ExecuteRequestError(StorageError):
    def __init__(self, message: str) -> None:
        super().__init__(f"executing request: {message}")


class UnexpectedStatusError(ExecuteRequestError):
    """The service answered with a status code outside the expected set.

    The raw response stays attached so callers can inspect its headers.
    """

    def __init__(self, response: httpx.Response, expected_status_codes: Iterable[int]) -> None:
        self.response = response
        self.status_code = response.status_code
        self.expected_status_codes = frozenset(expected_status_codes)
        self.error_code: str | None = response.headers.get("x-ms-error-code")
        expected = ", ".join(str(code) for code in sorted(self.expected_status_codes))
        message = (
            f"unexpected status {response.status_code} {response.reason_phrase} "
            f"(expected {expected})"
        )
        if self.error_code:
            message += f": {self.error_code}"
        super().__init__(message)


__all__ = [
    "StorageError",
    "ValidationError",
    "BuildRequestError",
    "ExecuteRequestError",
    "UnexpectedStatusError",
]
