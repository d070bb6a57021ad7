"""HTTP configuration for storage data-plane clients."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_API_VERSION = "2020-08-04"
DEFAULT_TIMEOUT = 60.0
TOKEN_ENV_VAR = "AZURE_STORAGE_ACCESS_TOKEN"


@dataclass(frozen=True)
class ClientConfig:
    """Configuration shared by every request a client sends."""

    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    api_version: str = DEFAULT_API_VERSION
    token: str | None = None
    default_headers: dict[str, str] = field(default_factory=dict)

    def get_headers(self) -> dict[str, str]:
        """Build the static headers attached to every request."""
        return {
            "x-ms-version": self.api_version,
            **self.default_headers,
        }


def resolve_token(token: str | None) -> str | None:
    """Resolve a bearer token from the argument or environment.

    Returns None when neither is set; callers relying on another
    authorization scheme inject their own httpx client instead.
    """
    return token or os.getenv(TOKEN_ENV_VAR) or None


__all__ = [
    "ClientConfig",
    "DEFAULT_API_VERSION",
    "DEFAULT_TIMEOUT",
    "TOKEN_ENV_VAR",
    "resolve_token",
]
