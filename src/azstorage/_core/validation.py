from __future__ import annotations

from ..errors import ValidationError


def validate_name(value: str, field: str) -> None:
    if not value:
        raise ValidationError(f"`{field}` cannot be an empty string")


def validate_lower_case_name(value: str, field: str) -> None:
    """Container, queue, share and filesystem names must arrive lower-cased."""
    validate_name(value, field)
    if value.lower() != value:
        raise ValidationError(f"`{field}` must be a lower-cased string")


__all__ = ["validate_name", "validate_lower_case_name"]
