"""Validator — field checks shared by the registry and the scaffold generator."""

from __future__ import annotations

from recordkit.errors import InvalidInputError


def require_non_empty(value: object, field_name: str) -> str:
    """Return ``value`` unchanged if it is a non-empty string.

    Raises InvalidInputError otherwise. Whitespace-only text counts as
    non-empty; only the empty string is rejected.
    """
    if not isinstance(value, str):
        raise InvalidInputError(
            f"{field_name} must be a string, got {type(value).__name__}"
        )
    if not value:
        raise InvalidInputError(f"{field_name} cannot be empty")
    return value


def require_in_range(value: object, minimum: int, maximum: int, field_name: str) -> int:
    """Return ``value`` if it is an int within ``[minimum, maximum]``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(
            f"{field_name} must be an integer, got {type(value).__name__}"
        )
    if value < minimum or value > maximum:
        raise InvalidInputError(
            f"{field_name} must be between {minimum} and {maximum}"
        )
    return value
