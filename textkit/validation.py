"""Parameter validation and log sanitising helpers."""

from __future__ import annotations

from typing import Any

import voluptuous as vol

from .const import MAX_LOG_FRAGMENT
from .exceptions import ParameterError


def strict_int(value: Any) -> int:
    """Accept plain integers only (bool and float are rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise vol.Invalid(f"expected an integer, got {type(value).__name__}")
    return value


def _run_schema(schema: vol.Schema, value: Any, name: str) -> Any:
    try:
        return schema(value)
    except vol.Invalid as err:
        raise ParameterError(f"Invalid {name}: {err.msg}") from err


def validate_numeric_input(value: Any, min_value: int | None, max_value: int | None, name: str) -> int:
    """Validate an integer parameter against an inclusive range.

    Args:
        value: Value to validate.
        min_value: Lowest accepted value, or None for no lower bound.
        max_value: Highest accepted value, or None for no upper bound.
        name: Parameter name used in the error message.

    Returns:
        The validated integer.

    Raises:
        ParameterError: If the value is not an integer or is out of range.
    """
    schema = vol.Schema(vol.All(strict_int, vol.Range(min=min_value, max=max_value)))
    return _run_schema(schema, value, name)  # type: ignore[no-any-return]


def validate_optional_limit(value: Any, name: str) -> int | None:
    """Validate a split limit: None (unbounded) or a non-negative integer."""
    if value is None:
        return None
    return validate_numeric_input(value, 0, None, name)


def validate_width(width: Any) -> int:
    """Validate a wrap width (positive integer)."""
    return validate_numeric_input(width, 1, None, "width")


def validate_text_input(text: Any, name: str = "text") -> str:
    """Validate that a parameter is a string."""
    return _run_schema(vol.Schema(str), text, name)  # type: ignore[no-any-return]


def sanitize_log_message(message: str, max_length: int = MAX_LOG_FRAGMENT) -> str:
    """Make a piece of user data safe to embed in a log record.

    Control characters are escaped and long values are truncated so that
    a malformed multi-megabyte payload does not end up in the log.

    Args:
        message: Raw text.
        max_length: Maximum number of characters kept before truncation.

    Returns:
        Printable, possibly truncated text.
    """
    escaped = message.encode("unicode_escape").decode("ascii")
    if len(escaped) > max_length:
        return f"{escaped[:max_length]}...({len(message)} chars)"
    return escaped
