"""Splitting on a literal delimiter and joining with a separator."""

from __future__ import annotations

from collections.abc import Iterable

from ..validation import validate_numeric_input, validate_optional_limit, validate_text_input


def _split_chars(text: str, limit: int | None) -> list[str]:
    """Split into single characters; the last token keeps the remainder."""
    if limit is None or len(text) <= limit:
        return list(text)
    return [*text[: limit - 1], text[limit - 1 :]]


def split(
    delimiter: str,
    text: str,
    max: int | None = None,  # noqa: A002
    min: int = 0,  # noqa: A002
    *,
    into: list[str] | None = None,
) -> list[str]:
    """Split text on every occurrence of a literal delimiter.

    Adjacent delimiters produce empty tokens; nothing is collapsed. An empty
    delimiter splits the text into its characters.

    Args:
        delimiter: Single character or substring to split on.
        text: Text to split.
        max: Maximum number of tokens. When reached, the last token holds the
            unsplit remainder verbatim. ``0`` yields no tokens, ``None`` means
            unbounded.
        min: Minimum number of tokens; shorter results are padded with empty
            strings to exactly this length.
        into: Optional list to reuse. It is cleared, filled with the result
            and returned.

    Returns:
        The list of tokens.

    Raises:
        ParameterError: If ``max`` or ``min`` is negative or not an integer.
    """
    delimiter = validate_text_input(delimiter, "delimiter")
    text = validate_text_input(text)
    limit = validate_optional_limit(max, "max")
    minimum = validate_numeric_input(min, 0, None, "min")

    if limit == 0:
        tokens: list[str] = []
    elif not delimiter:
        tokens = _split_chars(text, limit)
    elif limit is None:
        tokens = text.split(delimiter)
    else:
        tokens = text.split(delimiter, limit - 1)

    if len(tokens) < minimum:
        tokens.extend([""] * (minimum - len(tokens)))

    if into is None:
        return tokens
    into[:] = tokens
    return into


def join(separator: str, tokens: Iterable[str]) -> str:
    """Concatenate tokens with ``separator`` between consecutive entries."""
    return validate_text_input(separator, "separator").join(tokens)
