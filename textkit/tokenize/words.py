"""Splitting on runs of whitespace."""

from __future__ import annotations

from ..const import ASCII_WHITESPACE
from ..validation import validate_optional_limit, validate_text_input


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in ASCII_WHITESPACE:
        pos += 1
    return pos


def split_words(text: str, max: int | None = None) -> list[str]:  # noqa: A002
    """Split text on runs of ASCII whitespace.

    Leading and trailing whitespace produce no tokens. When ``max`` bounds
    the result, the last token is the rest of the text starting right after
    the whitespace that followed the previous token, kept as-is (internal and
    trailing whitespace included).

    Example::

        >>> split_words("  ab c   df  fdlk f  ", 3)
        ['ab', 'c', 'df  fdlk f  ']

    Raises:
        ParameterError: If ``max`` is negative or not an integer.
    """
    text = validate_text_input(text)
    limit = validate_optional_limit(max, "max")

    words: list[str] = []
    if limit == 0:
        return words

    pos = _skip_whitespace(text, 0)
    while pos < len(text):
        if limit is not None and len(words) == limit - 1:
            words.append(text[pos:])
            break
        end = pos
        while end < len(text) and text[end] not in ASCII_WHITESPACE:
            end += 1
        words.append(text[pos:end])
        pos = _skip_whitespace(text, end)
    return words
