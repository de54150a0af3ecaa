"""Whitespace tokenizer that honours double quotes and backslash escapes."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto
import logging

from ..const import ASCII_WHITESPACE, ESCAPE_CHAR, QUOTE_CHAR, QUOTED_ESCAPES, QUOTED_ESCAPES_REVERSE
from ..exceptions import FormatError
from ..validation import sanitize_log_message, validate_text_input

_LOGGER = logging.getLogger(__name__)

_NEEDS_QUOTING = ASCII_WHITESPACE | {QUOTE_CHAR, ESCAPE_CHAR}


class _State(Enum):
    """Scanner states of :func:`split_quoted`."""

    BETWEEN = auto()  # skipping separator whitespace
    UNQUOTED = auto()  # inside a token, outside quotes
    QUOTED = auto()  # inside a double-quoted span
    ESCAPED = auto()  # right after a backslash in a quoted span


def split_quoted(text: str) -> list[str]:
    """Split text into whitespace-separated tokens, honouring quotes.

    Runs of unquoted whitespace separate tokens. A double quote starts a span
    that runs to the next unescaped double quote; whitespace inside it is
    kept. Inside quotes a backslash escapes the next character: ``\\\\``,
    ``\\"``, ``\\n``, ``\\t`` and ``\\r`` map to backslash, quote, newline,
    tab and carriage return, any other character is kept as written. A quoted
    span touching unquoted characters becomes part of the same token, and
    ``""`` yields an empty token.

    Args:
        text: Text to split.

    Returns:
        List of tokens; empty for empty or all-whitespace input.

    Raises:
        FormatError: If a quoted span is not terminated.
    """
    text = validate_text_input(text)

    tokens: list[str] = []
    current: list[str] = []
    state = _State.BETWEEN
    quote_start = 0

    for offset, char in enumerate(text):
        if state is _State.ESCAPED:
            current.append(QUOTED_ESCAPES.get(char, char))
            state = _State.QUOTED
        elif state is _State.QUOTED:
            if char == ESCAPE_CHAR:
                state = _State.ESCAPED
            elif char == QUOTE_CHAR:
                state = _State.UNQUOTED
            else:
                current.append(char)
        elif char in ASCII_WHITESPACE:
            if state is _State.UNQUOTED:
                tokens.append("".join(current))
                current.clear()
                state = _State.BETWEEN
        elif char == QUOTE_CHAR:
            quote_start = offset
            state = _State.QUOTED
        else:
            current.append(char)
            state = _State.UNQUOTED

    if state in (_State.QUOTED, _State.ESCAPED):
        _LOGGER.debug("Unterminated quote in %s", sanitize_log_message(text))
        raise FormatError(
            f"Unterminated quoted token starting at offset {quote_start}",
            position=quote_start,
            fragment=text[quote_start:],
        )
    if state is _State.UNQUOTED:
        tokens.append("".join(current))
    return tokens


def _quote(token: str) -> str:
    escaped = "".join(QUOTED_ESCAPES_REVERSE.get(char, char) for char in token)
    return f"{QUOTE_CHAR}{escaped}{QUOTE_CHAR}"


def join_quoted(tokens: Iterable[str]) -> str:
    """Join tokens with single spaces, quoting those that need it.

    Tokens that are empty or contain whitespace, a double quote or a
    backslash are wrapped in double quotes with their special characters
    escaped, so that :func:`split_quoted` returns the original list.
    """
    parts = []
    for token in tokens:
        if not token or any(char in _NEEDS_QUOTING for char in token):
            parts.append(_quote(token))
        else:
            parts.append(token)
    return " ".join(parts)
