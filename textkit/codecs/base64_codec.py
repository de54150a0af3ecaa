"""Base64 encoding and decoding with the RFC 4648 standard alphabet.

Encoding works on groups of three input bytes, which are read as one 24-bit
integer and emitted as four 6-bit symbols. A trailing group of one or two
bytes is zero-extended, emitted as two or three symbols and padded with
``=`` to a multiple of four. The encoded text can optionally be broken into
lines of a fixed number of symbols.

Decoding ignores ASCII whitespace, so line-broken output decodes unchanged.
Anything else outside the alphabet raises :class:`FormatError`.
"""

from __future__ import annotations

import logging

from ..const import (
    ASCII_WHITESPACE,
    BASE64_ALPHABET,
    BASE64_INDEX,
    BASE64_PAD,
    DEFAULT_BASE64_LINE_LENGTH,
)
from ..exceptions import FormatError
from ..validation import sanitize_log_message, validate_numeric_input, validate_text_input
from .byte_utils import BytesLike, as_bytes

_LOGGER = logging.getLogger(__name__)

_SHIFTS = (18, 12, 6, 0)


def _break_lines(encoded: str, line_length: int) -> str:
    """Insert a newline after every ``line_length`` symbols, none at the end."""
    return "\n".join(encoded[pos : pos + line_length] for pos in range(0, len(encoded), line_length))


def base64_encode(data: BytesLike, line_length: int = DEFAULT_BASE64_LINE_LENGTH) -> str:
    """Encode bytes as Base64 text.

    Args:
        data: Bytes to encode (any bytes-like value or iterable of ints).
        line_length: If positive, break the output into lines of this many
            symbols. The last line carries no trailing newline.

    Returns:
        Base64 text, empty for empty input.

    Raises:
        ParameterError: If ``line_length`` is negative or not an integer.
    """
    line_length = validate_numeric_input(line_length, 0, None, "line_length")
    raw = as_bytes(data)

    symbols: list[str] = []
    for pos in range(0, len(raw), 3):
        chunk = raw[pos : pos + 3]
        group = int.from_bytes(chunk.ljust(3, b"\0"), "big")
        # n input bytes carry information in n + 1 symbols
        used = len(chunk) + 1
        symbols.extend(BASE64_ALPHABET[(group >> shift) & 0x3F] for shift in _SHIFTS[:used])
        symbols.append(BASE64_PAD * (4 - used))

    encoded = "".join(symbols)
    if line_length > 0:
        return _break_lines(encoded, line_length)
    return encoded


def _is_invalid(char: str) -> bool:
    return char not in BASE64_INDEX and char != BASE64_PAD and char not in ASCII_WHITESPACE


def _reject(text: str, message: str, position: int | None, fragment: str | None) -> FormatError:
    _LOGGER.debug("Rejecting base64 input %s: %s", sanitize_log_message(text), message)
    return FormatError(message, position=position, fragment=fragment)


def _invalid_run(text: str, start: int) -> FormatError:
    end = start
    while end < len(text) and _is_invalid(text[end]):
        end += 1
    run = text[start:end]
    return _reject(
        text,
        f"Invalid character(s) {run!r} in base64 data at offset {start}",
        start,
        run,
    )


def base64_decode(text: str) -> bytes:
    """Decode Base64 text back into bytes.

    Whitespace anywhere in the input is ignored. Missing trailing padding is
    tolerated; padding that is present must complete the final group.

    Args:
        text: Base64 text, e.g. as produced by :func:`base64_encode`.

    Returns:
        The decoded bytes.

    Raises:
        FormatError: On characters outside the alphabet, symbols after the
            padding, excess or inconsistent padding, or a final group that
            is too short to hold a byte.
    """
    text = validate_text_input(text)

    values: list[int] = []
    padding = 0
    for offset, char in enumerate(text):
        if char in ASCII_WHITESPACE:
            continue
        if char == BASE64_PAD:
            padding += 1
            if padding > 2:
                raise _reject(text, f"Too much base64 padding at offset {offset}", offset, char)
            continue
        value = BASE64_INDEX.get(char)
        if value is None:
            raise _invalid_run(text, offset)
        if padding:
            raise _reject(text, f"Base64 symbol {char!r} after padding at offset {offset}", offset, char)
        values.append(value)

    remainder = len(values) % 4
    if remainder == 1:
        raise _reject(text, "Truncated base64 data: final group holds a single symbol", None, None)
    if padding and (remainder + padding) % 4 != 0:
        raise _reject(text, "Incorrect base64 padding", None, BASE64_PAD * padding)

    out = bytearray()
    for pos in range(0, len(values), 4):
        quad = values[pos : pos + 4]
        group = 0
        for value in quad:
            group = (group << 6) | value
        group <<= 6 * (4 - len(quad))
        # n symbols carry n - 1 full bytes
        out += group.to_bytes(3, "big")[: len(quad) - 1]
    return bytes(out)
