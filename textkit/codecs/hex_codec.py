"""Hexadecimal dumps of byte sequences."""

from __future__ import annotations

import logging
import re

from ..const import DEFAULT_SOURCE_NAME, HEX_DIGITS
from ..exceptions import FormatError
from ..validation import sanitize_log_message, validate_text_input
from .byte_utils import BytesLike, as_bytes

_LOGGER = logging.getLogger(__name__)

_NON_HEX = re.compile(r"[^0-9A-Fa-f]")


def hexdump(data: BytesLike) -> str:
    """Return two uppercase hex digits per byte, without separators.

    Example: ``hexdump(b"\\x8d\\xe2") == "8DE2"``.
    """
    return as_bytes(data).hex().upper()


def parse_hexdump(text: str) -> bytes:
    """Parse a hex dump back into bytes.

    Upper- and lowercase digits are accepted.

    Args:
        text: Even-length string of hex digits.

    Returns:
        The decoded bytes.

    Raises:
        FormatError: If the text has odd length or contains a non-hex
            character.
    """
    text = validate_text_input(text)

    bad = _NON_HEX.search(text)
    if bad is not None:
        _LOGGER.debug("Rejecting hexdump %s", sanitize_log_message(text))
        raise FormatError(
            f"Invalid hex digit {bad.group()!r} at offset {bad.start()}",
            position=bad.start(),
            fragment=bad.group(),
        )
    if len(text) % 2:
        _LOGGER.debug("Rejecting odd-length hexdump %s", sanitize_log_message(text))
        raise FormatError(f"Hexdump has odd length {len(text)}")
    return bytes.fromhex(text)


def hexdump_sourcecode(data: BytesLike, name: str = DEFAULT_SOURCE_NAME) -> str:
    """Render bytes as a C ``uint8_t`` array declaration.

    The name is inserted verbatim, so the caller must pass a valid
    identifier.

    Args:
        data: Bytes to render.
        name: Variable name of the array.

    Returns:
        Source text of the form::

            const uint8_t name[3] = {
            0x01,0x02,0x03
            };
    """
    raw = as_bytes(data)
    body = ",".join(f"0x{HEX_DIGITS[byte >> 4]}{HEX_DIGITS[byte & 0x0F]}" for byte in raw)
    return f"const uint8_t {name}[{len(raw)}] = {{\n{body}\n}};\n"
