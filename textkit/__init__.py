"""Text transcoding and tokenization primitives.

This package provides small, pure functions over in-memory byte and
character sequences:

Codecs:
-------
- Base64 (RFC 4648 standard alphabet, ``=`` padding, optional line breaks)
- Hex dumps (uppercase digits) and C source-array renderings

Tokenizers and formatters:
--------------------------
- ``split``/``join`` on a literal delimiter with result-count bounds
- ``split_words`` on whitespace runs
- ``split_quoted``/``join_quoted`` honouring double quotes and escapes
- ``word_wrap`` greedy reflow that keeps forced line breaks

Malformed input raises :class:`FormatError`; out-of-range parameters raise
:class:`ParameterError`. Both derive from :class:`TextKitError` and
``ValueError``.
"""

from __future__ import annotations

# Re-export all public symbols
from .codecs import (
    base64_decode,
    base64_encode,
    hexdump,
    hexdump_sourcecode,
    parse_hexdump,
)
from .config import TextFormatConfig
from .const import BASE64_ALPHABET, BASE64_PAD, DEFAULT_LINE_WIDTH
from .exceptions import FormatError, ParameterError, TextKitError
from .formatter import TextFormatter
from .tokenize import join, join_quoted, split, split_quoted, split_words
from .wrap import word_wrap

__all__ = [
    "BASE64_ALPHABET",
    "BASE64_PAD",
    "DEFAULT_LINE_WIDTH",
    "FormatError",
    "ParameterError",
    "TextFormatConfig",
    "TextFormatter",
    "TextKitError",
    "base64_decode",
    "base64_encode",
    "hexdump",
    "hexdump_sourcecode",
    "join",
    "join_quoted",
    "parse_hexdump",
    "split",
    "split_quoted",
    "split_words",
    "word_wrap",
]
