"""Constants and lookup tables for textkit."""

from __future__ import annotations

from types import MappingProxyType

# Configuration keys
CONF_LINE_WIDTH = "line_width"
CONF_BASE64_LINE_LENGTH = "base64_line_length"
CONF_SOURCE_NAME = "source_name"

# Default values
DEFAULT_LINE_WIDTH = 48
DEFAULT_BASE64_LINE_LENGTH = 0
DEFAULT_SOURCE_NAME = "name"

# RFC 4648 standard alphabet
BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
BASE64_PAD = "="

# Reverse lookup: symbol -> 6-bit value
BASE64_INDEX: MappingProxyType[str, int] = MappingProxyType(
    {symbol: value for value, symbol in enumerate(BASE64_ALPHABET)}
)

HEX_DIGITS = "0123456789ABCDEF"

# Whitespace classes
ASCII_WHITESPACE = frozenset(" \t\n\r\v\f")
# Characters word_wrap may turn into a line break (newline is already one)
WRAP_BREAK_CHARS = frozenset(" \t\v\f")

# Escapes understood inside a quoted token: escaped char -> literal
QUOTE_CHAR = '"'
ESCAPE_CHAR = "\\"
QUOTED_ESCAPES: MappingProxyType[str, str] = MappingProxyType(
    {
        "\\": "\\",
        '"': '"',
        "n": "\n",
        "t": "\t",
        "r": "\r",
    }
)
# Reverse of QUOTED_ESCAPES, used when re-quoting a token
QUOTED_ESCAPES_REVERSE: MappingProxyType[str, str] = MappingProxyType(
    {literal: ESCAPE_CHAR + escaped for escaped, literal in QUOTED_ESCAPES.items()}
)

# Longest user-data fragment copied into log records
MAX_LOG_FRAGMENT = 32
