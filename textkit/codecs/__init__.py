"""Binary-to-text codecs: Base64 and hex dumps.

All functions take materialised byte sequences and return new values; the
lookup tables they share live in :mod:`textkit.const` and are read-only.
"""

from __future__ import annotations

from .base64_codec import base64_decode, base64_encode
from .byte_utils import BytesLike, as_bytes
from .hex_codec import hexdump, hexdump_sourcecode, parse_hexdump

__all__ = [
    "BytesLike",
    "as_bytes",
    "base64_decode",
    "base64_encode",
    "hexdump",
    "hexdump_sourcecode",
    "parse_hexdump",
]
