"""Formatter applying a :class:`TextFormatConfig` to the text primitives."""

from __future__ import annotations

import logging

from .codecs import BytesLike, base64_decode, base64_encode, hexdump_sourcecode
from .config import TextFormatConfig
from .validation import validate_numeric_input
from .wrap import word_wrap

_LOGGER = logging.getLogger(__name__)

MAX_WIDTH_MULT = 8


class TextFormatter:
    """Bundle of formatting operations sharing one configuration."""

    def __init__(self, config: TextFormatConfig | None = None) -> None:
        self._config: TextFormatConfig = config if config is not None else TextFormatConfig()

    @property
    def config(self) -> TextFormatConfig:
        """Return the formatter configuration."""
        return self._config

    def wrap(self, text: str, width_mult: int = 1) -> str:
        """Wrap text to the configured line width.

        Args:
            text: Text to wrap.
            width_mult: Character width multiplier (1-8). Wide glyphs take
                several columns, so the usable width is divided by it.

        Returns:
            Wrapped text, or the input unchanged when wrapping is disabled.
        """
        cols = max(0, int(self._config.line_width or 0))
        if cols <= 0:
            return text
        mult = validate_numeric_input(width_mult, 1, MAX_WIDTH_MULT, "width_mult")
        effective = cols // mult
        if effective < 1:
            _LOGGER.warning("Line width %d too narrow for width multiplier %d, using 1 column", cols, mult)
            effective = 1
        return word_wrap(text, effective)

    def encode_base64(self, data: BytesLike) -> str:
        """Base64-encode with the configured line length."""
        return base64_encode(data, self._config.base64_line_length)

    def decode_base64(self, text: str) -> bytes:
        """Decode Base64 text (line breaks are ignored)."""
        return base64_decode(text)

    def dump_source(self, data: BytesLike, name: str | None = None) -> str:
        """Render bytes as a C array, named ``name`` or the configured name."""
        return hexdump_sourcecode(data, name if name is not None else self._config.source_name)
