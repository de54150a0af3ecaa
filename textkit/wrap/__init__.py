"""Word wrapping."""

from __future__ import annotations

from .word_wrap import word_wrap

__all__ = ["word_wrap"]
