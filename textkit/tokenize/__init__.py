"""Tokenizers: delimiter splitting, whitespace words and quoted tokens."""

from __future__ import annotations

from .delimiter import join, split
from .quoted import join_quoted, split_quoted
from .words import split_words

__all__ = [
    "join",
    "join_quoted",
    "split",
    "split_quoted",
    "split_words",
]
