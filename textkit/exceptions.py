"""Exceptions raised by textkit."""

from __future__ import annotations


class TextKitError(Exception):
    """Base class for all textkit errors."""


class FormatError(TextKitError, ValueError):
    """Raised when input text or bytes are malformed.

    Covers invalid Base64 symbols or padding, invalid or odd-length hex text,
    and unterminated quoted tokens.

    Attributes:
        position: Offset of the problem in the input, or None if the problem
            is not tied to one location (e.g. odd length).
        fragment: The offending piece of input, if any.
    """

    def __init__(self, message: str, *, position: int | None = None, fragment: str | None = None) -> None:
        super().__init__(message)
        self.position = position
        self.fragment = fragment


class ParameterError(TextKitError, ValueError):
    """Raised when a call parameter or configuration value is out of range."""
