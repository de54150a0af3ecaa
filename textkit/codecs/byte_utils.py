"""Helpers for accepting byte sequences in the codec functions."""

from __future__ import annotations

from collections.abc import Iterable

from ..exceptions import ParameterError

BytesLike = bytes | bytearray | memoryview | Iterable[int]


def as_bytes(data: BytesLike) -> bytes:
    """Return the input as an immutable ``bytes`` value.

    Accepts bytes-like objects and iterables of ints in ``0..255``. Text is
    rejected: callers must choose an encoding themselves.

    Raises:
        ParameterError: If the value cannot be interpreted as bytes.
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, str):
        raise ParameterError("Expected bytes-like data, got str; encode the text first")
    if isinstance(data, int):
        # bytes(n) would silently produce n zero bytes
        raise ParameterError(f"Expected bytes-like data, got int {data}")
    try:
        return bytes(data)
    except (TypeError, ValueError) as err:
        raise ParameterError(f"Expected bytes-like data: {err}") from err
