"""Configuration for the text formatter."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

import voluptuous as vol

from .const import (
    CONF_BASE64_LINE_LENGTH,
    CONF_LINE_WIDTH,
    CONF_SOURCE_NAME,
    DEFAULT_BASE64_LINE_LENGTH,
    DEFAULT_LINE_WIDTH,
    DEFAULT_SOURCE_NAME,
)
from .exceptions import ParameterError

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_LINE_WIDTH, default=DEFAULT_LINE_WIDTH): vol.All(vol.Coerce(int), vol.Range(min=0)),
        vol.Optional(CONF_BASE64_LINE_LENGTH, default=DEFAULT_BASE64_LINE_LENGTH): vol.All(
            vol.Coerce(int), vol.Range(min=0)
        ),
        vol.Optional(CONF_SOURCE_NAME, default=DEFAULT_SOURCE_NAME): vol.All(
            str, vol.Match(r"^[A-Za-z_][A-Za-z0-9_]*$", msg="source_name must be a C identifier")
        ),
    }
)


@dataclass
class TextFormatConfig:
    """Settings applied by :class:`textkit.formatter.TextFormatter`.

    Attributes:
        line_width: Columns per wrapped line; 0 disables wrapping.
        base64_line_length: Symbols per Base64 output line; 0 for one line.
        source_name: Default array name for source-code hex dumps.
    """

    line_width: int = DEFAULT_LINE_WIDTH
    base64_line_length: int = DEFAULT_BASE64_LINE_LENGTH
    source_name: str = DEFAULT_SOURCE_NAME

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TextFormatConfig:
        """Build a config from a mapping, validating and coercing values.

        Raises:
            ParameterError: On unknown keys or invalid values.
        """
        try:
            validated = CONFIG_SCHEMA(dict(data))
        except vol.Invalid as err:
            raise ParameterError(f"Invalid configuration: {err}") from err
        return cls(**validated)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
