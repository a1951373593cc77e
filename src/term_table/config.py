"""Render defaults read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .exceptions import ConfigurationError, UnknownStyleError
from .style import TableStyle
from .table import TableBuilder

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_bool(variable: str, default: bool) -> bool:
    raw = os.environ.get(variable)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(variable, raw, "expected a boolean (1/0, true/false, yes/no, on/off)")


def _env_width(variable: str) -> int | None:
    raw = os.environ.get(variable)
    if raw is None or not raw.strip():
        return None
    try:
        width = int(raw)
    except ValueError:
        raise ConfigurationError(variable, raw, "expected a non-negative integer") from None
    if width < 0:
        raise ConfigurationError(variable, raw, "expected a non-negative integer")
    return width


@dataclass
class RenderConfig:
    """Default table settings for callers that do not configure them explicitly."""

    style: str = "extended"
    max_column_width: int | None = None
    separate_rows: bool = True
    has_top_border: bool = True
    has_bottom_border: bool = True

    @classmethod
    def from_environment(cls) -> RenderConfig:
        """
        Create RenderConfig from environment variables.

        Reads TERM_TABLE_STYLE, TERM_TABLE_MAX_COLUMN_WIDTH,
        TERM_TABLE_SEPARATE_ROWS, TERM_TABLE_TOP_BORDER and
        TERM_TABLE_BOTTOM_BORDER. Unset or blank variables keep the defaults.

        Raises:
            ConfigurationError: If a variable holds a malformed value
        """
        style = os.environ.get("TERM_TABLE_STYLE", "").strip() or "extended"
        try:
            TableStyle.from_name(style)
        except UnknownStyleError as e:
            raise ConfigurationError("TERM_TABLE_STYLE", style, e.message) from None

        return cls(
            style=style.lower(),
            max_column_width=_env_width("TERM_TABLE_MAX_COLUMN_WIDTH"),
            separate_rows=_env_bool("TERM_TABLE_SEPARATE_ROWS", True),
            has_top_border=_env_bool("TERM_TABLE_TOP_BORDER", True),
            has_bottom_border=_env_bool("TERM_TABLE_BOTTOM_BORDER", True),
        )

    def table_style(self) -> TableStyle:
        return TableStyle.from_name(self.style)

    def builder(self) -> TableBuilder:
        """A TableBuilder preloaded with these defaults."""
        return (
            TableBuilder()
            .style(self.table_style())
            .max_column_width(self.max_column_width)
            .separate_rows(self.separate_rows)
            .has_top_border(self.has_top_border)
            .has_bottom_border(self.has_bottom_border)
        )
