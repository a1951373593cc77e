"""
Border styles for table rendering.

A TableStyle is a frozen set of eleven box-drawing glyphs. Separator lines
pick their start, end and junction glyphs from the style according to the
RowPosition of the line (top border, between rows, bottom border).

Example output (extended):
    ╔═════╦═════╗
    ║ A   ║ B   ║
    ╠═════╬═════╣
    ║ 1   ║ 2   ║
    ╚═════╩═════╝
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, fields
from enum import Enum

from .exceptions import UnknownStyleError, ValidationError


class RowPosition(Enum):
    """Vertical position of a separator line within the table."""

    FIRST = "first"
    MID = "mid"
    LAST = "last"


@dataclass(frozen=True)
class TableStyle:
    """
    Glyphs used to draw table borders.

    Attributes:
        top_left_corner: Start of the top border
        top_right_corner: End of the top border
        bottom_left_corner: Start of the bottom border
        bottom_right_corner: End of the bottom border
        outer_left_vertical: Start of a separator between rows
        outer_right_vertical: End of a separator between rows
        outer_bottom_horizontal: Junction opening upwards (bottom border)
        outer_top_horizontal: Junction opening downwards (top border)
        intersection: Four-way junction
        vertical: Column divider inside content lines
        horizontal: Fill character of separator lines
    """

    top_left_corner: str
    top_right_corner: str
    bottom_left_corner: str
    bottom_right_corner: str
    outer_left_vertical: str
    outer_right_vertical: str
    outer_bottom_horizontal: str
    outer_top_horizontal: str
    intersection: str
    vertical: str
    horizontal: str

    def __post_init__(self) -> None:
        # Separators are merged glyph by glyph, so each one must be a single char
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValidationError(f.name, value, "style glyphs must be a single character")

    # -----------------------------------------------------------------------
    # Presets
    # -----------------------------------------------------------------------

    @classmethod
    def simple(cls) -> TableStyle:
        """ASCII only: ``+``, ``-`` and ``|``."""
        return cls(
            top_left_corner="+",
            top_right_corner="+",
            bottom_left_corner="+",
            bottom_right_corner="+",
            outer_left_vertical="+",
            outer_right_vertical="+",
            outer_bottom_horizontal="+",
            outer_top_horizontal="+",
            intersection="+",
            vertical="|",
            horizontal="-",
        )

    @classmethod
    def extended(cls) -> TableStyle:
        """Double-line box drawing. The default style."""
        return cls(
            top_left_corner="╔",
            top_right_corner="╗",
            bottom_left_corner="╚",
            bottom_right_corner="╝",
            outer_left_vertical="╠",
            outer_right_vertical="╣",
            outer_bottom_horizontal="╩",
            outer_top_horizontal="╦",
            intersection="╬",
            vertical="║",
            horizontal="═",
        )

    @classmethod
    def thin(cls) -> TableStyle:
        """Single-line box drawing."""
        return cls(
            top_left_corner="┌",
            top_right_corner="┐",
            bottom_left_corner="└",
            bottom_right_corner="┘",
            outer_left_vertical="├",
            outer_right_vertical="┤",
            outer_bottom_horizontal="┴",
            outer_top_horizontal="┬",
            intersection="┼",
            vertical="│",
            horizontal="─",
        )

    @classmethod
    def rounded(cls) -> TableStyle:
        """Single-line box drawing with rounded corners."""
        return cls(
            top_left_corner="╭",
            top_right_corner="╮",
            bottom_left_corner="╰",
            bottom_right_corner="╯",
            outer_left_vertical="├",
            outer_right_vertical="┤",
            outer_bottom_horizontal="┴",
            outer_top_horizontal="┬",
            intersection="┼",
            vertical="│",
            horizontal="─",
        )

    @classmethod
    def elegant(cls) -> TableStyle:
        """Double-line outer junctions with single-line fills."""
        return cls(
            top_left_corner="╔",
            top_right_corner="╗",
            bottom_left_corner="╚",
            bottom_right_corner="╝",
            outer_left_vertical="╠",
            outer_right_vertical="╣",
            outer_bottom_horizontal="╩",
            outer_top_horizontal="╦",
            intersection="┼",
            vertical="│",
            horizontal="─",
        )

    @classmethod
    def empty(cls) -> TableStyle:
        """Every glyph is a space; keeps the layout without visible borders."""
        return cls(**{f.name: " " for f in fields(cls)})

    @classmethod
    def names(cls) -> list[str]:
        """Names accepted by from_name, in presentation order."""
        return list(_PRESETS)

    @classmethod
    def from_name(cls, name: str) -> TableStyle:
        """
        Look up a preset by name.

        Args:
            name: Preset name, case-insensitive (e.g., "thin")

        Returns:
            The preset style

        Raises:
            UnknownStyleError: If no preset has that name
        """
        factory = _PRESETS.get(name.strip().lower())
        if factory is None:
            raise UnknownStyleError(name, cls.names())
        return factory()

    # -----------------------------------------------------------------------
    # Glyph lookups
    # -----------------------------------------------------------------------

    def start_for_position(self, position: RowPosition) -> str:
        if position is RowPosition.FIRST:
            return self.top_left_corner
        if position is RowPosition.MID:
            return self.outer_left_vertical
        return self.bottom_left_corner

    def end_for_position(self, position: RowPosition) -> str:
        if position is RowPosition.FIRST:
            return self.top_right_corner
        if position is RowPosition.MID:
            return self.outer_right_vertical
        return self.bottom_right_corner

    def intersect_for_position(self, position: RowPosition) -> str:
        if position is RowPosition.FIRST:
            return self.outer_top_horizontal
        if position is RowPosition.MID:
            return self.intersection
        return self.outer_bottom_horizontal

    def merge_intersection_for_position(self, top: str, bottom: str, position: RowPosition) -> str:
        """
        Reconcile a junction seen by the row above with the one below.

        Args:
            top: Glyph at this offset in the previous separator
            bottom: Glyph at this offset in the separator being built
            position: Position of the separator being built

        Returns:
            The glyph that joins both rows' column boundaries
        """
        if top in (self.horizontal, self.outer_bottom_horizontal) and bottom == self.intersection:
            return self.outer_top_horizontal
        if top in (self.intersection, self.outer_top_horizontal) and bottom == self.horizontal:
            return self.outer_bottom_horizontal
        if top == self.outer_bottom_horizontal and bottom == self.horizontal:
            return self.horizontal
        return self.intersect_for_position(position)


_PRESETS: dict[str, Callable[[], TableStyle]] = {
    "simple": TableStyle.simple,
    "extended": TableStyle.extended,
    "thin": TableStyle.thin,
    "rounded": TableStyle.rounded,
    "elegant": TableStyle.elegant,
    "empty": TableStyle.empty,
}
