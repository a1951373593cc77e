"""Table cells: content, column span, alignment and padding."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import ValidationError
from .text import char_width, display_width, normalize_newlines, strip_ansi, wrap_text


class Alignment(Enum):
    """Horizontal alignment of content within a cell."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    @classmethod
    def parse(cls, value: Alignment | str) -> Alignment:
        """Accept an Alignment or its name ("left", "Right", ...)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(
                "alignment", value, f"expected one of {', '.join(a.value for a in cls)}"
            ) from None


def pad_line(line: str, target_width: int, alignment: Alignment) -> str:
    """
    Pad a line with spaces to target_width display columns.

    Center alignment puts ceil(n/2) spaces on the left and floor(n/2) on the
    right. Lines already at or past target_width are returned unchanged.
    """
    padding = max(0, target_width - display_width(line))
    if alignment is Alignment.RIGHT:
        return " " * padding + line
    if alignment is Alignment.CENTER:
        half = padding / 2
        return " " * math.ceil(half) + line + " " * math.floor(half)
    return line + " " * padding


@dataclass
class TableCell:
    """
    A table cell containing some text.

    A cell may span multiple columns by setting col_span. pad_content adds a
    space to either side of the cell's content.

    Attributes:
        data: Text to display; non-string values are converted with str()
        col_span: Number of grid columns the cell occupies (0 becomes 1)
        alignment: Horizontal alignment within the spanned width
        pad_content: Whether to add one space of padding on each side
    """

    data: str
    col_span: int = 1
    alignment: Alignment = Alignment.LEFT
    pad_content: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.data, str):
            self.data = str(self.data)
        if isinstance(self.col_span, bool) or not isinstance(self.col_span, int):
            raise ValidationError("col_span", self.col_span, "must be an integer")
        if self.col_span < 0:
            raise ValidationError("col_span", self.col_span, "must not be negative")
        if self.col_span == 0:
            self.col_span = 1
        self.alignment = Alignment.parse(self.alignment)

    @classmethod
    def builder(cls, data: Any) -> TableCellBuilder:
        """Start a fluent builder for a cell holding data."""
        return TableCellBuilder(data)

    @property
    def pad_char(self) -> str:
        return " " if self.pad_content else ""

    def _padding_width(self) -> int:
        return 2 * display_width(self.pad_char)

    def width(self) -> int:
        """
        Calculates the width of the cell.

        New line characters are taken into account during the calculation.
        """
        lines = normalize_newlines(self.data).split("\n")
        return max(display_width(line) for line in lines) + self._padding_width()

    def split_width(self) -> float:
        """The width of the cell's content divided by its col_span."""
        return self.width() / self.col_span

    def min_width(self) -> int:
        """The minimum width required to display the cell properly."""
        visible = strip_ansi(normalize_newlines(self.data)).replace("\n", "")
        widest = max((char_width(c) for c in visible), default=0)
        return widest + self._padding_width()

    def wrap(self, width: int | None = None) -> list[str]:
        """
        Wraps the cell's content to the provided width.

        New line characters are taken into account. Each line carries the
        cell's padding on both sides.
        """
        return wrap_text(self.data, width, self.pad_char)


class TableCellBuilder:
    """Fluent builder for TableCell."""

    def __init__(self, data: Any) -> None:
        self._data = data
        self._col_span = 1
        self._alignment = Alignment.LEFT
        self._pad_content = True

    def col_span(self, col_span: int) -> TableCellBuilder:
        self._col_span = col_span
        return self

    def alignment(self, alignment: Alignment | str) -> TableCellBuilder:
        self._alignment = Alignment.parse(alignment)
        return self

    def pad_content(self, pad_content: bool) -> TableCellBuilder:
        self._pad_content = pad_content
        return self

    def build(self) -> TableCell:
        return TableCell(
            data=self._data,
            col_span=self._col_span,
            alignment=self._alignment,
            pad_content=self._pad_content,
        )
