"""Table rows: cell layout, content rendering and separator lines."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .cell import TableCell, TableCellBuilder, pad_line
from .style import RowPosition, TableStyle


def _to_cell(value: Any) -> TableCell:
    if isinstance(value, TableCell):
        return value
    if isinstance(value, TableCellBuilder):
        return value.build()
    return TableCell(value)


@dataclass
class Row:
    """
    An ordered list of cells rendered as one (possibly multi-line) table row.

    Attributes:
        cells: The row's cells; plain values are wrapped in a default TableCell
        has_separator: Whether the separator above this row is drawn
    """

    cells: list[TableCell] = field(default_factory=list)
    has_separator: bool = True

    def __post_init__(self) -> None:
        self.cells = [_to_cell(c) for c in self.cells]

    @classmethod
    def without_separator(cls, cells: Iterable[Any]) -> Row:
        """A row whose separator line above is never drawn."""
        return cls(list(cells), has_separator=False)

    @classmethod
    def empty(cls) -> Row:
        return cls([])

    def add_cell(self, cell: Any) -> None:
        self.cells.append(_to_cell(cell))

    def num_columns(self) -> int:
        """Number of grid columns this row claims (sum of col_span)."""
        return sum(cell.col_span for cell in self.cells)

    def split_column_widths(self) -> list[tuple[float, int]]:
        """
        Per-column width demands of this row.

        Returns:
            One (split_width, split_min_width) pair per spanned column, in
            column order. A cell spanning n columns contributes its widths
            divided by n to each of them; when its minimum width does not
            divide evenly, the last spanned column asks for one more.
        """
        demands: list[tuple[float, int]] = []
        for cell in self.cells:
            split_width = cell.split_width()
            min_share, remainder = divmod(cell.min_width(), cell.col_span)
            demands.extend([(split_width, min_share)] * (cell.col_span - 1))
            if remainder:
                demands.append((split_width + 1, min_share + 1))
            else:
                demands.append((split_width, min_share))
        return demands

    def render(self, column_widths: list[int], style: TableStyle) -> str:
        """
        Render the row's content lines.

        Args:
            column_widths: Resolved width of every table column
            style: Border glyphs

        Returns:
            The row's lines joined with newlines, without separators
        """
        # A cell spanning n columns also covers the n - 1 dividers between them
        wrapped: list[tuple[TableCell, int, list[str]]] = []
        spanned_columns = 0
        for cell in self.cells:
            span_end = spanned_columns + cell.col_span
            width = sum(column_widths[spanned_columns:span_end]) + cell.col_span - 1
            wrapped.append((cell, width, cell.wrap(width)))
            spanned_columns = span_end

        uncovered = column_widths[spanned_columns:]
        row_height = max((len(lines) for _, _, lines in wrapped), default=1)

        lines: list[str] = []
        for line_index in range(row_height):
            parts: list[str] = []
            for cell, width, cell_lines in wrapped:
                if line_index < len(cell_lines):
                    content = pad_line(cell_lines[line_index], width, cell.alignment)
                else:
                    content = " " * width
                parts.append(style.vertical + content)
            for width in uncovered:
                parts.append(style.vertical + " " * width)
            if not column_widths:
                # No columns: the outer borders meet
                parts.append(style.vertical)
            parts.append(style.vertical)
            lines.append("".join(parts))

        return "\n".join(lines)

    def gen_separator(
        self,
        column_widths: list[int],
        style: TableStyle,
        position: RowPosition,
        previous_separator: str | None = None,
    ) -> str:
        """
        Build the horizontal border line drawn above this row.

        Junctions are placed at the boundaries between this row's cells, and
        at every column boundary past its last cell. When previous_separator
        (the line generated for the row above) is given, both lines are merged
        so that a boundary present in only one of the two rows becomes a T
        junction pointing towards that row.

        Args:
            column_widths: Resolved width of every table column
            style: Border glyphs
            position: Selects corner and junction glyphs
            previous_separator: Separator generated for the row above, if any

        Returns:
            The separator line
        """
        # If the first cell spans several columns the first junction moves right
        next_intersection = self.cells[0].col_span if self.cells else 1
        current_cell = 0

        parts = [style.start_for_position(position)]
        for column, width in enumerate(column_widths):
            if column == next_intersection:
                parts.append(style.intersect_for_position(position))
                current_cell += 1
                if current_cell < len(self.cells):
                    next_intersection += self.cells[current_cell].col_span
                else:
                    next_intersection += 1
            elif column > 0:
                # Divider hidden inside a spanning cell
                parts.append(style.horizontal)
            parts.append(style.horizontal * width)
        parts.append(style.end_for_position(position))
        line = "".join(parts)

        if previous_separator is None:
            return line

        last = len(line) - 1
        merged: list[str] = []
        for offset, (bottom, top) in enumerate(zip(line, previous_separator)):
            if offset in (0, last):
                merged.append(bottom)
            elif bottom == style.horizontal and top == style.horizontal:
                merged.append(style.horizontal)
            else:
                merged.append(style.merge_intersection_for_position(top, bottom, position))
        return "".join(merged)
