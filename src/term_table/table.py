"""
Table layout and rendering.

The Table resolves one width per grid column from every row's demands and
the configured limits, then renders each row and the separator lines
between them.

Example:
    from term_table import Alignment, Row, Table, TableCell, TableStyle

    table = Table.builder().style(TableStyle.thin()).max_column_width(40).build()
    table.add_row(Row([TableCell("Name", alignment=Alignment.CENTER), "Count"]))
    table.add_row(Row(["item-1", 10]))
    print(table.render())
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .cell import Alignment
from .exceptions import ValidationError
from .row import Row
from .style import RowPosition, TableStyle

logger = logging.getLogger(__name__)

# Width cap used when no limit is configured
UNBOUNDED = sys.maxsize


def _check_width(name: str, width: Any) -> int:
    if isinstance(width, bool) or not isinstance(width, int):
        raise ValidationError(name, width, "must be an integer")
    if width < 0:
        raise ValidationError(name, width, "must not be negative")
    return width


def _to_row(value: Any) -> Row:
    if isinstance(value, Row):
        return value
    return Row(list(value))


@dataclass
class Table:
    """
    A collection of rows rendered with a shared set of column widths.

    Attributes:
        rows: Rows in display order
        style: Border glyphs
        max_column_width: Global column width limit, None for unbounded
        max_column_widths: Per-column width limits, overriding the global one
        separate_rows: Draw separator lines between rows
        has_top_border: Draw the top border (a first row with has_separator
            set to False hides it as well)
        has_bottom_border: Draw the bottom border
    """

    rows: list[Row] = field(default_factory=list)
    style: TableStyle = field(default_factory=TableStyle.extended)
    max_column_width: int | None = None
    max_column_widths: dict[int, int] = field(default_factory=dict)
    separate_rows: bool = True
    has_top_border: bool = True
    has_bottom_border: bool = True

    def __post_init__(self) -> None:
        self.rows = [_to_row(r) for r in self.rows]
        if self.max_column_width is not None:
            _check_width("max_column_width", self.max_column_width)
        self.max_column_widths = dict(self.max_column_widths)
        for column, width in self.max_column_widths.items():
            _check_width("column index", column)
            _check_width(f"max width for column {column}", width)

    @classmethod
    def builder(cls) -> TableBuilder:
        return TableBuilder()

    def add_row(self, row: Row | Iterable[Any]) -> None:
        self.rows.append(_to_row(row))

    def set_max_width_for_column(self, column_index: int, width: int) -> None:
        """Limit one column's width; takes precedence over max_column_width."""
        _check_width("column index", column_index)
        self.max_column_widths[column_index] = _check_width(
            f"max width for column {column_index}", width
        )

    def set_max_column_widths(self, index_width_pairs: Iterable[tuple[int, int]]) -> None:
        for column_index, width in index_width_pairs:
            self.set_max_width_for_column(column_index, width)

    def _column_cap(self, column: int) -> int:
        cap = self.max_column_widths.get(column, self.max_column_width)
        return UNBOUNDED if cap is None else cap

    def calculate_column_widths(self) -> list[int]:
        """
        Resolve the width of every grid column.

        Each column takes the widest demand of the cells covering it, limited
        by its configured cap, but never less than the widest single character
        of those cells. Centered cells whose columns add up to an even width
        different from their own get one extra column, so their padding
        splits evenly.

        Returns:
            One width per column, the column count being the largest
            num_columns() of any row
        """
        num_columns = max((row.num_columns() for row in self.rows), default=0)
        demands = [row.split_column_widths() for row in self.rows]

        min_widths = [0] * num_columns
        for row_demands in demands:
            for column, (_, min_width) in enumerate(row_demands):
                min_widths[column] = max(min_widths[column], min_width)

        max_widths = [0] * num_columns
        for row_demands in demands:
            for column, (split_width, _) in enumerate(row_demands):
                cap = max(min_widths[column], self._column_cap(column))
                max_widths[column] = min(cap, max(max_widths[column], int(split_width)))

        for row in self.rows:
            column = 0
            for cell in row.cells:
                total = sum(max_widths[column : column + cell.col_span])
                if (
                    cell.alignment is Alignment.CENTER
                    and cell.width() != total
                    and total % 2 == 0
                    and max_widths[column] < max(min_widths[column], self._column_cap(column))
                ):
                    max_widths[column] += 1
                    logger.debug(
                        "Widened column %d to %d to center %r", column, max_widths[column], cell.data
                    )
                column += cell.col_span

        logger.debug("Resolved %d column widths: %s", num_columns, max_widths)
        return max_widths

    def render(self) -> str:
        """
        Render the table.

        Returns:
            The table's lines, each followed by a newline; an empty string
            when there are no rows
        """
        if not self.rows:
            return ""

        column_widths = self.calculate_column_widths()
        lines: list[str] = []
        previous_separator: str | None = None

        for index, row in enumerate(self.rows):
            position = RowPosition.FIRST if index == 0 else RowPosition.MID
            separator = row.gen_separator(column_widths, self.style, position, previous_separator)
            previous_separator = separator

            if row.has_separator and (
                (index == 0 and self.has_top_border) or (index > 0 and self.separate_rows)
            ):
                lines.append(separator)
            lines.append(row.render(column_widths, self.style))

        if self.has_bottom_border:
            lines.append(
                self.rows[-1].gen_separator(column_widths, self.style, RowPosition.LAST)
            )

        return "".join(f"{line}\n" for line in lines)

    def __str__(self) -> str:
        return self.render()


class TableBuilder:
    """Fluent builder for Table."""

    def __init__(self) -> None:
        self._rows: list[Row] = []
        self._style = TableStyle.extended()
        self._max_column_width: int | None = None
        self._max_column_widths: dict[int, int] = {}
        self._separate_rows = True
        self._has_top_border = True
        self._has_bottom_border = True

    def rows(self, rows: Iterable[Row | Iterable[Any]]) -> TableBuilder:
        """Replace all rows; plain iterables become Rows."""
        self._rows = [_to_row(r) for r in rows]
        return self

    def add_row(self, row: Row | Iterable[Any]) -> TableBuilder:
        self._rows.append(_to_row(row))
        return self

    def style(self, style: TableStyle | str) -> TableBuilder:
        """Set the border style, or a preset by name (e.g., ``"thin"``)."""
        self._style = TableStyle.from_name(style) if isinstance(style, str) else style
        return self

    def max_column_width(self, max_column_width: int | None) -> TableBuilder:
        """Set the global column width limit (default: unbounded)."""
        self._max_column_width = max_column_width
        return self

    def max_column_widths(self, max_column_widths: Mapping[int, int]) -> TableBuilder:
        """Set per-column width limits keyed by column index."""
        self._max_column_widths = dict(max_column_widths)
        return self

    def separate_rows(self, separate_rows: bool) -> TableBuilder:
        self._separate_rows = separate_rows
        return self

    def has_top_border(self, has_top_border: bool) -> TableBuilder:
        self._has_top_border = has_top_border
        return self

    def has_bottom_border(self, has_bottom_border: bool) -> TableBuilder:
        self._has_bottom_border = has_bottom_border
        return self

    def build(self) -> Table:
        return Table(
            rows=list(self._rows),
            style=self._style,
            max_column_width=self._max_column_width,
            max_column_widths=dict(self._max_column_widths),
            separate_rows=self._separate_rows,
            has_top_border=self._has_top_border,
            has_bottom_border=self._has_bottom_border,
        )
