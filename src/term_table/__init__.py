"""
term-table: render tabular data as text tables for the terminal.

This library lays out rows of cells in a fixed-width grid with:
- Column widths resolved from content, a global limit and per-column limits
- Wrapping that honors wide characters, embedded newlines and ANSI colors
- Cells spanning several columns, with separator junctions that follow them
- Several border styles (simple ASCII, double, thin, rounded, elegant)

Example:
    from term_table import Alignment, Row, Table, TableCell, TableStyle

    table = (
        Table.builder()
        .style(TableStyle.thin())
        .max_column_width(40)
        .rows([
            Row([TableCell("Usage", col_span=2, alignment=Alignment.CENTER)]),
            Row(["gpt-4", TableCell(1024, alignment=Alignment.RIGHT)]),
        ])
        .build()
    )
    print(table.render())
"""

from .cell import Alignment, TableCell, TableCellBuilder, pad_line
from .config import RenderConfig
from .exceptions import (
    ConfigurationError,
    TermTableError,
    UnknownStyleError,
    ValidationError,
)
from .row import Row
from .style import RowPosition, TableStyle
from .table import Table, TableBuilder
from .text import display_width, wrap_text

__all__ = [
    # Layout
    "Table",
    "TableBuilder",
    "Row",
    "TableCell",
    "TableCellBuilder",
    "Alignment",
    # Styles
    "TableStyle",
    "RowPosition",
    # Configuration
    "RenderConfig",
    # Text helpers
    "display_width",
    "wrap_text",
    "pad_line",
    # Exceptions
    "TermTableError",
    "ValidationError",
    "UnknownStyleError",
    "ConfigurationError",
]
