"""Shared fixtures for term-table unit tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from term_table import Alignment, Row, TableBuilder, TableCell

SNAPSHOT_DIR = Path(__file__).parent / "snapshots"

LONG_TEXT = (
    "This is some really really really really really really really really really "
    "that is going to wrap to the next line"
)


@pytest.fixture
def snapshot() -> Callable[[str], str]:
    """Load an expected rendering from tests/unit/snapshots."""

    def load(name: str) -> str:
        return (SNAPSHOT_DIR / f"{name}.txt").read_text(encoding="utf-8")

    return load


@pytest.fixture
def showcase_rows() -> list[Row]:
    """Centered header, two left/right rows and a wrapping footer over two columns."""
    return [
        Row([TableCell("This is some centered text", col_span=2, alignment=Alignment.CENTER)]),
        Row(
            [
                "This is left aligned text",
                TableCell("This is right aligned text", alignment=Alignment.RIGHT),
            ]
        ),
        Row(
            [
                "This is left aligned text",
                TableCell("This is right aligned text", alignment=Alignment.RIGHT),
            ]
        ),
        Row([TableCell(LONG_TEXT, col_span=2)]),
    ]


@pytest.fixture
def showcase_builder(showcase_rows: list[Row]) -> TableBuilder:
    """Builder holding showcase_rows with a 40 column limit."""
    return TableBuilder().max_column_width(40).rows(showcase_rows)


@pytest.fixture(autouse=True)
def clean_render_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep TERM_TABLE_* settings from the developer's shell out of the tests."""
    for variable in (
        "TERM_TABLE_STYLE",
        "TERM_TABLE_MAX_COLUMN_WIDTH",
        "TERM_TABLE_SEPARATE_ROWS",
        "TERM_TABLE_TOP_BORDER",
        "TERM_TABLE_BOTTOM_BORDER",
    ):
        monkeypatch.delenv(variable, raising=False)
