"""Command-line interface for term-table."""

import logging
import random

import click

from .cell import Alignment, TableCell
from .config import RenderConfig
from .exceptions import TermTableError
from .row import Row
from .style import TableStyle
from .table import Table


def _parse_column_widths(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> dict[int, int]:
    """Parse repeated INDEX=WIDTH options."""
    widths: dict[int, int] = {}
    for value in values:
        index, sep, width = value.partition("=")
        try:
            if not sep:
                raise ValueError
            column, limit = int(index), int(width)
        except ValueError:
            raise click.BadParameter(f"expected INDEX=WIDTH, got {value!r}") from None
        if column < 0 or limit < 0:
            raise click.BadParameter(f"index and width must not be negative, got {value!r}")
        widths[column] = limit
    return widths


def _load_config() -> RenderConfig:
    try:
        return RenderConfig.from_environment()
    except TermTableError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(package_name="term-table")
@click.option("--verbose", "-v", is_flag=True, help="Log layout decisions to stderr")
def cli(verbose: bool) -> None:
    """term-table: render text tables for the terminal."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(message)s",
        )


@cli.command()
@click.argument("rows", nargs=-1, required=True)
@click.option(
    "--delimiter",
    "-d",
    default="|",
    show_default=True,
    help="Separator between the cells of a ROW argument",
)
@click.option(
    "--style",
    "style_name",
    type=click.Choice(TableStyle.names(), case_sensitive=False),
    help="Border style (default: $TERM_TABLE_STYLE or extended)",
)
@click.option(
    "--max-column-width",
    type=click.IntRange(min=0),
    help="Maximum width of every column (default: $TERM_TABLE_MAX_COLUMN_WIDTH or unbounded)",
)
@click.option(
    "--column-width",
    "column_widths",
    multiple=True,
    metavar="INDEX=WIDTH",
    callback=_parse_column_widths,
    help="Maximum width of one column, overriding --max-column-width (repeatable)",
)
@click.option(
    "--align",
    type=click.Choice([a.value for a in Alignment], case_sensitive=False),
    default=Alignment.LEFT.value,
    show_default=True,
    help="Alignment of every cell",
)
@click.option("--header", is_flag=True, help="Center the cells of the first row")
@click.option(
    "--separate-rows/--no-separate-rows",
    default=None,
    help="Draw separators between rows (default: $TERM_TABLE_SEPARATE_ROWS or on)",
)
@click.option(
    "--top-border/--no-top-border",
    default=None,
    help="Draw the top border (default: $TERM_TABLE_TOP_BORDER or on)",
)
@click.option(
    "--bottom-border/--no-bottom-border",
    default=None,
    help="Draw the bottom border (default: $TERM_TABLE_BOTTOM_BORDER or on)",
)
@click.option("--no-padding", is_flag=True, help="Do not pad cell content with spaces")
def render(
    rows: tuple[str, ...],
    delimiter: str,
    style_name: str | None,
    max_column_width: int | None,
    column_widths: dict[int, int],
    align: str,
    header: bool,
    separate_rows: bool | None,
    top_border: bool | None,
    bottom_border: bool | None,
    no_padding: bool,
) -> None:
    """Render a table with one ROW argument per row.

    \b
    Example:
        term-table render --header "Name|Count" "item-1|10" "item-2|5"
    """
    if not delimiter:
        raise click.BadParameter("must not be empty", param_hint="--delimiter")

    config = _load_config()
    if style_name is not None:
        config.style = style_name.lower()
    if max_column_width is not None:
        config.max_column_width = max_column_width
    if separate_rows is not None:
        config.separate_rows = separate_rows
    if top_border is not None:
        config.has_top_border = top_border
    if bottom_border is not None:
        config.has_bottom_border = bottom_border

    builder = config.builder().max_column_widths(column_widths)
    for index, raw in enumerate(rows):
        alignment = Alignment.CENTER if header and index == 0 else Alignment.parse(align)
        builder.add_row(
            Row(
                [
                    TableCell(value, alignment=alignment, pad_content=not no_padding)
                    for value in raw.split(delimiter)
                ]
            )
        )

    try:
        output = builder.build().render()
    except TermTableError as e:
        raise click.ClickException(str(e)) from e
    click.echo(output, nl=False)


def _sample_table(style: TableStyle) -> Table:
    header = TableCell.builder("Inventory").alignment(Alignment.CENTER).col_span(2).build()
    return (
        Table.builder()
        .style(style)
        .rows(
            [
                Row([header]),
                Row(["apples", TableCell("1,024", alignment=Alignment.RIGHT)]),
                Row(["pears", TableCell("32", alignment=Alignment.RIGHT)]),
            ]
        )
        .build()
    )


@cli.command()
@click.option(
    "--style",
    "style_name",
    type=click.Choice(TableStyle.names(), case_sensitive=False),
    help="Show only this style",
)
def styles(style_name: str | None) -> None:
    """Show a sample table in every border style."""
    names = [style_name.lower()] if style_name else TableStyle.names()
    for name in names:
        click.echo(name)
        click.echo(_sample_table(TableStyle.from_name(name)).render())


def _showcase_table() -> Table:
    return (
        Table.builder()
        .style(TableStyle.elegant())
        .max_column_width(40)
        .rows(
            [
                Row(
                    [
                        TableCell.builder("This is some centered text")
                        .col_span(2)
                        .alignment(Alignment.CENTER)
                    ]
                ),
                Row(
                    [
                        "This is left aligned text",
                        TableCell.builder("This is right aligned text").alignment(
                            Alignment.RIGHT
                        ),
                    ]
                ),
                Row(
                    [
                        TableCell.builder(
                            "This is some really really really really really really "
                            "really really really that is going to wrap to the next line"
                        ).col_span(2)
                    ]
                ),
            ]
        )
        .build()
    )


def _lucky_numbers_table(rng: random.Random, draws: int = 5, numbers: int = 6) -> Table:
    title = TableCell.builder("My Lucky Numbers").alignment(Alignment.CENTER).col_span(numbers)
    table = Table.builder().style(TableStyle.elegant()).rows([Row([title])]).build()
    for _ in range(draws):
        row = Row.empty()
        for _ in range(numbers):
            row.add_cell(TableCell(rng.randint(1, 99)))
        table.add_row(row)
    return table


@cli.command()
@click.option("--seed", type=int, help="Seed for the lucky numbers (default: random)")
def demo(seed: int | None) -> None:
    """Render example tables showing alignment, wrapping and column spans."""
    click.echo(_showcase_table().render())
    click.echo(_lucky_numbers_table(random.Random(seed)).render())


if __name__ == "__main__":
    cli()
