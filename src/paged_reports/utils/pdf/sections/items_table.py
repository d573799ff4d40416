from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from paged_reports.utils.pdf.core.drawing import TextStyle
from paged_reports.utils.pdf.core.layout import LayoutContext
from paged_reports.utils.pdf.core.layout_common import TABLE_HEADER_HEIGHT, TABLE_ROW_HEIGHT, TABLE_TEXT_OFFSET


@dataclass(frozen=True)
class Column:
    label: str
    width: float
    align: str = "left"
    header_align: str | None = None


@dataclass(frozen=True)
class TableLayout:
    columns: tuple[Column, ...]
    header_style: TextStyle
    row_style: TextStyle
    header_height: float = TABLE_HEADER_HEIGHT
    row_height: float = TABLE_ROW_HEIGHT
    header_fill: str | None = None
    row_fill: str | None = None
    # Height checked against the page floor before each row; defaults to one row.
    break_height: float | None = None
    text_offset: float = TABLE_TEXT_OFFSET

    @property
    def width(self) -> float:
        return sum(col.width for col in self.columns)

    @property
    def row_break_height(self) -> float:
        return self.row_height if self.break_height is None else self.break_height


def column_offsets(left: float, columns: Sequence[Column]) -> list[float]:
    offsets = []
    x = left
    for col in columns:
        offsets.append(x)
        x += col.width
    return offsets


def is_shaded(index: int) -> bool:
    return index % 2 == 1


def render_table_header(ctx: LayoutContext, layout: TableLayout) -> None:
    left = ctx.geometry.margin_left
    start_y = ctx.y
    if layout.header_fill:
        ctx.surface.fill_rect(left, start_y, layout.width, layout.header_height, layout.header_fill)
    for x, col in zip(column_offsets(left, layout.columns), layout.columns):
        ctx.surface.draw_text(
            col.label,
            x,
            start_y + layout.text_offset,
            style=layout.header_style,
            width=col.width,
            align=col.header_align or col.align,
        )
    ctx.move_to(start_y + layout.header_height)


def render_table_row(ctx: LayoutContext, layout: TableLayout, values: Sequence[str], index: int) -> bool:
    """
    Draw one data row, breaking to a new page (with a fresh header) first if
    the row does not fit. Returns True when a page break happened.
    """
    if len(values) != len(layout.columns):
        raise ValueError(f"Row {index} has {len(values)} cells, table has {len(layout.columns)} columns")

    broke = False
    if ctx.needs_new_page(layout.row_break_height):
        ctx.new_page()
        render_table_header(ctx, layout)
        broke = True

    left = ctx.geometry.margin_left
    start_y = ctx.y
    if layout.row_fill and is_shaded(index):
        ctx.surface.fill_rect(left, start_y, layout.width, layout.row_height, layout.row_fill)
    for x, col, value in zip(column_offsets(left, layout.columns), layout.columns, values):
        ctx.surface.draw_text(
            str(value),
            x,
            start_y + layout.text_offset,
            style=layout.row_style,
            width=col.width,
            align=col.align,
        )
    ctx.move_to(start_y + layout.row_height)
    return broke


def render_table(ctx: LayoutContext, layout: TableLayout, rows: Iterable[Sequence[str]]) -> int:
    """Render header and rows. Returns the number of pages added by overflow."""
    rows = list(rows)
    breaks = 0
    # The opening header is kept together with room for the first row, if any.
    reserve = layout.header_height + (layout.row_break_height if rows else 0)
    if ctx.ensure_room(reserve):
        breaks += 1
    render_table_header(ctx, layout)
    for idx, row in enumerate(rows):
        if render_table_row(ctx, layout, row, idx):
            breaks += 1
    return breaks
