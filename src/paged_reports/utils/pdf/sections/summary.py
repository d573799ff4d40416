from __future__ import annotations

from typing import TYPE_CHECKING

from paged_reports.utils.pdf.core.drawing import TextStyle
from paged_reports.utils.pdf.core.layout import LayoutContext
from paged_reports.utils.pdf.core.layout_common import TOTALS_BLOCK_WIDTH
from paged_reports.utils.pdf.core.totals import TotalsLine, build_grand_total_line, build_totals_lines

if TYPE_CHECKING:
    from paged_reports.core.models.invoice import InvoiceTotals


def _pair_height(ctx: LayoutContext, label_style: TextStyle, value_style: TextStyle) -> float:
    return ctx.line_height(label_style) - label_style.size + ctx.line_height(value_style)


def totals_block_height(
    ctx: LayoutContext,
    line_count: int,
    label_style: TextStyle,
    value_style: TextStyle,
    grand_style: TextStyle,
) -> float:
    return line_count * _pair_height(ctx, label_style, value_style) + _pair_height(ctx, grand_style, grand_style)


def _render_pair(
    ctx: LayoutContext,
    line: TotalsLine,
    label_x: float,
    value_x: float,
    block_width: float,
    label_style: TextStyle,
    value_style: TextStyle,
) -> None:
    ctx.text(line.label, label_x, style=label_style, width=block_width, align="left")
    # Step back onto the label's line so the value lands beside it.
    ctx.rewind(label_style.size)
    ctx.text(line.value, value_x, style=value_style, width=block_width / 2, align="right")


def render_totals(
    ctx: LayoutContext,
    totals: "InvoiceTotals",
    *,
    label_style: TextStyle,
    value_style: TextStyle,
    grand_style: TextStyle,
    rule_color: str = "#000000",
    block_width: float = TOTALS_BLOCK_WIDTH,
) -> None:
    """
    Label/value ledger in the right-hand column, a ruled line, then the
    emphasized grand total.
    """
    lines = build_totals_lines(totals)
    ctx.ensure_room(totals_block_height(ctx, len(lines), label_style, value_style, grand_style))

    geometry = ctx.geometry
    label_x = geometry.width - geometry.margin_right - block_width
    value_x = label_x + block_width / 2

    for line in lines:
        _render_pair(ctx, line, label_x, value_x, block_width, label_style, value_style)

    ctx.surface.draw_line(label_x, ctx.y, label_x + block_width, ctx.y, rule_color)

    _render_pair(ctx, build_grand_total_line(totals), label_x, value_x, block_width, grand_style, grand_style)
