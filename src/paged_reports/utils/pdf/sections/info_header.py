from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Iterable, Sequence

from paged_reports.utils.pdf.core.drawing import TextStyle
from paged_reports.utils.pdf.core.layout import LayoutContext
from paged_reports.utils.pdf.core.layout_common import INFO_BLOCK_WIDTH

if TYPE_CHECKING:
    from paged_reports.core.models.invoice import InvoiceDetails
    from paged_reports.core.models.user import UserDetails


def render_info_header(
    ctx: LayoutContext,
    title: str,
    lines: Iterable[str],
    *,
    title_style: TextStyle,
    line_style: TextStyle,
    block_width: float = INFO_BLOCK_WIDTH,
) -> None:
    """Right-aligned title and metadata lines in the top right corner."""
    geometry = ctx.geometry
    x = geometry.width - geometry.margin_right - block_width
    ctx.move_to(geometry.margin_top)
    ctx.text(title, x, style=title_style, width=block_width, align="right")
    for line in lines:
        ctx.text(line, x, style=line_style, width=block_width, align="right")


def build_invoice_info_lines(invoice: "InvoiceDetails") -> list[str]:
    return [
        f"Invoice #: {invoice.invoice_number}",
        f"Date: {invoice.invoice_date}",
        f"Due Date: {invoice.due_date}",
    ]


def build_roster_info_lines(users: Sequence["UserDetails"], generated_on: date) -> list[str]:
    return [
        f"Generated: {generated_on.isoformat()}",
        f"Users: {len(users)}",
    ]
