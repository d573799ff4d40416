from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from paged_reports.utils.pdf.core.drawing import TextStyle
from paged_reports.utils.pdf.core.layout import LayoutContext
from paged_reports.utils.pdf.core.layout_common import PARTY_OFFSET

if TYPE_CHECKING:
    from paged_reports.core.models.invoice import InvoiceParty


def build_party_lines(party: "InvoiceParty") -> list[str]:
    return [
        party.name,
        party.address,
        f"{party.city}, {party.state} {party.zip}",
        party.country,
    ]


def _stack_height(ctx: LayoutContext, lines: Sequence[str], label_style: TextStyle, line_style: TextStyle) -> float:
    return ctx.line_height(label_style) + len(lines) * ctx.line_height(line_style)


def _render_stack(
    ctx: LayoutContext,
    label: str,
    lines: Sequence[str],
    x: float,
    width: float | None,
    label_style: TextStyle,
    line_style: TextStyle,
) -> float:
    ctx.text(label, x, style=label_style, width=width)
    for line in lines:
        ctx.text(line, x, style=line_style, width=width)
    return ctx.y


def render_parties(
    ctx: LayoutContext,
    sender: "InvoiceParty",
    recipient: "InvoiceParty",
    *,
    label_style: TextStyle,
    line_style: TextStyle,
    offset: float = PARTY_OFFSET,
    sender_label: str = "From:",
    recipient_label: str = "Bill To:",
) -> None:
    """
    Two address stacks side by side, both starting at the same y. The cursor
    ends below the taller stack.
    """
    sender_lines = build_party_lines(sender)
    recipient_lines = build_party_lines(recipient)
    height = max(
        _stack_height(ctx, sender_lines, label_style, line_style),
        _stack_height(ctx, recipient_lines, label_style, line_style),
    )
    ctx.ensure_room(height)

    left_x = ctx.geometry.margin_left
    right_x = ctx.geometry.width / 2 + offset
    start_y = ctx.y

    left_end = _render_stack(ctx, sender_label, sender_lines, left_x, right_x - left_x, label_style, line_style)
    ctx.move_to(start_y)
    right_end = _render_stack(ctx, recipient_label, recipient_lines, right_x, None, label_style, line_style)
    ctx.move_to(max(left_end, right_end))
