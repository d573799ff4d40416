"""
Page-break policy and the page-number footer pass.
"""

from __future__ import annotations

from paged_reports.utils.pdf.core.drawing import TextStyle
from paged_reports.utils.pdf.core.layout_common import PAGE_NUMBER_STYLE
from paged_reports.utils.pdf.core.surface import DrawingSurface


def needs_new_page(cursor_y: float, block_height: float, usable_height: float) -> bool:
    """
    True when a block of `block_height` drawn at `cursor_y` would cross the
    printable floor. A block that ends exactly on the floor still fits.
    """
    return cursor_y + block_height > usable_height


def footer_label(index: int, total: int, show_total: bool = False) -> str:
    if show_total:
        return f"Page {index + 1} of {total}"
    return f"Page {index + 1}"


def stamp_page_numbers(
    surface: DrawingSurface,
    *,
    style: TextStyle = PAGE_NUMBER_STYLE,
    show_total: bool = False,
) -> int:
    """
    Revisit every buffered page and draw a centred page-number label.

    Must run after all body content is drawn: the total is read once up
    front and no page is ever added here. Returns the number of pages stamped.
    """
    geometry = surface.geometry
    total = surface.page_count()
    # Anchored relative to both margins, above the true bottom margin.
    footer_y = geometry.height - geometry.margin_bottom - geometry.margin_top
    for index in range(total):
        surface.activate_page(index)
        surface.draw_text(
            footer_label(index, total, show_total),
            geometry.margin_left,
            footer_y,
            style=style,
            width=geometry.usable_width,
            align="center",
        )
    return total
