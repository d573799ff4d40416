from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from io import BytesIO
from typing import Optional, Sequence

import httpx
from fastapi.concurrency import run_in_threadpool
from reportlab.lib.utils import ImageReader

from paged_reports.core.models.invoice import InvoiceDetails
from paged_reports.core.models.user import UserDetails
from paged_reports.core.services.logo import fetch_logo
from paged_reports.utils.pdf.core.geometry import PageGeometry
from paged_reports.utils.pdf.core.layout import LayoutContext
from paged_reports.utils.pdf.core.layout_common import (
    DEFAULT_MARGIN,
    DEFAULT_ORIENTATION,
    DEFAULT_PAGE_SIZE,
    INVOICE_STYLES,
    LOGO_SIZE,
    PAGE_NUMBER_STYLE,
    ROSTER_ROW_HEIGHT,
    ROSTER_STYLES,
    TABLE_HEADER_HEIGHT,
    TABLE_ROW_HEIGHT,
    color,
)
from paged_reports.utils.pdf.core.pagination import stamp_page_numbers
from paged_reports.utils.pdf.core.surface import BufferedSurface
from paged_reports.utils.pdf.sections.info_header import (
    build_invoice_info_lines,
    build_roster_info_lines,
    render_info_header,
)
from paged_reports.utils.pdf.sections.items_table import Column, TableLayout, render_table
from paged_reports.utils.pdf.sections.parties import render_parties
from paged_reports.utils.pdf.sections.summary import render_totals

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderOptions:
    filename: str = "document.pdf"
    title: Optional[str] = None
    page_size: str = DEFAULT_PAGE_SIZE
    orientation: str = DEFAULT_ORIENTATION
    margin: float = DEFAULT_MARGIN
    page_numbers: bool = True
    show_total_pages: bool = False
    logo_url: str = ""
    logo_timeout: float = 5.0


@dataclass(frozen=True)
class RenderedDocument:
    content: bytes
    filename: str
    page_count: int


DEFAULT_ROSTER_OPTIONS = RenderOptions(filename="document.pdf", title="User Report")
DEFAULT_INVOICE_OPTIONS = RenderOptions(filename="invoice.pdf", title="Invoice")

ROSTER_TABLE = TableLayout(
    columns=(
        Column("ID", 50),
        Column("Name", 100),
        Column("Email", 200),
        Column("Role", 100),
        Column("Created", 100),
    ),
    header_style=ROSTER_STYLES["header"],
    row_style=ROSTER_STYLES["row"],
    header_height=TABLE_HEADER_HEIGHT,
    row_height=ROSTER_ROW_HEIGHT,
    header_fill=color("roster_header_bg"),
)

INVOICE_TABLE = TableLayout(
    columns=(
        Column("Description", 200, align="left", header_align="center"),
        Column("Qty", 100, align="center"),
        Column("Unit Price", 100, align="center"),
        Column("Amount", 100, align="center"),
    ),
    header_style=INVOICE_STYLES["table_header"],
    row_style=INVOICE_STYLES["table_row"],
    header_height=TABLE_HEADER_HEIGHT,
    row_height=TABLE_ROW_HEIGHT,
    header_fill=color("header_bg"),
    row_fill=color("row_alt"),
    # Keep room for one more row below the one being drawn.
    break_height=2 * TABLE_ROW_HEIGHT,
)


def _open(options: RenderOptions) -> LayoutContext:
    geometry = PageGeometry.from_page_size(options.page_size, options.orientation, options.margin)
    return LayoutContext(BufferedSurface(geometry, title=options.title))


async def _load_logo(options: RenderOptions, client: Optional[httpx.AsyncClient]) -> Optional[bytes]:
    """
    Download and check the logo image. Returns the image bytes, or None when
    there is nothing usable to draw. Never raises.
    """
    if not options.logo_url:
        return None
    result = await fetch_logo(options.logo_url, client=client, timeout=options.logo_timeout)
    if not result.ok:
        return None
    try:
        ImageReader(BytesIO(result.data)).getSize()
    except Exception as exc:
        logger.warning("Failed to load logo image from %s: %s", options.logo_url, exc)
        return None
    return result.data


def _draw_logo(ctx: LayoutContext, logo: Optional[bytes]) -> float | None:
    """Draw the logo at the top-left corner and return its bottom edge."""
    if logo is None:
        return None
    x = ctx.geometry.margin_left
    y = ctx.y
    ctx.surface.draw_image(logo, x, y, LOGO_SIZE, LOGO_SIZE)
    return y + LOGO_SIZE


def _finish(ctx: LayoutContext, options: RenderOptions) -> RenderedDocument:
    surface = ctx.surface
    if options.page_numbers:
        stamp_page_numbers(surface, style=PAGE_NUMBER_STYLE, show_total=options.show_total_pages)
    page_count = surface.page_count()
    sink = BytesIO()
    surface.finalize(sink)
    return RenderedDocument(content=sink.getvalue(), filename=options.filename, page_count=page_count)


def layout_user_report(
    users: Sequence[UserDetails],
    options: RenderOptions = DEFAULT_ROSTER_OPTIONS,
    *,
    logo: Optional[bytes] = None,
    today: Optional[date] = None,
) -> RenderedDocument:
    """Lay out and serialize the roster. CPU bound; no I/O."""
    ctx = _open(options)
    logo_bottom = _draw_logo(ctx, logo)

    render_info_header(
        ctx,
        "USER REPORT",
        build_roster_info_lines(users, today or date.today()),
        title_style=ROSTER_STYLES["title"],
        line_style=ROSTER_STYLES["info"],
    )
    if logo_bottom is not None:
        ctx.move_to(max(ctx.y, logo_bottom))

    render_table(ctx, ROSTER_TABLE, (user.to_row() for user in users))
    return _finish(ctx, options)


def layout_invoice(
    invoice: InvoiceDetails,
    options: RenderOptions = DEFAULT_INVOICE_OPTIONS,
    *,
    logo: Optional[bytes] = None,
) -> RenderedDocument:
    """Lay out and serialize the invoice. CPU bound; no I/O."""
    ctx = _open(options)
    logo_bottom = _draw_logo(ctx, logo)

    render_info_header(
        ctx,
        "INVOICE",
        build_invoice_info_lines(invoice),
        title_style=INVOICE_STYLES["header"],
        line_style=INVOICE_STYLES["normal"],
    )
    if logo_bottom is not None:
        ctx.move_to(max(ctx.y, logo_bottom))

    render_parties(
        ctx,
        invoice.sender,
        invoice.recipient,
        label_style=INVOICE_STYLES["party_label"],
        line_style=INVOICE_STYLES["normal"],
    )
    render_table(ctx, INVOICE_TABLE, (item.to_row() for item in invoice.items))
    render_totals(
        ctx,
        invoice.totals,
        label_style=INVOICE_STYLES["total_label"],
        value_style=INVOICE_STYLES["total_value"],
        grand_style=INVOICE_STYLES["grand_total"],
        rule_color=color("rule"),
    )
    return _finish(ctx, options)


async def build_user_report(
    users: Sequence[UserDetails],
    options: RenderOptions = DEFAULT_ROSTER_OPTIONS,
    *,
    client: Optional[httpx.AsyncClient] = None,
    today: Optional[date] = None,
) -> RenderedDocument:
    logo = await _load_logo(options, client)
    # Layout and serialization run in a worker thread so the event loop stays free.
    doc = await run_in_threadpool(layout_user_report, users, options, logo=logo, today=today)
    logger.info("Rendered user report %s: %d users, %d pages", doc.filename, len(users), doc.page_count)
    return doc


async def build_invoice(
    invoice: InvoiceDetails,
    options: RenderOptions = DEFAULT_INVOICE_OPTIONS,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> RenderedDocument:
    logo = await _load_logo(options, client)
    doc = await run_in_threadpool(layout_invoice, invoice, options, logo=logo)
    logger.info(
        "Rendered invoice %s (%s): %d items, %d pages",
        invoice.invoice_number,
        doc.filename,
        len(invoice.items),
        doc.page_count,
    )
    return doc


async def render_user_report(
    users: Sequence[UserDetails],
    options: RenderOptions = DEFAULT_ROSTER_OPTIONS,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> bytes:
    return (await build_user_report(users, options, client=client)).content


async def render_invoice(
    invoice: InvoiceDetails,
    options: RenderOptions = DEFAULT_INVOICE_OPTIONS,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> bytes:
    return (await build_invoice(invoice, options, client=client)).content
