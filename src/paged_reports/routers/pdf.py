from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Optional

from fastapi import APIRouter, Query, Response

from paged_reports.core.services import config
from paged_reports.core.services.invoice import generate_mock_invoice
from paged_reports.core.services.roster import generate_users
from paged_reports.utils.pdf.renderers.pdf_renderer import (
    DEFAULT_INVOICE_OPTIONS,
    DEFAULT_ROSTER_OPTIONS,
    RenderedDocument,
    build_invoice,
    build_user_report,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pdf", tags=["pdf"])


def _pdf_response(doc: RenderedDocument) -> Response:
    return Response(
        content=doc.content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'inline; filename="{doc.filename}"'},
    )


@router.get("/users-report")
async def users_report(rows: Optional[int] = Query(None, ge=0, le=config.PDF_MAX_ROWS)):
    started = time.perf_counter()
    users = generate_users(config.PDF_USERS_COUNT if rows is None else rows)
    doc = await build_user_report(users, DEFAULT_ROSTER_OPTIONS)
    logger.info("User list PDF generated %d ms", (time.perf_counter() - started) * 1000)
    return _pdf_response(doc)


@router.get("/invoice")
async def invoice_pdf(rows: Optional[int] = Query(None, ge=0, le=config.PDF_MAX_ROWS)):
    started = time.perf_counter()
    invoice = generate_mock_invoice(config.PDF_INVOICE_ROWS if rows is None else rows)
    options = replace(
        DEFAULT_INVOICE_OPTIONS,
        logo_url=config.PDF_LOGO_URL,
        logo_timeout=config.PDF_LOGO_TIMEOUT,
    )
    doc = await build_invoice(invoice, options)
    logger.info("Invoice PDF generated %d ms", (time.perf_counter() - started) * 1000)
    return _pdf_response(doc)
