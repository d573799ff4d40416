import asyncio
import logging
import re
import threading
from dataclasses import replace
from datetime import date

import httpx
import pytest

from paged_reports.core.services.invoice import generate_mock_invoice
from paged_reports.core.services.roster import generate_users
from paged_reports.utils.pdf.renderers import pdf_renderer
from paged_reports.utils.pdf.renderers.pdf_renderer import (
    DEFAULT_INVOICE_OPTIONS,
    DEFAULT_ROSTER_OPTIONS,
    build_invoice,
    build_user_report,
    render_invoice,
    render_user_report,
)

LOGO_URL = "https://assets.example.test/logo.png"


def _page_objects(pdf_bytes):
    return len(re.findall(rb"/Type\s*/Page\b", pdf_bytes))


def _has_image(pdf_bytes):
    return re.search(rb"/Subtype\s*/Image\b", pdf_bytes) is not None


def _client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


async def _invoice_with_logo(invoice, handler):
    options = replace(DEFAULT_INVOICE_OPTIONS, logo_url=LOGO_URL)
    async with _client(handler) as client:
        return await build_invoice(invoice, options, client=client)


def test_small_invoice_fits_one_page(sample_invoice):
    doc = asyncio.run(build_invoice(sample_invoice))

    assert doc.content.startswith(b"%PDF")
    assert doc.filename == "invoice.pdf"
    assert doc.page_count == 1
    assert _page_objects(doc.content) == 1
    assert not _has_image(doc.content)


def test_long_invoice_spans_pages():
    doc = asyncio.run(build_invoice(generate_mock_invoice(150)))

    assert doc.page_count > 1
    assert _page_objects(doc.content) == doc.page_count


def test_user_report_pages_match_pdf():
    doc = asyncio.run(build_user_report(generate_users(120), today=date(2026, 3, 1)))

    assert doc.filename == "document.pdf"
    assert doc.page_count > 1
    assert _page_objects(doc.content) == doc.page_count


def test_empty_roster_still_renders_one_page():
    doc = asyncio.run(build_user_report([]))

    assert doc.page_count == 1
    assert _page_objects(doc.content) == 1


def test_render_helpers_return_bytes(sample_invoice):
    assert asyncio.run(render_invoice(sample_invoice)).startswith(b"%PDF")
    assert asyncio.run(render_user_report(generate_users(3))).startswith(b"%PDF")


def test_landscape_option_changes_page_count():
    users = generate_users(200)
    portrait = asyncio.run(build_user_report(users))
    landscape = asyncio.run(build_user_report(users, replace(DEFAULT_ROSTER_OPTIONS, orientation="landscape")))

    assert landscape.page_count > portrait.page_count


def test_logo_is_drawn_when_fetch_succeeds(sample_invoice, png_bytes):
    doc = asyncio.run(_invoice_with_logo(sample_invoice, lambda request: httpx.Response(200, content=png_bytes)))

    assert _has_image(doc.content)
    assert doc.page_count == 1


@pytest.mark.parametrize(
    "response",
    [httpx.Response(500), httpx.Response(200, content=b"definitely not an image")],
)
def test_logo_failure_still_renders(sample_invoice, caplog, response):
    with caplog.at_level(logging.WARNING):
        doc = asyncio.run(_invoice_with_logo(sample_invoice, lambda request: response))

    assert doc.content.startswith(b"%PDF")
    assert not _has_image(doc.content)
    assert "logo" in caplog.text


def test_layout_errors_propagate(sample_invoice, monkeypatch):
    def broken_table(*args, **kwargs):
        raise RuntimeError("layout failed")

    monkeypatch.setattr(pdf_renderer, "render_table", broken_table)

    with pytest.raises(RuntimeError, match="layout failed"):
        asyncio.run(build_invoice(sample_invoice))


def test_layout_runs_in_worker_thread(monkeypatch):
    seen = []
    original = pdf_renderer.render_table

    def recording_table(*args, **kwargs):
        seen.append(threading.get_ident())
        return original(*args, **kwargs)

    monkeypatch.setattr(pdf_renderer, "render_table", recording_table)

    doc = asyncio.run(build_user_report(generate_users(3)))

    assert doc.page_count == 1
    assert seen and seen[0] != threading.get_ident()


def test_layout_invoice_is_synchronous(sample_invoice, png_bytes):
    doc = pdf_renderer.layout_invoice(sample_invoice, logo=png_bytes)

    assert doc.content.startswith(b"%PDF")
    assert _has_image(doc.content)


def test_unknown_color_name_fails_loudly():
    with pytest.raises(KeyError):
        pdf_renderer.color("rul")
