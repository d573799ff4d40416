"""
PDF assembly: replays buffered page operations onto a ReportLab canvas.
"""

from __future__ import annotations

from io import BytesIO
from typing import Sequence

from reportlab.pdfgen.canvas import Canvas

from paged_reports.utils.pdf.core.drawing import DrawOp, draw_op
from paged_reports.utils.pdf.core.geometry import PageGeometry


def build_pdf_bytes(pages: Sequence[Sequence[DrawOp]], geometry: PageGeometry, title: str | None = None) -> bytes:
    """
    Given the list of page operation lists, return ready-to-write PDF bytes.
    """
    buffer = BytesIO()
    c = Canvas(buffer, pagesize=geometry.size, pageCompression=1)
    if title:
        c.setTitle(title)

    for ops in pages:
        for op in ops:
            c.saveState()
            draw_op(c, op, geometry.height)
            c.restoreState()
        c.showPage()

    c.save()
    return buffer.getvalue()
