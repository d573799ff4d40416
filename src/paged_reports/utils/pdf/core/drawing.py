"""
Drawing primitives recorded per page and replayed onto a ReportLab canvas.

Coordinates are top-left based (y grows down the page); conversion to the
PDF origin happens only when a page is replayed.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from typing import Union

from reportlab.lib import colors
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen.canvas import Canvas

from paged_reports.utils.pdf.core import fonts


@dataclass(frozen=True)
class TextStyle:
    size: float
    color: str
    font: str = "Helvetica"
    opacity: float = 1.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.opacity <= 1.0:
            raise ValueError(f"opacity must be within [0, 1], got {self.opacity}")


@dataclass(frozen=True)
class TextOp:
    lines: tuple[str, ...]
    x: float
    y: float
    width: float
    align: str
    style: TextStyle


@dataclass(frozen=True)
class RectOp:
    x: float
    y: float
    w: float
    h: float
    color: str


@dataclass(frozen=True)
class LineOp:
    x1: float
    y1: float
    x2: float
    y2: float
    color: str


@dataclass(frozen=True)
class ImageOp:
    data: bytes
    x: float
    y: float
    w: float
    h: float


DrawOp = Union[TextOp, RectOp, LineOp, ImageOp]

ALIGNMENTS = ("left", "center", "right")


def _draw_text(c: Canvas, op: TextOp, page_h: float) -> None:
    style = op.style
    leading = fonts.line_height(style.font, style.size)
    ascent = fonts.ascent(style.font, style.size)
    c.setFont(style.font, style.size)
    c.setFillColor(colors.HexColor(style.color))
    c.setFillAlpha(style.opacity)
    top = op.y
    for line in op.lines:
        baseline = page_h - top - ascent
        if op.align == "center":
            c.drawCentredString(op.x + op.width / 2, baseline, line)
        elif op.align == "right":
            c.drawRightString(op.x + op.width, baseline, line)
        else:
            c.drawString(op.x, baseline, line)
        top += leading


def _draw_rect(c: Canvas, op: RectOp, page_h: float) -> None:
    c.setFillColor(colors.HexColor(op.color))
    c.setFillAlpha(1.0)
    c.rect(op.x, page_h - op.y - op.h, op.w, op.h, stroke=0, fill=1)


def _draw_line(c: Canvas, op: LineOp, page_h: float) -> None:
    c.setStrokeColor(colors.HexColor(op.color))
    c.line(op.x1, page_h - op.y1, op.x2, page_h - op.y2)


def _draw_image(c: Canvas, op: ImageOp, page_h: float) -> None:
    image = ImageReader(BytesIO(op.data))
    c.drawImage(image, op.x, page_h - op.y - op.h, width=op.w, height=op.h, mask="auto")


def draw_op(c: Canvas, op: DrawOp, page_h: float) -> None:
    if isinstance(op, TextOp):
        _draw_text(c, op, page_h)
    elif isinstance(op, RectOp):
        _draw_rect(c, op, page_h)
    elif isinstance(op, LineOp):
        _draw_line(c, op, page_h)
    elif isinstance(op, ImageOp):
        _draw_image(c, op, page_h)
    else:
        raise TypeError(f"Unsupported draw operation: {type(op).__name__}")
