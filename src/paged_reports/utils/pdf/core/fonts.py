"""
Text measurement backed by ReportLab's built-in font metrics.
"""

from __future__ import annotations

from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics

# Ascent-to-descent span times this ratio gives the advance between lines
# (Helvetica at 10pt -> 11.56pt).
LINE_GAP_RATIO = 1.25


def ascent(font: str, size: float) -> float:
    asc, _ = pdfmetrics.getAscentDescent(font, size)
    return asc


def line_height(font: str, size: float) -> float:
    asc, desc = pdfmetrics.getAscentDescent(font, size)
    return (asc - desc) * LINE_GAP_RATIO


def text_width(text: str, font: str, size: float) -> float:
    return pdfmetrics.stringWidth(str(text), font, size)


def wrap_text(text: str, font: str, size: float, width: float) -> list[str]:
    """Split text into lines no wider than `width`; always at least one line."""
    return simpleSplit(str(text), font, size, width) or [""]
