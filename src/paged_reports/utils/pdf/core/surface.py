"""
Drawing surface: the capability the layout engine draws through.

`BufferedSurface` keeps every page as a list of operations so that earlier
pages can be revisited (page-number footers) before the document is
serialized in one go by `finalize`.
"""

from __future__ import annotations

from typing import BinaryIO, Protocol

from paged_reports.utils.pdf.core import fonts
from paged_reports.utils.pdf.core.builder import build_pdf_bytes
from paged_reports.utils.pdf.core.drawing import (
    ALIGNMENTS,
    DrawOp,
    ImageOp,
    LineOp,
    RectOp,
    TextOp,
    TextStyle,
)
from paged_reports.utils.pdf.core.geometry import PageGeometry


class SurfaceFinalizedError(RuntimeError):
    """Raised when drawing on a surface that has already been serialized."""


class DrawingSurface(Protocol):
    geometry: PageGeometry

    def draw_text(
        self,
        content: str,
        x: float,
        y: float,
        *,
        style: TextStyle,
        width: float | None = None,
        align: str = "left",
    ) -> float: ...

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None: ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, stroke_color: str) -> None: ...

    def draw_image(self, data: bytes, x: float, y: float, w: float, h: float) -> None: ...

    def line_height(self, style: TextStyle) -> float: ...

    def start_new_page(self) -> None: ...

    def page_count(self) -> int: ...

    def activate_page(self, index: int) -> None: ...

    def finalize(self, sink: BinaryIO) -> None: ...


class BufferedSurface:
    """ReportLab-backed surface with an index-addressable page buffer."""

    def __init__(self, geometry: PageGeometry, title: str | None = None):
        self.geometry = geometry
        self.title = title
        self._pages: list[list[DrawOp]] = [[]]
        self._active = 0
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized

    @property
    def active_index(self) -> int:
        return self._active

    def operations(self, index: int) -> tuple[DrawOp, ...]:
        return tuple(self._pages[index])

    def _ensure_open(self) -> None:
        if self._finalized:
            raise SurfaceFinalizedError("Surface already finalized; no further drawing is allowed")

    def _emit(self, op: DrawOp) -> None:
        self._ensure_open()
        self._pages[self._active].append(op)

    def draw_text(
        self,
        content: str,
        x: float,
        y: float,
        *,
        style: TextStyle,
        width: float | None = None,
        align: str = "left",
    ) -> float:
        if align not in ALIGNMENTS:
            raise ValueError(f"Unsupported alignment: {align}")
        if width is None:
            width = self.geometry.width - self.geometry.margin_right - x
        lines = fonts.wrap_text(content, style.font, style.size, width)
        self._emit(TextOp(lines=tuple(lines), x=x, y=y, width=width, align=align, style=style))
        return len(lines) * self.line_height(style)

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        self._emit(RectOp(x=x, y=y, w=w, h=h, color=color))

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, stroke_color: str) -> None:
        self._emit(LineOp(x1=x1, y1=y1, x2=x2, y2=y2, color=stroke_color))

    def draw_image(self, data: bytes, x: float, y: float, w: float, h: float) -> None:
        self._emit(ImageOp(data=data, x=x, y=y, w=w, h=h))

    def line_height(self, style: TextStyle) -> float:
        return fonts.line_height(style.font, style.size)

    def start_new_page(self) -> None:
        self._ensure_open()
        self._pages.append([])
        self._active = len(self._pages) - 1

    def page_count(self) -> int:
        return len(self._pages)

    def activate_page(self, index: int) -> None:
        self._ensure_open()
        if not 0 <= index < len(self._pages):
            raise IndexError(f"Page index {index} out of range (0..{len(self._pages) - 1})")
        self._active = index

    def finalize(self, sink: BinaryIO) -> None:
        self._ensure_open()
        pdf_bytes = build_pdf_bytes(self._pages, self.geometry, title=self.title)
        self._finalized = True
        sink.write(pdf_bytes)
