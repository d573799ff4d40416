"""
Layout context: owns the vertical cursor for one document render.

Renderers read `y`, draw at absolute coordinates through the surface and
move the cursor only through the methods below.
"""

from __future__ import annotations

from paged_reports.utils.pdf.core.drawing import TextStyle
from paged_reports.utils.pdf.core.pagination import needs_new_page
from paged_reports.utils.pdf.core.surface import DrawingSurface


class LayoutContext:
    def __init__(self, surface: DrawingSurface):
        self.surface = surface
        self.geometry = surface.geometry
        self._y = self.geometry.margin_top

    @property
    def y(self) -> float:
        return self._y

    def move_to(self, y: float) -> None:
        self._y = y

    def advance(self, dy: float) -> None:
        self._y += dy

    def rewind(self, dy: float) -> None:
        """Step the cursor back up so the next draw shares the previous line."""
        self._y -= dy

    def new_page(self) -> None:
        self.surface.start_new_page()
        self._y = self.geometry.margin_top

    def needs_new_page(self, block_height: float) -> bool:
        return needs_new_page(self._y, block_height, self.geometry.usable_height)

    def ensure_room(self, block_height: float) -> bool:
        """Start a new page when `block_height` does not fit; report whether it did."""
        if self.needs_new_page(block_height):
            self.new_page()
            return True
        return False

    def line_height(self, style: TextStyle) -> float:
        return self.surface.line_height(style)

    def text(
        self,
        content: str,
        x: float,
        *,
        style: TextStyle,
        width: float | None = None,
        align: str = "left",
        advance: bool = True,
    ) -> float:
        height = self.surface.draw_text(content, x, self._y, style=style, width=width, align=align)
        if advance:
            self._y += height
        return height
