import io
import sys
from pathlib import Path

import pytest

# Ensure `src` is importable when running tests from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


class RecordingSurface:
    """
    In-memory stand-in for the drawing surface: records every call with the
    page it landed on. Text is one line tall, `size + 2` points.
    """

    def __init__(self, geometry):
        self.geometry = geometry
        self.calls = []
        self.pages = 1
        self.active = 0
        self.finalized = False

    def _record(self, kind, **fields):
        self.calls.append({"page": self.active, "kind": kind, **fields})

    def draw_text(self, content, x, y, *, style, width=None, align="left"):
        self._record("text", content=content, x=x, y=y, width=width, align=align, style=style)
        return self.line_height(style)

    def fill_rect(self, x, y, w, h, color):
        self._record("rect", x=x, y=y, w=w, h=h, color=color)

    def draw_line(self, x1, y1, x2, y2, stroke_color):
        self._record("line", x1=x1, y1=y1, x2=x2, y2=y2, color=stroke_color)

    def draw_image(self, data, x, y, w, h):
        self._record("image", x=x, y=y, w=w, h=h)

    def line_height(self, style):
        return style.size + 2

    def start_new_page(self):
        self.pages += 1
        self.active = self.pages - 1

    def page_count(self):
        return self.pages

    def activate_page(self, index):
        if not 0 <= index < self.pages:
            raise IndexError(index)
        self.active = index

    def finalize(self, sink):
        self.finalized = True
        sink.write(b"%PDF-fake")

    # helpers for assertions
    def of_kind(self, kind, page=None):
        return [c for c in self.calls if c["kind"] == kind and (page is None or c["page"] == page)]

    def texts(self, page=None):
        return [c["content"] for c in self.of_kind("text", page)]


@pytest.fixture
def small_geometry():
    from paged_reports.utils.pdf.core.geometry import PageGeometry

    # usable height 260: the page floor sits at y=260
    return PageGeometry(width=400, height=300, margin_top=20, margin_right=20, margin_bottom=20, margin_left=20)


@pytest.fixture
def recording_surface(small_geometry):
    return RecordingSurface(small_geometry)


@pytest.fixture
def ctx(recording_surface):
    from paged_reports.utils.pdf.core.layout import LayoutContext

    return LayoutContext(recording_surface)


@pytest.fixture
def text_style():
    from paged_reports.utils.pdf.core.drawing import TextStyle

    return TextStyle(size=10, color="#000000", font="Helvetica", opacity=1.0)


@pytest.fixture
def sample_invoice():
    from paged_reports.core.services.invoice import generate_mock_invoice

    return generate_mock_invoice(12)


@pytest.fixture
def png_bytes():
    from PIL import Image

    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), (20, 60, 200)).save(buffer, format="PNG")
    return buffer.getvalue()
