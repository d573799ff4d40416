"""
Page geometry: page size, orientation and margins -> usable drawing bounds.
"""

from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib import pagesizes

ORIENTATIONS = ("portrait", "landscape")


@dataclass(frozen=True)
class Margins:
    top: float
    right: float
    bottom: float
    left: float

    @classmethod
    def uniform(cls, margin: float) -> "Margins":
        return cls(top=margin, right=margin, bottom=margin, left=margin)


def compute_usable_height(page_size: tuple[float, float], margins: Margins) -> float:
    return page_size[1] - margins.top - margins.bottom


def compute_usable_width(page_size: tuple[float, float], margins: Margins) -> float:
    return page_size[0] - margins.left - margins.right


@dataclass(frozen=True)
class PageGeometry:
    width: float
    height: float
    margin_top: float
    margin_right: float
    margin_bottom: float
    margin_left: float

    def __post_init__(self) -> None:
        if self.width <= self.margin_left + self.margin_right:
            raise ValueError(
                f"Page width {self.width} leaves no room between margins "
                f"{self.margin_left} + {self.margin_right}"
            )
        if self.height <= self.margin_top + self.margin_bottom:
            raise ValueError(
                f"Page height {self.height} leaves no room between margins "
                f"{self.margin_top} + {self.margin_bottom}"
            )

    @classmethod
    def from_page_size(cls, page_size: str = "A4", orientation: str = "portrait", margin: float = 40) -> "PageGeometry":
        size = getattr(pagesizes, page_size.upper(), None)
        if not isinstance(size, tuple):
            raise ValueError(f"Unknown page size: {page_size}")
        if orientation not in ORIENTATIONS:
            raise ValueError(f"Unknown orientation: {orientation}")
        oriented = pagesizes.landscape(size) if orientation == "landscape" else pagesizes.portrait(size)
        width, height = oriented
        return cls(
            width=width,
            height=height,
            margin_top=margin,
            margin_right=margin,
            margin_bottom=margin,
            margin_left=margin,
        )

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)

    @property
    def margins(self) -> Margins:
        return Margins(top=self.margin_top, right=self.margin_right, bottom=self.margin_bottom, left=self.margin_left)

    @property
    def usable_height(self) -> float:
        return compute_usable_height(self.size, self.margins)

    @property
    def usable_width(self) -> float:
        return compute_usable_width(self.size, self.margins)
