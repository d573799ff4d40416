"""
Layout and style constants for PDF rendering.
"""

from paged_reports.utils.pdf.core.drawing import TextStyle

# Page defaults (A4 portrait, points)
DEFAULT_PAGE_SIZE = "A4"
DEFAULT_ORIENTATION = "portrait"
DEFAULT_MARGIN = 40

# Block geometry
INFO_BLOCK_WIDTH = 200
TOTALS_BLOCK_WIDTH = 200
PARTY_OFFSET = 20
LOGO_SIZE = 50

# Table geometry
TABLE_HEADER_HEIGHT = 25
TABLE_ROW_HEIGHT = 20
TABLE_TEXT_OFFSET = 5
ROSTER_ROW_HEIGHT = 20

# Colors (hex)
COLORS = {
    "ink": "#000000",
    "header_bg": "#333333",
    "row_alt": "#F5F5F5",
    "roster_header_bg": "#E8E8E8",
    "rule": "#000000",
}


def color(name: str) -> str:
    return COLORS[name]


# Roster report
ROSTER_STYLES = {
    "title": TextStyle(size=18, color="#000000", font="Helvetica-Bold", opacity=0.8),
    "info": TextStyle(size=10, color="#000000", font="Helvetica", opacity=0.8),
    "header": TextStyle(size=12, color="#000000", font="Helvetica-Bold", opacity=0.8),
    "row": TextStyle(size=10, color="#220F0F", font="Helvetica", opacity=0.6),
}

# Invoice
INVOICE_STYLES = {
    "header": TextStyle(size=24, color="#000000", font="Helvetica-Bold", opacity=1.0),
    "party_label": TextStyle(size=14, color="#000000", font="Helvetica-Bold", opacity=0.9),
    "normal": TextStyle(size=10, color="#000000", font="Helvetica", opacity=0.8),
    "table_header": TextStyle(size=11, color="#FFFFFF", font="Helvetica-Bold", opacity=1.0),
    "table_row": TextStyle(size=10, color="#000000", font="Helvetica", opacity=0.8),
    "total_label": TextStyle(size=11, color="#000000", font="Helvetica-Bold", opacity=0.9),
    "total_value": TextStyle(size=11, color="#000000", font="Helvetica", opacity=0.8),
    "grand_total": TextStyle(size=14, color="#000000", font="Helvetica-Bold", opacity=1.0),
}

PAGE_NUMBER_STYLE = TextStyle(size=10, color="#C81515", font="Helvetica", opacity=0.9)
