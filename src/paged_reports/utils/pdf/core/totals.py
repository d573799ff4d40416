"""
Currency formatting and the label/value lines of the invoice totals block.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paged_reports.core.models.invoice import InvoiceTotals


def format_currency(value: float) -> str:
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        numeric = 0.0
    sign = "-" if numeric < 0 else ""
    return f"{sign}${abs(numeric):,.2f}"


def format_rate(rate: float) -> str:
    return f"{round(rate * 100, 2):g}%"


@dataclass(frozen=True)
class TotalsLine:
    label: str
    value: str


def build_totals_lines(totals: "InvoiceTotals") -> list[TotalsLine]:
    tax_label = f"Tax ({format_rate(totals.tax_rate)}):" if totals.tax_rate else "Tax:"
    return [
        TotalsLine("Subtotal:", format_currency(totals.subtotal)),
        TotalsLine("Discount:", format_currency(-totals.discount)),
        TotalsLine(tax_label, format_currency(totals.tax)),
        TotalsLine("Shipping:", format_currency(totals.shipping)),
    ]


def build_grand_total_line(totals: "InvoiceTotals") -> TotalsLine:
    return TotalsLine("Total:", format_currency(totals.total))
