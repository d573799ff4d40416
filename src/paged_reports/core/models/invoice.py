from dataclasses import dataclass, field
from typing import List

from paged_reports.utils.pdf.core.totals import format_currency


@dataclass
class InvoiceParty:
    """Sender or recipient of an invoice."""

    name: str
    address: str
    city: str
    state: str
    zip: str
    country: str


@dataclass
class InvoiceItem:
    description: str
    quantity: int
    unit_price: float
    amount: float

    def to_row(self) -> list[str]:
        return [
            self.description,
            str(self.quantity),
            format_currency(self.unit_price),
            format_currency(self.amount),
        ]


@dataclass
class InvoiceTotals:
    subtotal: float
    discount: float
    tax: float
    shipping: float
    total: float
    discount_rate: float = 0.0
    tax_rate: float = 0.0


@dataclass
class InvoiceDetails:
    invoice_number: str
    invoice_date: str
    due_date: str
    sender: InvoiceParty
    recipient: InvoiceParty
    totals: InvoiceTotals
    items: List[InvoiceItem] = field(default_factory=list)
