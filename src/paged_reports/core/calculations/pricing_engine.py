from __future__ import annotations

from typing import Iterable

from paged_reports.core.models.invoice import InvoiceItem, InvoiceTotals


class PricingEngine:
    """Sums invoice lines and applies discount, tax and shipping."""

    def __init__(self, discount_rate: float = 0.05, tax_rate: float = 0.10, shipping: float = 0.0):
        if discount_rate < 0 or tax_rate < 0 or shipping < 0:
            raise ValueError("discount_rate, tax_rate and shipping must be non-negative")
        self.discount_rate = discount_rate
        self.tax_rate = tax_rate
        self.shipping = shipping

    @staticmethod
    def line_amount(quantity: float, unit_price: float) -> float:
        return float(quantity) * float(unit_price)

    def summarize(self, items: Iterable[InvoiceItem]) -> InvoiceTotals:
        """
        Tax is charged on the discounted subtotal; shipping is added untaxed.
        """
        subtotal = sum(float(item.amount) for item in items)
        discount = subtotal * self.discount_rate
        tax = (subtotal - discount) * self.tax_rate
        total = subtotal - discount + tax + self.shipping
        return InvoiceTotals(
            subtotal=subtotal,
            discount=discount,
            tax=tax,
            shipping=self.shipping,
            total=total,
            discount_rate=self.discount_rate,
            tax_rate=self.tax_rate,
        )
