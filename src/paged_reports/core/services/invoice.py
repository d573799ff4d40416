from __future__ import annotations

from paged_reports.core.calculations.pricing_engine import PricingEngine
from paged_reports.core.models.invoice import InvoiceDetails, InvoiceItem, InvoiceParty

PRODUCTS = (
    "Web Development",
    "UI/UX Design",
    "Cloud Hosting",
    "Technical Support",
    "API Integration",
    "Database Setup",
    "Security Audit",
    "Performance Optimization",
)

SENDER = InvoiceParty(
    name="Velorona LLC",
    address="Kathmandu",
    city="Kathmandu",
    state="Bagmati",
    zip="44600",
    country="Nepal",
)

RECIPIENT = InvoiceParty(
    name="Client Name",
    address="Lalitpur",
    city="Lalitpur",
    state="Bagmati",
    zip="44700",
    country="Nepal",
)


def build_mock_items(row_count: int) -> list[InvoiceItem]:
    items = []
    for i in range(row_count):
        quantity = (i % 5) + 1
        unit_price = 100 + (i % 10) * 25
        items.append(
            InvoiceItem(
                description=f"{PRODUCTS[i % len(PRODUCTS)]} - Service {i + 1}",
                quantity=quantity,
                unit_price=float(unit_price),
                amount=PricingEngine.line_amount(quantity, unit_price),
            )
        )
    return items


def generate_mock_invoice(row_count: int = 150, pricing: PricingEngine | None = None) -> InvoiceDetails:
    """
    Build an invoice with `row_count` generated line items and derived totals.
    """
    if row_count < 0:
        raise ValueError(f"row_count must be non-negative, got {row_count}")
    pricing = pricing or PricingEngine()
    items = build_mock_items(row_count)
    return InvoiceDetails(
        invoice_number="INV-001",
        invoice_date="2026-02-21",
        due_date="2026-03-21",
        sender=SENDER,
        recipient=RECIPIENT,
        totals=pricing.summarize(items),
        items=items,
    )
