"""Domain entities."""

from invoicekit.core.entities.invoice import ClientInfo, Invoice, InvoiceData
from invoicekit.core.entities.layout import (
    DEFAULT_LAYOUT,
    Anchor,
    FontWeight,
    GridLine,
    LayoutGeometry,
    PagePlan,
    TextBox,
    TextRun,
)

__all__ = [
    # Invoice
    "ClientInfo",
    "Invoice",
    "InvoiceData",
    # Layout
    "DEFAULT_LAYOUT",
    "Anchor",
    "FontWeight",
    "GridLine",
    "LayoutGeometry",
    "PagePlan",
    "TextBox",
    "TextRun",
]
