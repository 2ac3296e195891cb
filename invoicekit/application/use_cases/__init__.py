"""Application use cases."""

from invoicekit.application.use_cases.render_invoice import (
    RenderedInvoice,
    RenderInvoicePdfUseCase,
)

__all__ = [
    "RenderInvoicePdfUseCase",
    "RenderedInvoice",
]
