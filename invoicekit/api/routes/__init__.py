"""API route modules."""

from invoicekit.api.routes.health import router as health_router
from invoicekit.api.routes.invoices import router as invoices_router
from invoicekit.api.routes.pdf import router as pdf_router

__all__ = [
    "health_router",
    "invoices_router",
    "pdf_router",
]
