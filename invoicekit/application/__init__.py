"""
Application layer - Use cases and service factories.

Use cases are the entry point for API handlers and the management CLI.
"""

from invoicekit.application.services import (
    get_dual_path_store,
    get_renderer,
    reset_services,
)
from invoicekit.application.use_cases import RenderedInvoice, RenderInvoicePdfUseCase

__all__ = [
    # Factory functions
    "get_dual_path_store",
    "get_renderer",
    "reset_services",
    # Use cases
    "RenderInvoicePdfUseCase",
    "RenderedInvoice",
]
