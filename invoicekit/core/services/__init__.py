"""Core business services."""

from invoicekit.core.services.dual_path_store import DualPathInvoiceStore
from invoicekit.core.services.fallback import (
    OPERATION_POLICIES,
    FallbackPolicy,
    Outcome,
    attempt_remote,
)
from invoicekit.core.services.invoice_layout import InvoiceLayoutEngine, validate_for_render
from invoicekit.core.services.text_wrap import break_long_word, wrap_text

__all__ = [
    # Storage
    "DualPathInvoiceStore",
    "FallbackPolicy",
    "OPERATION_POLICIES",
    "Outcome",
    "attempt_remote",
    # Layout
    "InvoiceLayoutEngine",
    "validate_for_render",
    "wrap_text",
    "break_long_word",
]
