"""Core interfaces (ports) for dependency injection."""

from invoicekit.core.interfaces.layout import IDrawablePage, ITextMetrics
from invoicekit.core.interfaces.storage import ILocalInvoiceStore, IRemoteInvoiceStore

__all__ = [
    # Storage interfaces
    "ILocalInvoiceStore",
    "IRemoteInvoiceStore",
    # Layout interfaces
    "IDrawablePage",
    "ITextMetrics",
]
