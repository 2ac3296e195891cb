"""SQLite storage implementations."""

from invoicekit.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_pool,
)
from invoicekit.infrastructure.storage.sqlite.invoice_store import SQLiteInvoiceStore

# Singleton instances
_invoice_store: SQLiteInvoiceStore | None = None


def get_invoice_store() -> SQLiteInvoiceStore:
    """Get singleton local invoice store instance."""
    global _invoice_store
    if _invoice_store is None:
        _invoice_store = SQLiteInvoiceStore()
    return _invoice_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    # Store classes
    "SQLiteInvoiceStore",
    # Factory functions
    "get_invoice_store",
]
