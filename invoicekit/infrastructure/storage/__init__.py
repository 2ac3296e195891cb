"""Storage infrastructure implementations."""

from invoicekit.infrastructure.storage.json_file import JsonInvoiceFileStore
from invoicekit.infrastructure.storage.sqlite import (
    ConnectionPool,
    SQLiteInvoiceStore,
    close_pool,
    get_invoice_store,
    get_pool,
)

__all__ = [
    # SQLite store
    "SQLiteInvoiceStore",
    "get_invoice_store",
    # Connection pool
    "ConnectionPool",
    "get_pool",
    "close_pool",
    # Server-side JSON files
    "JsonInvoiceFileStore",
]
