"""JSON file storage used by the invoice API server."""

from invoicekit.infrastructure.storage.json_file.invoice_file_store import JsonInvoiceFileStore

__all__ = ["JsonInvoiceFileStore"]
