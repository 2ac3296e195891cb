"""Remote invoice API client."""

from invoicekit.infrastructure.remote.http_invoice_api import HttpInvoiceApi

__all__ = ["HttpInvoiceApi"]
