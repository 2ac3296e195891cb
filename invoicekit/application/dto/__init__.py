"""Data transfer objects for the API layer."""

from invoicekit.application.dto.responses import (
    DateResponse,
    ErrorResponse,
    HealthResponse,
    InvoiceListResponse,
    OkResponse,
)

__all__ = [
    "DateResponse",
    "ErrorResponse",
    "HealthResponse",
    "InvoiceListResponse",
    "OkResponse",
]
