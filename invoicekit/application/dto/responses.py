"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class OkResponse(BaseModel):
    """Acknowledgement returned by every write endpoint."""

    ok: bool = True


class InvoiceListResponse(BaseModel):
    """Full invoice collection as stored records."""

    invoices: list[Any] = Field(default_factory=list, description="Invoice records")


class DateResponse(BaseModel):
    """Default invoice date."""

    date: str | None = Field(default=None, description="Default date, MM-DD-YYYY")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    uptime_seconds: float


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. INVOICE_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
