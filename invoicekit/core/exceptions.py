"""
Domain exceptions for invoicekit.

Remote failures are transient and never leave the store facade; local store,
template and validation failures propagate to the caller.
"""

from typing import Any


class InvoiceKitError(Exception):
    """Base exception for all invoicekit errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(InvoiceKitError):
    """Base exception for storage operations."""

    pass


class RemoteUnavailable(StorageError):
    """Remote invoice API unreachable, returned non-2xx, or sent an unreadable body."""

    def __init__(self, operation: str, reason: str, status_code: int | None = None):
        super().__init__(
            f"Remote store unavailable during {operation}: {reason}",
            code="REMOTE_UNAVAILABLE",
            details={"operation": operation, "reason": reason, "status_code": status_code},
        )
        self.operation = operation
        self.reason = reason
        self.status_code = status_code


class LocalStoreFailure(StorageError):
    """The local durable store could not complete an operation."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Local store failure during {operation}: {error}",
            code="LOCAL_STORE_FAILURE",
            details={"operation": operation, "error": error},
        )
        self.operation = operation


class InvoiceNotFoundError(StorageError):
    """Invoice not found in storage."""

    def __init__(self, invoice_id: str):
        super().__init__(
            f"Invoice not found: {invoice_id}",
            code="INVOICE_NOT_FOUND",
            details={"invoice_id": invoice_id},
        )


# Rendering Exceptions
class RenderError(InvoiceKitError):
    """Base exception for PDF rendering."""

    pass


class TemplateLoadError(RenderError):
    """Template PDF is missing, empty, or cannot be parsed."""

    def __init__(self, reason: str, path: str | None = None):
        super().__init__(
            f"Template could not be loaded: {reason}",
            code="TEMPLATE_LOAD_ERROR",
            details={"reason": reason, "path": path},
        )


class ValidationError(InvoiceKitError):
    """Caller-supplied data is missing fields required for rendering."""

    def __init__(self, fields: list[str], message: str = "Missing required fields"):
        super().__init__(
            f"{message}: {', '.join(fields)}",
            code="VALIDATION_ERROR",
            details={"fields": fields},
        )
        self.fields = fields
