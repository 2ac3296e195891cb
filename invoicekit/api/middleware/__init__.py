"""API middleware."""

from invoicekit.api.middleware.error_handler import ErrorHandlerMiddleware
from invoicekit.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
