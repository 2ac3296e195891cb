"""
Service factory functions for dependency injection.

Wires the infrastructure implementations to the core services. Use cases,
API dependencies and the management CLI import from here.
"""

from invoicekit.config import get_settings
from invoicekit.core.services import DualPathInvoiceStore
from invoicekit.infrastructure.pdf import TemplateInvoiceRenderer
from invoicekit.infrastructure.remote import HttpInvoiceApi
from invoicekit.infrastructure.storage.sqlite import get_invoice_store

# Singleton service instances
_dual_path_store: DualPathInvoiceStore | None = None
_renderer: TemplateInvoiceRenderer | None = None


def get_dual_path_store() -> DualPathInvoiceStore:
    """
    Get or create the dual-path invoice store.

    The remote side talks to ``REMOTE_BASE_URL``; the local side is the
    SQLite store on the global connection pool.
    """
    global _dual_path_store

    if _dual_path_store is None:
        settings = get_settings()
        remote = HttpInvoiceApi(
            base_url=settings.remote.base_url,
            timeout=settings.remote.timeout,
        )
        _dual_path_store = DualPathInvoiceStore(remote=remote, local=get_invoice_store())

    return _dual_path_store


def get_renderer() -> TemplateInvoiceRenderer:
    """Get or create the template renderer."""
    global _renderer

    if _renderer is None:
        _renderer = TemplateInvoiceRenderer()

    return _renderer


def reset_services() -> None:
    """
    Reset all singleton service instances.

    Useful for testing or when configuration changes.
    """
    global _dual_path_store
    global _renderer

    _dual_path_store = None
    _renderer = None


__all__ = [
    "get_dual_path_store",
    "get_renderer",
    "reset_services",
]
