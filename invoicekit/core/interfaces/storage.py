"""
Abstract interfaces for the two invoice storage paths.

The remote store raises RemoteUnavailable for every failure; the local store
raises LocalStoreFailure.
"""

from abc import ABC, abstractmethod

from invoicekit.core.entities.invoice import Invoice


class IRemoteInvoiceStore(ABC):
    """Network-backed authoritative invoice collection."""

    @abstractmethod
    async def fetch_all(self) -> list[Invoice]:
        """Fetch every invoice."""
        pass

    @abstractmethod
    async def save(self, invoice: Invoice) -> None:
        """Create or replace an invoice."""
        pass

    @abstractmethod
    async def delete(self, invoice_id: str) -> None:
        """Delete one invoice."""
        pass

    @abstractmethod
    async def bulk_delete(self, invoice_ids: list[str]) -> None:
        """Delete several invoices."""
        pass

    @abstractmethod
    async def import_all(self, invoices: list[Invoice]) -> None:
        """Replace the whole collection."""
        pass

    @abstractmethod
    async def fetch_default_date(self) -> str | None:
        """Fetch the default invoice date."""
        pass


class ILocalInvoiceStore(ABC):
    """
    Durable keyed invoice collection on the caller's device.

    Keyed by ``id`` with a non-unique secondary index on ``year``.
    Multi-key mutations are atomic.
    """

    @abstractmethod
    async def get_all(self) -> list[Invoice]:
        """Return every stored invoice."""
        pass

    @abstractmethod
    async def get(self, invoice_id: str) -> Invoice | None:
        """Return one invoice or None."""
        pass

    @abstractmethod
    async def put(self, invoice: Invoice) -> None:
        """Insert or replace an invoice."""
        pass

    @abstractmethod
    async def delete(self, invoice_id: str) -> None:
        """Delete one invoice; missing ids are ignored."""
        pass

    @abstractmethod
    async def delete_many(self, invoice_ids: list[str]) -> None:
        """Delete several invoices in one transaction."""
        pass

    @abstractmethod
    async def replace_all(self, invoices: list[Invoice]) -> None:
        """Clear the collection and insert ``invoices`` in one transaction."""
        pass

    @abstractmethod
    async def list_by_year(self, year: int | str) -> list[Invoice]:
        """Return invoices whose ``year`` matches."""
        pass
