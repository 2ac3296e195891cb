"""
Dual-path invoice store.

Presents one API over the remote invoice service and the local durable
store. Each operation makes at most one remote attempt and at most one local
attempt; which paths run is decided by OPERATION_POLICIES.

Known limitation: writes are not transactional across the two paths. A remote
success followed by a local failure (or the reverse) leaves them diverged
until the next import.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from invoicekit.config import get_logger
from invoicekit.core.entities.invoice import Invoice
from invoicekit.core.interfaces.storage import ILocalInvoiceStore, IRemoteInvoiceStore
from invoicekit.core.services.fallback import (
    OPERATION_POLICIES,
    attempt_remote,
    runs_local,
    uses_local_result,
)

logger = get_logger(__name__)


class DualPathInvoiceStore:
    """
    Invoice store that prefers the remote service and falls back to local storage.

    RemoteUnavailable never escapes; LocalStoreFailure always does.
    """

    def __init__(self, remote: IRemoteInvoiceStore, local: ILocalInvoiceStore):
        self._remote = remote
        self._local = local

    async def _run(
        self,
        operation: str,
        remote_call: Callable[[], Awaitable[Any]],
        local_call: Callable[[], Awaitable[Any]] | None = None,
        default: Any = None,
    ) -> Any:
        policy = OPERATION_POLICIES[operation]
        outcome = await attempt_remote(operation, remote_call)

        local_value = None
        if local_call is not None and runs_local(policy, outcome):
            local_value = await local_call()

        if uses_local_result(policy, outcome):
            return local_value
        return outcome.value if outcome.ok else default

    async def get_all(self) -> list[Invoice]:
        """All invoices from the remote, or the local collection when it is unreachable."""
        return await self._run("get_all", self._remote.fetch_all, self._local.get_all)

    async def get_by_id(self, invoice_id: str) -> Invoice | None:
        """One invoice, or None when absent from whichever path answered."""

        async def remote_lookup() -> Invoice | None:
            invoices = await self._remote.fetch_all()
            return next((inv for inv in invoices if inv.id == invoice_id), None)

        return await self._run(
            "get_by_id",
            remote_lookup,
            lambda: self._local.get(invoice_id),
        )

    async def save(self, invoice: Invoice) -> None:
        """Save remotely when possible; always save locally."""
        await self._run(
            "save",
            lambda: self._remote.save(invoice),
            lambda: self._local.put(invoice),
        )
        logger.info("invoice_saved", invoice_id=invoice.id)

    async def delete(self, invoice_id: str) -> None:
        await self._run(
            "delete",
            lambda: self._remote.delete(invoice_id),
            lambda: self._local.delete(invoice_id),
        )
        logger.info("invoice_deleted", invoice_id=invoice_id)

    async def bulk_delete(self, invoice_ids: list[str]) -> None:
        ids = list(invoice_ids)
        await self._run(
            "bulk_delete",
            lambda: self._remote.bulk_delete(ids),
            lambda: self._local.delete_many(ids),
        )
        logger.info("invoices_bulk_deleted", count=len(ids))

    async def import_all(self, invoices: list[Invoice]) -> None:
        """Replace the whole collection on both paths."""
        batch = list(invoices)
        await self._run(
            "import_all",
            lambda: self._remote.import_all(batch),
            lambda: self._local.replace_all(batch),
        )
        logger.info("invoices_imported", count=len(batch))

    async def get_default_date(self) -> str | None:
        """Server default date, or None; callers substitute the current date."""
        return await self._run("get_default_date", self._remote.fetch_default_date)
