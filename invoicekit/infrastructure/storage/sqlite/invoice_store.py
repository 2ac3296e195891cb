"""
SQLite implementation of the local invoice store.

Each invoice is kept as its full JSON record keyed by id, with the year
copied into an indexed column. Every failure of the underlying database is
raised as LocalStoreFailure.
"""

import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

import aiosqlite

from invoicekit.config import get_logger
from invoicekit.core.entities.invoice import Invoice
from invoicekit.core.exceptions import LocalStoreFailure
from invoicekit.core.interfaces.storage import ILocalInvoiceStore
from invoicekit.infrastructure.storage.sqlite.connection import ConnectionPool, get_pool

logger = get_logger(__name__)

_UPSERT_SQL = """
    INSERT OR REPLACE INTO invoices (id, year, payload_json, updated_at)
    VALUES (?, ?, ?, ?)
"""


class SQLiteInvoiceStore(ILocalInvoiceStore):
    """SQLite implementation of the local invoice store."""

    def __init__(self, pool: ConnectionPool | None = None):
        self._pool = pool

    @property
    def pool(self) -> ConnectionPool:
        return self._pool or get_pool()

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except (aiosqlite.Error, OSError, ValueError) as e:
            logger.error("local_store_failure", operation=operation, error=str(e))
            raise LocalStoreFailure(operation, str(e)) from e

    async def get_all(self) -> list[Invoice]:
        """Return every stored invoice ordered by id."""
        async with self._guard("get_all"), self.pool.acquire() as conn:
            cursor = await conn.execute("SELECT payload_json FROM invoices ORDER BY id")
            rows = await cursor.fetchall()
            return [self._row_to_invoice(row) for row in rows]

    async def get(self, invoice_id: str) -> Invoice | None:
        """Get invoice by id."""
        async with self._guard("get"), self.pool.acquire() as conn:
            cursor = await conn.execute(
                "SELECT payload_json FROM invoices WHERE id = ?", (invoice_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_invoice(row)

    async def put(self, invoice: Invoice) -> None:
        """Insert or replace an invoice."""
        async with self._guard("put"), self.pool.transaction() as conn:
            await conn.execute(_UPSERT_SQL, self._invoice_params(invoice))
        logger.debug("local_invoice_put", invoice_id=invoice.id)

    async def delete(self, invoice_id: str) -> None:
        async with self._guard("delete"), self.pool.transaction() as conn:
            await conn.execute("DELETE FROM invoices WHERE id = ?", (invoice_id,))
        logger.debug("local_invoice_deleted", invoice_id=invoice_id)

    async def delete_many(self, invoice_ids: list[str]) -> None:
        """Delete every id in one transaction; a failure leaves all rows in place."""
        async with self._guard("delete_many"), self.pool.transaction() as conn:
            await conn.executemany(
                "DELETE FROM invoices WHERE id = ?",
                [(invoice_id,) for invoice_id in invoice_ids],
            )
        logger.info("local_invoices_deleted", count=len(invoice_ids))

    async def replace_all(self, invoices: list[Invoice]) -> None:
        """Clear the collection and insert ``invoices`` in one transaction."""
        async with self._guard("replace_all"), self.pool.transaction() as conn:
            await conn.execute("DELETE FROM invoices")
            await conn.executemany(
                _UPSERT_SQL,
                [self._invoice_params(invoice) for invoice in invoices],
            )
        logger.info("local_invoices_replaced", count=len(invoices))

    async def list_by_year(self, year: int | str) -> list[Invoice]:
        """List invoices for one year through the year index."""
        async with self._guard("list_by_year"), self.pool.acquire() as conn:
            cursor = await conn.execute(
                "SELECT payload_json FROM invoices INDEXED BY idx_invoices_year "
                "WHERE year = ? ORDER BY id",
                (str(year),),
            )
            rows = await cursor.fetchall()
            return [self._row_to_invoice(row) for row in rows]

    async def count(self) -> int:
        async with self._guard("count"), self.pool.acquire() as conn:
            cursor = await conn.execute("SELECT COUNT(*) FROM invoices")
            row = await cursor.fetchone()
            return row[0] if row else 0

    # ------------------------------------------------------------------
    # Row mapping
    # ------------------------------------------------------------------

    @staticmethod
    def _invoice_params(invoice: Invoice) -> tuple[Any, ...]:
        return (
            invoice.id,
            None if invoice.year is None else str(invoice.year),
            json.dumps(invoice.to_record()),
            datetime.now(timezone.utc).isoformat(),
        )

    @staticmethod
    def _row_to_invoice(row: aiosqlite.Row) -> Invoice:
        return Invoice.from_record(json.loads(row["payload_json"]))
