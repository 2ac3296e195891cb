"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

from invoicekit.core.entities import ClientInfo, Invoice
from invoicekit.infrastructure.storage.sqlite import ConnectionPool, SQLiteInvoiceStore


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
async def pool(temp_db_path: Path) -> AsyncGenerator[ConnectionPool, None]:
    """Connection pool on a fresh database; the schema is created on first use."""
    pool = ConnectionPool(temp_db_path, pool_size=2)
    yield pool
    await pool.close()


@pytest.fixture
def invoice_store(pool: ConnectionPool) -> SQLiteInvoiceStore:
    return SQLiteInvoiceStore(pool)


def make_invoice(invoice_id: str, year: int | str | None = 2024) -> Invoice:
    """Build a minimal invoice."""
    return Invoice(
        id=invoice_id,
        invoice_number=f"N-{invoice_id}",
        year=year,
        client=ClientInfo(name=f"Client {invoice_id}"),
    )


async def add_abort_trigger(pool: ConnectionPool, event: str, invoice_id: str) -> None:
    """Make any ``event`` (INSERT or DELETE) touching ``invoice_id`` fail."""
    row = "NEW" if event == "INSERT" else "OLD"
    async with pool.acquire() as conn:
        await conn.execute(
            f"CREATE TRIGGER fail_{event.lower()} BEFORE {event} ON invoices "
            f"WHEN {row}.id = '{invoice_id}' "
            "BEGIN SELECT RAISE(ABORT, 'simulated failure'); END"
        )
        await conn.commit()


@pytest.fixture
def invoice_factory():
    """Factory for minimal invoices."""
    return make_invoice


@pytest.fixture
def abort_trigger(pool: ConnectionPool):
    """Install a trigger that fails one row's INSERT or DELETE."""

    async def install(event: str, invoice_id: str) -> None:
        await add_abort_trigger(pool, event, invoice_id)

    return install
