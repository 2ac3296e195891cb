"""
Async SQLite connection pool with aiosqlite.

The schema is established lazily: the first acquire applies pending
migrations under the pool lock, so concurrent first opens never race on
creating the invoices table or its index.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from invoicekit.config import get_logger, get_settings
from invoicekit.core.exceptions import LocalStoreFailure
from invoicekit.infrastructure.storage.sqlite.migrations.migrator import migrate

logger = get_logger(__name__)


class ConnectionPool:
    """
    Async SQLite connection pool.

    Manages a pool of connections with configurable size.
    """

    def __init__(
        self,
        db_path: Path,
        pool_size: int = 2,
        busy_timeout: int = 30000,
    ):
        self.db_path = Path(db_path)
        self.pool_size = pool_size
        self.busy_timeout = busy_timeout

        self._pool: asyncio.Queue[aiosqlite.Connection] = asyncio.Queue(maxsize=pool_size)
        self._connections: list[aiosqlite.Connection] = []
        self._initialized = False
        self._lock = asyncio.Lock()

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """Create the schema if needed and open the pooled connections."""
        async with self._lock:
            if self._initialized:
                return

            self.db_path.parent.mkdir(parents=True, exist_ok=True)

            conn = await self._create_connection()
            try:
                results = await migrate(conn)
            except Exception:
                await conn.close()
                raise
            failed = [r for r in results if not r.success]
            if failed:
                await conn.close()
                raise LocalStoreFailure(
                    "schema_upgrade",
                    f"migration v{failed[0].version} failed: {failed[0].error}",
                )

            opened = [conn]
            try:
                for _ in range(self.pool_size - 1):
                    opened.append(await self._create_connection())
            except Exception:
                await self._discard(opened)
                raise

            # Published only once every connection opened
            for opened_conn in opened:
                self._connections.append(opened_conn)
                self._pool.put_nowait(opened_conn)

            self._initialized = True
            logger.info(
                "connection_pool_initialized",
                db_path=str(self.db_path),
                pool_size=self.pool_size,
                migrations_applied=len(results),
            )

    async def _discard(self, connections: list[aiosqlite.Connection]) -> None:
        """Close connections from a failed initialize; the pool stays empty."""
        for conn in connections:
            try:
                await conn.close()
            except Exception as e:
                logger.warning("connection_close_failed", db_path=str(self.db_path), error=str(e))

    async def _create_connection(self) -> aiosqlite.Connection:
        """Create a new database connection with optimized settings."""
        conn = await aiosqlite.connect(self.db_path)

        # busy_timeout first so WAL setup waits on other processes
        await conn.execute(f"PRAGMA busy_timeout={self.busy_timeout}")
        await conn.execute("PRAGMA journal_mode=WAL")
        await conn.execute("PRAGMA synchronous=NORMAL")

        conn.row_factory = aiosqlite.Row

        return conn

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[aiosqlite.Connection]:
        """
        Acquire a connection from the pool.

        Usage:
            async with pool.acquire() as conn:
                await conn.execute(...)
        """
        if not self._initialized:
            await self.initialize()

        conn = await self._pool.get()
        try:
            yield conn
        finally:
            await self._pool.put(conn)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """
        Acquire a connection with transaction context.

        Automatically commits on success, rolls back on exception.
        """
        async with self.acquire() as conn:
            try:
                yield conn
                await conn.commit()
            except Exception:
                await conn.rollback()
                raise

    async def close(self) -> None:
        """Close all connections in the pool."""
        async with self._lock:
            for conn in self._connections:
                await conn.close()
            self._connections.clear()
            self._pool = asyncio.Queue(maxsize=self.pool_size)
            self._initialized = False
            logger.info("connection_pool_closed")


# Global connection pool
_pool: ConnectionPool | None = None


def get_pool() -> ConnectionPool:
    """Get or create the global connection pool; connections open on first use."""
    global _pool
    if _pool is None:
        settings = get_settings()
        _pool = ConnectionPool(
            db_path=settings.storage.db_path,
            pool_size=settings.storage.pool_size,
            busy_timeout=settings.storage.busy_timeout,
        )
    return _pool


async def close_pool() -> None:
    """Close the global connection pool."""
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None
