"""
JSON file persistence behind the remote invoice API.

Records are stored as the raw dictionaries the clients sent. Writes go to a
temporary file that replaces the target, and all access is serialized by one
lock per store.
"""

import asyncio
import json
import os
import tempfile
from datetime import date
from pathlib import Path
from typing import Any

from invoicekit.config import get_logger

logger = get_logger(__name__)


def _today_us() -> str:
    return date.today().strftime("%m-%d-%Y")


class JsonInvoiceFileStore:
    """Invoice collection and default date kept in two JSON files."""

    def __init__(self, invoices_path: Path, date_path: Path):
        self.invoices_path = Path(invoices_path)
        self.date_path = Path(date_path)
        self._lock = asyncio.Lock()

    # ------------------------------------------------------------------
    # File helpers (run in a worker thread)
    # ------------------------------------------------------------------

    def _ensure_files(self) -> None:
        self.invoices_path.parent.mkdir(parents=True, exist_ok=True)
        if not self.invoices_path.exists():
            self._write_json(self.invoices_path, [])
        if not self.date_path.exists():
            self._write_json(self.date_path, {"date": _today_us()})

    @staticmethod
    def _write_json(path: Path, data: Any) -> None:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2)
            os.replace(tmp_name, path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _read_invoices(self) -> list[dict[str, Any]]:
        self._ensure_files()
        raw = self.invoices_path.read_text(encoding="utf-8")
        return json.loads(raw or "[]")

    def _read_date(self) -> str:
        self._ensure_files()
        raw = self.date_path.read_text(encoding="utf-8")
        data = json.loads(raw or "{}")
        return data.get("date") or _today_us()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def list_invoices(self) -> list[dict[str, Any]]:
        async with self._lock:
            return await asyncio.to_thread(self._read_invoices)

    async def upsert(self, record: dict[str, Any]) -> None:
        """Replace the invoice with the same id, or append it."""

        def _upsert() -> None:
            invoices = self._read_invoices()
            for index, existing in enumerate(invoices):
                if isinstance(existing, dict) and existing.get("id") == record["id"]:
                    invoices[index] = record
                    break
            else:
                invoices.append(record)
            self._write_json(self.invoices_path, invoices)

        async with self._lock:
            await asyncio.to_thread(_upsert)
        logger.info("server_invoice_saved", invoice_id=record["id"])

    async def delete_many(self, invoice_ids: list[str]) -> None:
        wanted = set(invoice_ids)

        def _delete() -> None:
            invoices = self._read_invoices()
            kept = [
                inv for inv in invoices if not (isinstance(inv, dict) and inv.get("id") in wanted)
            ]
            self._write_json(self.invoices_path, kept)

        async with self._lock:
            await asyncio.to_thread(_delete)
        logger.info("server_invoices_deleted", count=len(wanted))

    async def delete(self, invoice_id: str) -> None:
        await self.delete_many([invoice_id])

    async def replace_all(self, records: list[dict[str, Any]]) -> None:
        def _replace() -> None:
            self._ensure_files()
            self._write_json(self.invoices_path, records)

        async with self._lock:
            await asyncio.to_thread(_replace)
        logger.info("server_invoices_imported", count=len(records))

    async def get_date(self) -> str:
        """Stored default date, or today as MM-DD-YYYY."""
        async with self._lock:
            return await asyncio.to_thread(self._read_date)
