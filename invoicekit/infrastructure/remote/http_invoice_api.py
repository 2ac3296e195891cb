"""
HTTP client for the remote invoice API.

Every transport error, non-2xx status, or unreadable body is raised as
RemoteUnavailable so the dual-path store can fall back uniformly.
"""

from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError as PydanticValidationError

from invoicekit.config import get_logger, get_settings
from invoicekit.core.entities.invoice import Invoice
from invoicekit.core.exceptions import RemoteUnavailable
from invoicekit.core.interfaces.storage import IRemoteInvoiceStore

logger = get_logger(__name__)


class HttpInvoiceApi(IRemoteInvoiceStore):
    """
    Remote invoice store over HTTP/JSON.

    A ``transport`` may be supplied to route requests in-process (tests, or an
    ASGI app mounted in the same process).
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.remote.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.remote.timeout
        self._transport = transport

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        payload: Any = None,
    ) -> dict[str, Any]:
        """Make one HTTP request and return the decoded JSON object."""
        url = f"{self.base_url}{path}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.request(method, url, json=payload)
        except httpx.HTTPError as e:
            raise RemoteUnavailable(operation, f"{type(e).__name__}: {e}") from e

        if not response.is_success:
            raise RemoteUnavailable(
                operation,
                f"HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteUnavailable(operation, f"invalid JSON body: {e}") from e
        if not isinstance(data, dict):
            raise RemoteUnavailable(operation, "response body is not a JSON object")

        logger.debug("remote_request_ok", operation=operation, method=method, path=path)
        return data

    async def fetch_all(self) -> list[Invoice]:
        data = await self._request("fetch_all", "GET", "/invoices")
        records = data.get("invoices")
        if not isinstance(records, list):
            raise RemoteUnavailable("fetch_all", "response has no 'invoices' list")
        try:
            return [Invoice.from_record(record) for record in records]
        except PydanticValidationError as e:
            raise RemoteUnavailable("fetch_all", f"invalid invoice record: {e}") from e

    async def save(self, invoice: Invoice) -> None:
        await self._request("save", "POST", "/invoices", invoice.to_record())

    async def delete(self, invoice_id: str) -> None:
        await self._request("delete", "DELETE", f"/invoices/{quote(invoice_id, safe='')}")

    async def bulk_delete(self, invoice_ids: list[str]) -> None:
        await self._request("bulk_delete", "POST", "/invoices/bulk-delete", {"ids": invoice_ids})

    async def import_all(self, invoices: list[Invoice]) -> None:
        await self._request(
            "import_all",
            "POST",
            "/invoices/import",
            {"invoices": [invoice.to_record() for invoice in invoices]},
        )

    async def fetch_default_date(self) -> str | None:
        data = await self._request("fetch_default_date", "GET", "/date")
        value = data.get("date")
        return value if isinstance(value, str) and value else None
