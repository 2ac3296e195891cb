"""
Invoice collection endpoints.

Records are stored exactly as the clients send them.
"""

from typing import Any

from fastapi import APIRouter, Body

from invoicekit.api.dependencies import FileStoreDep
from invoicekit.application.dto.responses import (
    DateResponse,
    ErrorResponse,
    InvoiceListResponse,
    OkResponse,
)
from invoicekit.core.exceptions import ValidationError

router = APIRouter(prefix="/api", tags=["invoices"])


@router.get("/invoices", response_model=InvoiceListResponse)
async def list_invoices(store: FileStoreDep) -> InvoiceListResponse:
    """List every stored invoice."""
    return InvoiceListResponse(invoices=await store.list_invoices())


@router.post(
    "/invoices",
    response_model=OkResponse,
    responses={400: {"model": ErrorResponse, "description": "Invoice id missing"}},
)
async def save_invoice(
    store: FileStoreDep,
    invoice: dict[str, Any] = Body(...),
) -> OkResponse:
    """Create or replace an invoice by id."""
    if not invoice.get("id"):
        raise ValidationError(["id"], "Invoice id is required")
    await store.upsert(invoice)
    return OkResponse()


@router.delete("/invoices/{invoice_id:path}", response_model=OkResponse)
async def delete_invoice(invoice_id: str, store: FileStoreDep) -> OkResponse:
    """Delete one invoice; unknown ids are ignored. Ids may contain encoded slashes."""
    await store.delete(invoice_id)
    return OkResponse()


@router.post(
    "/invoices/bulk-delete",
    response_model=OkResponse,
    responses={400: {"model": ErrorResponse, "description": "ids is not a list"}},
)
async def bulk_delete_invoices(
    store: FileStoreDep,
    payload: dict[str, Any] = Body(...),
) -> OkResponse:
    """Delete every invoice whose id is listed."""
    ids = payload.get("ids")
    if not isinstance(ids, list):
        raise ValidationError(["ids"], "ids must be a list")
    await store.delete_many([str(i) for i in ids])
    return OkResponse()


@router.post(
    "/invoices/import",
    response_model=OkResponse,
    responses={400: {"model": ErrorResponse, "description": "invoices is not a list"}},
)
async def import_invoices(
    store: FileStoreDep,
    payload: dict[str, Any] = Body(...),
) -> OkResponse:
    """Replace the whole collection."""
    invoices = payload.get("invoices")
    if not isinstance(invoices, list):
        raise ValidationError(["invoices"], "invoices must be a list")
    await store.replace_all(invoices)
    return OkResponse()


@router.get("/date", response_model=DateResponse)
async def get_default_date(store: FileStoreDep) -> DateResponse:
    """Default invoice date; today when none is stored."""
    return DateResponse(date=await store.get_date())
