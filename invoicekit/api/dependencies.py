"""
Dependency injection for FastAPI.

Route handlers receive the per-app instances created in ``create_app`` and
kept on ``app.state``.
"""

from typing import Annotated

from fastapi import Depends, Request

from invoicekit.application.use_cases import RenderInvoicePdfUseCase
from invoicekit.infrastructure.storage.json_file import JsonInvoiceFileStore


def get_file_store(request: Request) -> JsonInvoiceFileStore:
    """Server-side invoice file store."""
    return request.app.state.file_store


def get_render_use_case(request: Request) -> RenderInvoicePdfUseCase:
    """Render use case bound to the app's renderer and template location."""
    return request.app.state.render_use_case


FileStoreDep = Annotated[JsonInvoiceFileStore, Depends(get_file_store)]
RenderUseCaseDep = Annotated[RenderInvoicePdfUseCase, Depends(get_render_use_case)]
