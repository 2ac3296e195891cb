"""
PDF rendering endpoints.
"""

from typing import Any

from fastapi import APIRouter, Body
from fastapi.responses import Response
from pydantic import ValidationError as PydanticValidationError

from invoicekit.api.dependencies import RenderUseCaseDep
from invoicekit.application.dto.responses import ErrorResponse
from invoicekit.core.entities.invoice import InvoiceData
from invoicekit.core.exceptions import ValidationError

router = APIRouter(prefix="/api", tags=["pdf"])


def _pdf_response(content: bytes, filename: str, disposition: str) -> Response:
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'{disposition}; filename="{filename}"'},
    )


@router.post(
    "/invoice",
    responses={
        400: {"model": ErrorResponse, "description": "Missing required fields"},
        500: {"model": ErrorResponse, "description": "Template could not be loaded"},
    },
)
def render_invoice(
    use_case: RenderUseCaseDep,
    payload: dict[str, Any] = Body(...),
) -> Response:
    """
    Render an invoice onto the template.

    Returns the PDF as a download named ``invoice-<number>.pdf``.
    """
    try:
        data = InvoiceData.model_validate(payload)
    except PydanticValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ValidationError(fields, "Invalid invoice fields") from e

    result = use_case.execute_data(data)
    return _pdf_response(result.pdf_bytes, result.filename, "attachment")


@router.get(
    "/debug-grid",
    responses={500: {"model": ErrorResponse, "description": "Template could not be loaded"}},
)
def debug_grid(use_case: RenderUseCaseDep) -> Response:
    """Render the calibration grid inline."""
    result = use_case.debug_grid()
    return _pdf_response(result.pdf_bytes, result.filename, "inline")
