"""
Render Invoice PDF Use Case.

Fills the invoice template for a stored invoice, a supplied payload, or the
calibration page.
"""

import re
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from invoicekit.config import get_logger, get_settings
from invoicekit.core.entities.invoice import InvoiceData
from invoicekit.core.exceptions import InvoiceNotFoundError
from invoicekit.core.services import DualPathInvoiceStore, validate_for_render
from invoicekit.infrastructure.pdf import TemplateInvoiceRenderer, load_template_bytes

logger = get_logger(__name__)

DEBUG_GRID_FILENAME = "debug-grid.pdf"


def _safe_filename(name: str) -> str:
    # strip characters not allowed on Windows/mac paths
    return re.sub(r'[\\/*?:"<>|]', "", (name or "")).strip() or "invoice"


def _today_us() -> str:
    return date.today().strftime("%m-%d-%Y")


@dataclass
class RenderedInvoice:
    """A rendered PDF and the filename it is offered under."""

    filename: str
    pdf_bytes: bytes

    @property
    def file_size(self) -> int:
        return len(self.pdf_bytes)


class RenderInvoicePdfUseCase:
    """
    Use case for rendering invoice PDFs.

    Flow:
    1. Resolve the invoice data (store lookup or caller payload)
    2. Validate required fields
    3. Load the template
    4. Render via TemplateInvoiceRenderer
    """

    def __init__(
        self,
        store: DualPathInvoiceStore | None = None,
        renderer: TemplateInvoiceRenderer | None = None,
        template_candidates: list[Path] | None = None,
    ):
        self._store = store
        self._renderer = renderer
        self._template_candidates = template_candidates

    def _get_store(self) -> DualPathInvoiceStore:
        if self._store is None:
            from invoicekit.application.services import get_dual_path_store

            self._store = get_dual_path_store()
        return self._store

    def _get_renderer(self) -> TemplateInvoiceRenderer:
        if self._renderer is None:
            from invoicekit.application.services import get_renderer

            self._renderer = get_renderer()
        return self._renderer

    def _load_template(self) -> bytes:
        candidates = self._template_candidates or get_settings().template_candidates
        template_bytes, path = load_template_bytes(candidates)
        logger.debug("template_loaded", path=str(path), size=len(template_bytes))
        return template_bytes

    async def execute(self, invoice_id: str) -> RenderedInvoice:
        """
        Render a stored invoice.

        A missing date is filled from the server default, or today.
        """
        store = self._get_store()
        invoice = await store.get_by_id(invoice_id)
        if invoice is None:
            raise InvoiceNotFoundError(invoice_id)

        if not invoice.date:
            default_date = await store.get_default_date()
            invoice = invoice.model_copy(update={"date": default_date or _today_us()})

        return self.execute_data(invoice)

    def execute_data(self, data: InvoiceData) -> RenderedInvoice:
        """Render caller-supplied invoice data."""
        validate_for_render(data)
        template_bytes = self._load_template()
        pdf_bytes = self._get_renderer().render(template_bytes, data)

        result = RenderedInvoice(
            filename=f"invoice-{_safe_filename(data.invoice_number)}.pdf",
            pdf_bytes=pdf_bytes,
        )
        logger.info(
            "render_invoice_complete",
            invoice_number=data.invoice_number,
            file_size=result.file_size,
        )
        return result

    def debug_grid(self) -> RenderedInvoice:
        """Render placeholder data over the calibration grid."""
        template_bytes = self._load_template()
        pdf_bytes = self._get_renderer().render_debug_grid(template_bytes)
        return RenderedInvoice(filename=DEBUG_GRID_FILENAME, pdf_bytes=pdf_bytes)

    def write(self, result: RenderedInvoice, output_dir: Path | None = None) -> Path:
        """Write a rendered PDF under ``output_dir`` (default ``PDF_OUTPUT_DIR``)."""
        target_dir = Path(output_dir or get_settings().pdf.output_dir)
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / result.filename
        path.write_bytes(result.pdf_bytes)
        logger.info("rendered_pdf_written", path=str(path), file_size=result.file_size)
        return path
