"""
Template-based invoice renderer.

Loads the one-page invoice template, fills the fields through the layout
engine and returns the new PDF bytes. The template document is opened fresh
for every render and never shared.
"""

from datetime import date
from pathlib import Path

import fitz  # PyMuPDF

from invoicekit.config import get_logger
from invoicekit.core.entities.invoice import ClientInfo, InvoiceData
from invoicekit.core.entities.layout import DEFAULT_LAYOUT, LayoutGeometry
from invoicekit.core.exceptions import TemplateLoadError
from invoicekit.core.services.invoice_layout import InvoiceLayoutEngine
from invoicekit.infrastructure.pdf.pymupdf_page import FitzPage, FitzTextMetrics

_logger = get_logger(__name__)


def load_template_bytes(candidates: list[Path]) -> tuple[bytes, Path]:
    """Read the first readable template among ``candidates``."""
    for path in candidates:
        try:
            return Path(path).read_bytes(), Path(path)
        except OSError:
            _logger.debug("template_candidate_unreadable", path=str(path))
    raise TemplateLoadError(
        "Template PDF not found. Set PDF_TEMPLATE_PATH or place the file in the data directory.",
        path=", ".join(str(p) for p in candidates),
    )


def open_template(template_bytes: bytes) -> fitz.Document:
    """Parse template bytes, refusing anything without at least one page."""
    if not template_bytes:
        raise TemplateLoadError("template is empty")
    try:
        doc = fitz.open(stream=template_bytes, filetype="pdf")
    # FileDataError, RuntimeError or a raw MuPDF error depending on the release
    except Exception as e:
        raise TemplateLoadError(str(e)) from e
    if doc.page_count == 0:
        doc.close()
        raise TemplateLoadError("template has no pages")
    return doc


def debug_placeholder_data() -> InvoiceData:
    """Placeholder values drawn on the calibration page."""
    return InvoiceData(
        invoice_number="DEBUG",
        client=ClientInfo(name="Client Name", contact="", address="", email="", phone=""),
        summary="Summary",
        description="Description",
        date=date.today().isoformat(),
    )


class TemplateInvoiceRenderer:
    """Fills the invoice template's first page."""

    def __init__(self, geometry: LayoutGeometry = DEFAULT_LAYOUT):
        self._engine = InvoiceLayoutEngine(geometry)
        self._metrics = FitzTextMetrics()

    @property
    def engine(self) -> InvoiceLayoutEngine:
        return self._engine

    def render(
        self,
        template_bytes: bytes,
        data: InvoiceData,
        draw_grid: bool = False,
    ) -> bytes:
        """Render ``data`` onto the template and return the PDF bytes."""
        doc = open_template(template_bytes)
        try:
            page = FitzPage(doc[0])
            plan = self._engine.draw(page, data, self._metrics, draw_grid=draw_grid)
            pdf_bytes = doc.tobytes()
        finally:
            doc.close()

        _logger.info(
            "invoice_rendered",
            invoice_number=data.invoice_number,
            text_runs=len(plan.runs),
            grid=draw_grid,
            size=len(pdf_bytes),
        )
        return pdf_bytes

    def render_debug_grid(self, template_bytes: bytes) -> bytes:
        """Render placeholder fields over a labeled coordinate grid."""
        return self.render(template_bytes, debug_placeholder_data(), draw_grid=True)
