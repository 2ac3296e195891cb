"""PDF generation infrastructure."""

from invoicekit.infrastructure.pdf.pymupdf_page import FitzPage, FitzTextMetrics
from invoicekit.infrastructure.pdf.template_renderer import (
    TemplateInvoiceRenderer,
    debug_placeholder_data,
    load_template_bytes,
    open_template,
)

__all__ = [
    "FitzPage",
    "FitzTextMetrics",
    "TemplateInvoiceRenderer",
    "debug_placeholder_data",
    "load_template_bytes",
    "open_template",
]
