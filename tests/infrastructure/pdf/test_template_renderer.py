"""Tests for the PyMuPDF template renderer."""

import fitz
import pytest

from invoicekit.core.entities import FontWeight, Invoice
from invoicekit.core.entities.layout import BLACK
from invoicekit.core.exceptions import TemplateLoadError
from invoicekit.infrastructure.pdf import (
    FitzPage,
    FitzTextMetrics,
    TemplateInvoiceRenderer,
    load_template_bytes,
)


@pytest.fixture
def renderer() -> TemplateInvoiceRenderer:
    return TemplateInvoiceRenderer()


def _open(pdf_bytes: bytes) -> fitz.Document:
    return fitz.open(stream=pdf_bytes, filetype="pdf")


def _word(page: fitz.Page, text: str) -> tuple:
    """The first extracted word equal to ``text``: (x0, y0, x1, y1, ...)."""
    for word in page.get_text("words"):
        if word[4] == text:
            return word
    raise AssertionError(f"{text!r} not found on page")


class TestFitzTextMetrics:
    """Tests for Base-14 text measurement."""

    def test_empty_text_has_no_width(self):
        assert FitzTextMetrics().width_of("", 12) == 0

    def test_width_scales_with_size(self):
        metrics = FitzTextMetrics()
        assert metrics.width_of("Invoice", 24) == pytest.approx(2 * metrics.width_of("Invoice", 12))

    def test_bold_is_wider(self):
        regular = FitzTextMetrics(FontWeight.REGULAR).width_of("abc", 12)
        bold = FitzTextMetrics(FontWeight.BOLD).width_of("abc", 12)
        assert bold > regular


class TestFitzPage:
    """Tests for the drawable page adapter."""

    def test_text_uses_bottom_left_origin(self):
        doc = fitz.open()
        page = doc.new_page(width=612, height=792)

        FitzPage(page).draw_text("Hello", 100, 700, 12, FontWeight.REGULAR, BLACK)

        x0, y0, _, y1, *_ = _word(page, "Hello")
        assert x0 == pytest.approx(100, abs=1)
        # baseline at 792 - 700 = 92 from the top
        assert y0 < 92 < y1 + 1
        doc.close()

    def test_page_size(self):
        doc = fitz.open()
        page = FitzPage(doc.new_page(width=400, height=300))
        assert (page.width, page.height) == (400, 300)
        doc.close()


class TestRender:
    """End-to-end rendering onto a template."""

    def test_keeps_page_count_and_size(self, renderer, template_bytes, sample_invoice):
        doc = _open(renderer.render(template_bytes, sample_invoice))

        assert doc.page_count == 1
        assert (doc[0].rect.width, doc[0].rect.height) == (612, 792)
        doc.close()

    def test_keeps_template_content(self, renderer, template_bytes, sample_invoice):
        doc = _open(renderer.render(template_bytes, sample_invoice))
        assert "JONES & CO" in doc[0].get_text()
        doc.close()

    def test_text_at_configured_positions(self, renderer, template_bytes, sample_invoice):
        doc = _open(renderer.render(template_bytes, sample_invoice))
        page = doc[0]

        # (text, x, y) in bottom-left coordinates
        expected = [
            ("1001", 460, 730),
            ("01-15-2024", 460, 710),
            ("Acme", 70, 670),
            ("Kitchen", 70, 610),
            ("Demolition", 40, 480),
        ]
        for text, x, y in expected:
            x0, y0, _, y1, *_ = _word(page, text)
            baseline = 792 - y
            assert x0 == pytest.approx(x, abs=1), text
            assert y0 < baseline < y1 + 1, text
        doc.close()

    def test_blank_description_line_keeps_its_slot(self, renderer, template_bytes):
        invoice = Invoice.from_record(
            {
                "id": "A1",
                "invoiceNumber": "1001",
                "client": {"name": "Acme Co"},
                "summary": "Consulting",
                "description": "Line one\n\nLine two",
                "date": "2024-01-05",
            }
        )

        doc = _open(renderer.render(template_bytes, invoice))
        page = doc[0]

        assert doc.page_count == 1
        assert (page.rect.width, page.rect.height) == (612, 792)
        # line height 16: the empty middle line leaves 480 - 2 * 16
        for text, y in [("one", 480), ("two", 448)]:
            x0, y0, _, y1, *_ = _word(page, text)
            baseline = 792 - y
            assert x0 > 40, text
            assert y0 < baseline < y1 + 1, text
        starts = sorted(w[0] for w in page.get_text("words") if w[4] == "Line")
        assert starts == [pytest.approx(40, abs=1), pytest.approx(40, abs=1)]
        doc.close()

    def test_invoice_number_is_bold(self, renderer, template_bytes, sample_invoice):
        doc = _open(renderer.render(template_bytes, sample_invoice))

        fonts = {
            span["text"]: span["font"]
            for block in doc[0].get_text("dict")["blocks"]
            for line in block.get("lines", [])
            for span in line["spans"]
        }
        assert "Bold" in fonts["1001"]
        doc.close()

    def test_template_bytes_not_modified(self, renderer, template_bytes, sample_invoice):
        original = bytes(template_bytes)
        renderer.render(template_bytes, sample_invoice)
        assert template_bytes == original

    @pytest.mark.parametrize("bad", [b"", b"not a pdf at all"])
    def test_unreadable_template(self, renderer, sample_invoice, bad):
        with pytest.raises(TemplateLoadError):
            renderer.render(bad, sample_invoice)


class TestDebugGrid:
    """Tests for the calibration page."""

    def test_grid_and_placeholders(self, renderer, template_bytes):
        doc = _open(renderer.render_debug_grid(template_bytes))
        page = doc[0]
        text = page.get_text()

        assert "DEBUG" in text
        assert "Client Name" in text
        assert "Description" in text
        assert "250" in text
        assert sum(len(d["items"]) for d in page.get_drawings()) >= 13 + 16
        doc.close()


class TestLoadTemplateBytes:
    """Tests for template lookup."""

    def test_first_existing_candidate_wins(self, tmp_path, template_bytes):
        second = tmp_path / "second.pdf"
        second.write_bytes(template_bytes)

        data, path = load_template_bytes([tmp_path / "missing.pdf", second])

        assert data == template_bytes
        assert path == second

    def test_no_candidate_raises(self, tmp_path):
        with pytest.raises(TemplateLoadError) as exc_info:
            load_template_bytes([tmp_path / "missing.pdf"])
        assert exc_info.value.code == "TEMPLATE_LOAD_ERROR"
