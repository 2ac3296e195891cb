"""Tests for RenderInvoicePdfUseCase."""

from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from invoicekit.application.use_cases import RenderedInvoice, RenderInvoicePdfUseCase
from invoicekit.core.entities import ClientInfo, InvoiceData
from invoicekit.core.exceptions import InvoiceNotFoundError, TemplateLoadError, ValidationError
from invoicekit.core.services import DualPathInvoiceStore
from invoicekit.infrastructure.pdf import TemplateInvoiceRenderer

PDF = b"%PDF-1.7 rendered"


@pytest.fixture
def mock_renderer() -> MagicMock:
    """Create mock template renderer."""
    renderer = MagicMock(spec=TemplateInvoiceRenderer)
    renderer.render.return_value = PDF
    renderer.render_debug_grid.return_value = PDF
    return renderer


@pytest.fixture
def mock_store(sample_invoice) -> AsyncMock:
    """Create mock dual-path store holding invoice A1."""
    store = AsyncMock(spec=DualPathInvoiceStore)
    store.get_by_id.return_value = sample_invoice
    store.get_default_date.return_value = "03-04-2025"
    return store


@pytest.fixture
def template_path(tmp_path: Path, template_bytes: bytes) -> Path:
    path = tmp_path / "template.pdf"
    path.write_bytes(template_bytes)
    return path


@pytest.fixture
def use_case(mock_store, mock_renderer, template_path) -> RenderInvoicePdfUseCase:
    return RenderInvoicePdfUseCase(
        store=mock_store,
        renderer=mock_renderer,
        template_candidates=[template_path],
    )


class TestExecute:
    """Tests for rendering a stored invoice."""

    async def test_renders_stored_invoice(
        self, use_case, mock_store, mock_renderer, template_bytes, sample_invoice
    ):
        result = await use_case.execute("A1")

        assert isinstance(result, RenderedInvoice)
        assert result.filename == "invoice-1001.pdf"
        assert result.pdf_bytes == PDF
        assert result.file_size == len(PDF)
        mock_store.get_by_id.assert_awaited_once_with("A1")
        mock_renderer.render.assert_called_once_with(template_bytes, sample_invoice)

    async def test_unknown_invoice_raises_not_found(self, use_case, mock_store, mock_renderer):
        mock_store.get_by_id.return_value = None

        with pytest.raises(InvoiceNotFoundError):
            await use_case.execute("missing")
        mock_renderer.render.assert_not_called()

    async def test_missing_date_uses_server_default(
        self, use_case, mock_store, mock_renderer, sample_invoice
    ):
        mock_store.get_by_id.return_value = sample_invoice.model_copy(update={"date": None})

        await use_case.execute("A1")

        rendered = mock_renderer.render.call_args[0][1]
        assert rendered.date == "03-04-2025"

    async def test_missing_date_without_default_uses_today(
        self, use_case, mock_store, mock_renderer, sample_invoice
    ):
        mock_store.get_by_id.return_value = sample_invoice.model_copy(update={"date": None})
        mock_store.get_default_date.return_value = None

        await use_case.execute("A1")

        rendered = mock_renderer.render.call_args[0][1]
        assert rendered.date == date.today().strftime("%m-%d-%Y")

    async def test_stored_date_is_kept(self, use_case, mock_store, mock_renderer):
        await use_case.execute("A1")

        mock_store.get_default_date.assert_not_awaited()
        assert mock_renderer.render.call_args[0][1].date == "01-15-2024"


class TestExecuteData:
    """Tests for rendering a supplied payload."""

    def test_missing_fields_rejected_before_rendering(self, use_case, mock_renderer):
        with pytest.raises(ValidationError) as exc_info:
            use_case.execute_data(InvoiceData(client=ClientInfo(name="Acme")))

        assert exc_info.value.fields == ["invoiceNumber"]
        mock_renderer.render.assert_not_called()

    def test_filename_strips_path_characters(self, use_case):
        data = InvoiceData(invoice_number='10/01:"x"', client=ClientInfo(name="Acme"))
        assert use_case.execute_data(data).filename == "invoice-1001x.pdf"

    def test_missing_template_raises_load_error(self, mock_renderer, tmp_path):
        use_case = RenderInvoicePdfUseCase(
            renderer=mock_renderer,
            template_candidates=[tmp_path / "nope.pdf", tmp_path / "also-nope.pdf"],
        )
        data = InvoiceData(invoice_number="1", client=ClientInfo(name="Acme"))

        with pytest.raises(TemplateLoadError):
            use_case.execute_data(data)

    def test_falls_through_to_next_candidate(self, mock_renderer, tmp_path, template_path):
        use_case = RenderInvoicePdfUseCase(
            renderer=mock_renderer,
            template_candidates=[tmp_path / "nope.pdf", template_path],
        )
        data = InvoiceData(invoice_number="1", client=ClientInfo(name="Acme"))

        assert use_case.execute_data(data).pdf_bytes == PDF

    def test_uses_settings_template_location(self, mock_renderer, template_file):
        use_case = RenderInvoicePdfUseCase(renderer=mock_renderer)
        data = InvoiceData(invoice_number="1", client=ClientInfo(name="Acme"))

        use_case.execute_data(data)

        assert mock_renderer.render.call_args[0][0] == template_file.read_bytes()


class TestDebugGrid:
    """Tests for the calibration page."""

    def test_debug_grid(self, use_case, mock_renderer, template_bytes):
        result = use_case.debug_grid()

        assert result.filename == "debug-grid.pdf"
        mock_renderer.render_debug_grid.assert_called_once_with(template_bytes)


class TestWrite:
    """Tests for writing rendered output."""

    def test_write_creates_file(self, use_case, tmp_path):
        result = RenderedInvoice(filename="invoice-1.pdf", pdf_bytes=PDF)

        path = use_case.write(result, tmp_path / "out")

        assert path == tmp_path / "out" / "invoice-1.pdf"
        assert path.read_bytes() == PDF
