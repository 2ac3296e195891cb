"""Pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest
from fpdf import FPDF

from invoicekit.application import reset_services
from invoicekit.config import Settings, get_settings, reset_settings
from invoicekit.core.entities import ClientInfo, Invoice
from invoicekit.core.interfaces import ITextMetrics


class MonoMetrics(ITextMetrics):
    """Every glyph is half the font size wide."""

    def width_of(self, text: str, size: float) -> float:
        return len(text) * size * 0.5


@pytest.fixture(autouse=True)
def isolated_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Settings, None, None]:
    """Point all storage at a per-test data directory."""
    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("PDF_TEMPLATE_PATH", raising=False)
    reset_settings()
    reset_services()
    yield get_settings()
    reset_settings()
    reset_services()


@pytest.fixture
def mono_metrics() -> MonoMetrics:
    """Deterministic text metrics for layout tests."""
    return MonoMetrics()


@pytest.fixture
def sample_invoice() -> Invoice:
    """Invoice A1 / number 1001."""
    return Invoice(
        id="A1",
        invoice_number="1001",
        year=2024,
        client=ClientInfo(
            name="Acme Corp",
            contact="Jo Smith",
            address="1 Main St\nSpringfield",
            email="billing@acme.test",
            phone="555-0100",
        ),
        summary="Kitchen remodel",
        description="Demolition and haul-away",
        date="01-15-2024",
    )


@pytest.fixture
def template_bytes() -> bytes:
    """One letter-size page with a printed letterhead."""
    pdf = FPDF(unit="pt", format="letter")
    pdf.add_page()
    pdf.set_font("Helvetica", "B", 16)
    pdf.text(40, 50, "JONES & CO")
    return bytes(pdf.output())


@pytest.fixture
def template_file(isolated_settings: Settings, template_bytes: bytes) -> Path:
    """Template written to the default lookup location."""
    path = isolated_settings.storage.data_dir / isolated_settings.pdf.template_name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(template_bytes)
    return path
