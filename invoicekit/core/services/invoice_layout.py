"""
Invoice layout engine.

Computes absolute text placements for an invoice on the fixed template page
and draws them onto an injected page. Measurement and drawing are supplied
through ITextMetrics and IDrawablePage, so the whole layout can be planned
and inspected without a PDF library.
"""

from invoicekit.config import get_logger
from invoicekit.core.entities.invoice import InvoiceData
from invoicekit.core.entities.layout import (
    DEFAULT_LAYOUT,
    GRID_LABEL_COLOR,
    GRID_LINE_COLOR,
    FontWeight,
    GridLine,
    LayoutGeometry,
    PagePlan,
    TextRun,
)
from invoicekit.core.exceptions import ValidationError
from invoicekit.core.interfaces.layout import IDrawablePage, ITextMetrics
from invoicekit.core.services.text_wrap import wrap_text

logger = get_logger(__name__)


def validate_for_render(data: InvoiceData) -> None:
    """Reject data missing the fields every rendered invoice needs."""
    missing = data.missing_required()
    if missing:
        raise ValidationError(missing)


class InvoiceLayoutEngine:
    """Places invoice fields onto the template according to a LayoutGeometry."""

    def __init__(self, geometry: LayoutGeometry = DEFAULT_LAYOUT):
        self.geometry = geometry

    # ------------------------------------------------------------------
    # Planning
    # ------------------------------------------------------------------

    def plan(
        self,
        data: InvoiceData,
        metrics: ITextMetrics,
        page_size: tuple[float, float] | None = None,
        draw_grid: bool = False,
    ) -> PagePlan:
        """Build the full page plan; the grid needs ``page_size``."""
        plan = PagePlan()
        if draw_grid:
            if page_size is None:
                raise ValueError("page_size is required for the calibration grid")
            plan.grid_lines, plan.grid_labels = self.plan_calibration_grid(*page_size)

        runs: list[TextRun] = []
        runs += self._header_runs(data)
        runs += self._client_runs(data)
        runs += self._summary_runs(data)
        runs += self._description_runs(data, metrics)
        # Empty fields and blank description lines draw nothing.
        plan.runs = [run for run in runs if run.text]
        return plan

    def _header_runs(self, data: InvoiceData) -> list[TextRun]:
        g = self.geometry
        anchor = g.invoice_number
        runs = [_run(data.invoice_number, anchor.x, anchor.y, g.font_size, FontWeight.BOLD)]
        if data.date:
            runs.append(_run(data.date, g.date.x, g.date.y, g.font_size))
        return runs

    def _client_runs(self, data: InvoiceData) -> list[TextRun]:
        g = self.geometry
        client = data.client
        x = g.client_name.x
        pitch = g.client_line_pitch

        runs = [_run(client.name, x, g.client_name.y, g.font_size, FontWeight.BOLD)]
        y = g.client_name.y - g.name_gap

        if client.contact:
            runs.append(_run(f"Attn: {client.contact}", x, y, g.small_size))
            y -= pitch

        address_lines = client.address_lines
        # Without an Attn line the address block starts at its own anchor.
        if not client.contact and address_lines:
            y = g.client_address.y
        for line in address_lines:
            runs.append(_run(line, x, y, g.small_size))
            y -= pitch

        if client.email:
            runs.append(_run(client.email, x, y, g.small_size))
            y -= pitch
        if client.phone:
            runs.append(_run(client.phone, x, y, g.small_size))

        return runs

    def _summary_runs(self, data: InvoiceData) -> list[TextRun]:
        g = self.geometry
        return [_run(data.summary, g.summary.x, g.summary.y, g.font_size)]

    def _description_runs(self, data: InvoiceData, metrics: ITextMetrics) -> list[TextRun]:
        g = self.geometry
        box = g.description_box
        lines = wrap_text(data.description or "", metrics, g.font_size, box.width)

        runs = []
        y = box.y
        bottom = box.bottom
        for index, line in enumerate(lines):
            if bottom is not None and y < bottom:
                logger.debug("description_truncated", dropped_lines=len(lines) - index)
                break
            runs.append(_run(line, box.x, y, g.font_size))
            y -= box.line_height
        return runs

    def plan_calibration_grid(
        self, width: float, height: float
    ) -> tuple[list[GridLine], list[TextRun]]:
        """Labeled reference lines every ``grid_step`` units across the page."""
        g = self.geometry
        step = g.grid_step
        lines: list[GridLine] = []
        labels: list[TextRun] = []

        x = 0
        while x <= width:
            lines.append(GridLine((x, 0), (x, height), g.grid_line_thickness, GRID_LINE_COLOR))
            labels.append(TextRun(str(x), x + 2, 4, g.grid_label_size, color=GRID_LABEL_COLOR))
            x += step

        y = 0
        while y <= height:
            lines.append(GridLine((0, y), (width, y), g.grid_line_thickness, GRID_LINE_COLOR))
            labels.append(TextRun(str(y), 2, y + 2, g.grid_label_size, color=GRID_LABEL_COLOR))
            y += step

        return lines, labels

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw(
        self,
        page: IDrawablePage,
        data: InvoiceData,
        metrics: ITextMetrics,
        draw_grid: bool = False,
    ) -> PagePlan:
        """Plan the page and draw it, grid first. Returns the plan that was drawn."""
        plan = self.plan(data, metrics, (page.width, page.height), draw_grid=draw_grid)

        for line in plan.grid_lines:
            page.draw_line(line.start, line.end, line.thickness, line.color)
        for run in [*plan.grid_labels, *plan.runs]:
            page.draw_text(run.text, run.x, run.y, run.size, run.weight, run.color)

        logger.debug("invoice_page_drawn", runs=len(plan.runs), grid=draw_grid)
        return plan


def _run(
    text: str | None,
    x: float,
    y: float,
    size: float,
    weight: FontWeight = FontWeight.REGULAR,
) -> TextRun:
    return TextRun(text or "", x, y, size, weight)
