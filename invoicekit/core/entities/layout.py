"""
Layout geometry and draw instructions for the invoice template.

All coordinates are PDF points with the origin at the bottom-left corner of
the template page. No scaling is applied for templates of another size.
"""

from dataclasses import dataclass, field
from enum import Enum

RGB = tuple[float, float, float]

BLACK: RGB = (0.0, 0.0, 0.0)
GRID_LINE_COLOR: RGB = (0.85, 0.85, 0.85)
GRID_LABEL_COLOR: RGB = (0.5, 0.5, 0.5)


class FontWeight(str, Enum):
    """Font variants embedded in the rendered page."""

    REGULAR = "regular"
    BOLD = "bold"


@dataclass(frozen=True)
class Anchor:
    """Fixed start point of a single-line field."""

    x: float
    y: float


@dataclass(frozen=True)
class TextBox:
    """Bounded column for wrapped text. ``height`` of None means unbounded."""

    x: float
    y: float
    width: float
    line_height: float
    height: float | None = None

    @property
    def bottom(self) -> float | None:
        if self.height is None:
            return None
        return self.y - self.height


@dataclass(frozen=True)
class LayoutGeometry:
    """Anchors and regions for every field on the template page."""

    invoice_number: Anchor = Anchor(460, 730)
    date: Anchor = Anchor(460, 710)
    client_name: Anchor = Anchor(70, 670)
    client_address: Anchor = Anchor(70, 650)
    summary: Anchor = Anchor(70, 610)
    description_box: TextBox = TextBox(x=40, y=480, width=520, line_height=16, height=160)

    font_size: float = 12
    small_size: float = 10
    grid_step: int = 50
    grid_label_size: float = 6
    grid_line_thickness: float = 0.5

    @property
    def name_gap(self) -> float:
        """Drop from the client name baseline to the first client detail line."""
        return self.font_size + 4

    @property
    def client_line_pitch(self) -> float:
        return self.small_size + 2


DEFAULT_LAYOUT = LayoutGeometry()


@dataclass(frozen=True)
class TextRun:
    """A single line of text at an absolute page position."""

    text: str
    x: float
    y: float
    size: float
    weight: FontWeight = FontWeight.REGULAR
    color: RGB = BLACK


@dataclass(frozen=True)
class GridLine:
    """A straight calibration line between two page points."""

    start: tuple[float, float]
    end: tuple[float, float]
    thickness: float
    color: RGB = GRID_LINE_COLOR


@dataclass
class PagePlan:
    """Everything drawn onto the page, in drawing order."""

    grid_lines: list[GridLine] = field(default_factory=list)
    grid_labels: list[TextRun] = field(default_factory=list)
    runs: list[TextRun] = field(default_factory=list)

    def texts(self) -> list[str]:
        return [run.text for run in self.runs]
