"""
PyMuPDF adapters for the layout engine's measurement and drawing ports.

PyMuPDF addresses pages from the top-left corner; the layout engine works in
PDF's native bottom-left space, so y values are flipped against the page
height here and nowhere else.
"""

import fitz  # PyMuPDF

from invoicekit.core.entities.layout import RGB, FontWeight
from invoicekit.core.interfaces.layout import IDrawablePage, ITextMetrics

# Base-14 font short names understood by PyMuPDF.
FONT_NAMES: dict[FontWeight, str] = {
    FontWeight.REGULAR: "helv",
    FontWeight.BOLD: "hebo",
}


class FitzTextMetrics(ITextMetrics):
    """Glyph-width measurement for one Base-14 font."""

    def __init__(self, weight: FontWeight = FontWeight.REGULAR):
        self.fontname = FONT_NAMES[weight]

    def width_of(self, text: str, size: float) -> float:
        return fitz.get_text_length(text, fontname=self.fontname, fontsize=size)


class FitzPage(IDrawablePage):
    """Drawable wrapper around a ``fitz.Page``."""

    def __init__(self, page: fitz.Page):
        self._page = page

    @property
    def width(self) -> float:
        return self._page.rect.width

    @property
    def height(self) -> float:
        return self._page.rect.height

    def _point(self, x: float, y: float) -> fitz.Point:
        return fitz.Point(x, self.height - y)

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        size: float,
        weight: FontWeight,
        color: RGB,
    ) -> None:
        if not text:
            return
        self._page.insert_text(
            self._point(x, y),
            text,
            fontsize=size,
            fontname=FONT_NAMES[weight],
            color=color,
        )

    def draw_line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        thickness: float,
        color: RGB,
    ) -> None:
        self._page.draw_line(
            self._point(*start),
            self._point(*end),
            color=color,
            width=thickness,
        )
