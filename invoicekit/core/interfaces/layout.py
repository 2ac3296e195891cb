"""
Capabilities the layout engine needs from a PDF backend.

Keeping measurement and drawing behind these ports lets the wrapping and
placement logic run without any PDF library.
"""

from abc import ABC, abstractmethod

from invoicekit.core.entities.layout import RGB, FontWeight


class ITextMetrics(ABC):
    """Measures rendered text width for one font."""

    @abstractmethod
    def width_of(self, text: str, size: float) -> float:
        """Width of ``text`` in points at font ``size``."""
        pass


class IDrawablePage(ABC):
    """A page that accepts text and lines in bottom-left page coordinates."""

    @property
    @abstractmethod
    def width(self) -> float:
        pass

    @property
    @abstractmethod
    def height(self) -> float:
        pass

    @abstractmethod
    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        size: float,
        weight: FontWeight,
        color: RGB,
    ) -> None:
        """Draw ``text`` with its baseline starting at (x, y)."""
        pass

    @abstractmethod
    def draw_line(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        thickness: float,
        color: RGB,
    ) -> None:
        """Draw a straight line."""
        pass
