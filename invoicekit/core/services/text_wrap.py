"""
Greedy word wrapping against measured font widths.
"""

from invoicekit.core.interfaces.layout import ITextMetrics


def wrap_text(text: str, metrics: ITextMetrics, size: float, max_width: float) -> list[str]:
    """
    Wrap ``text`` into lines no wider than ``max_width``.

    Explicit line breaks start a new paragraph and a blank paragraph yields
    an empty line. Words are packed greedily; a word wider than the column on
    its own is hard-broken into fragments that each fit.
    """
    lines: list[str] = []
    for paragraph in text.replace("\r", "").split("\n"):
        words = paragraph.split()
        if not words:
            lines.append("")
            continue

        line = ""
        for word in words:
            candidate = f"{line} {word}" if line else word
            if metrics.width_of(candidate, size) <= max_width:
                line = candidate
                continue

            if line:
                lines.append(line)
            if metrics.width_of(word, size) > max_width:
                lines.extend(break_long_word(word, metrics, size, max_width))
                line = ""
            else:
                line = word
        if line:
            lines.append(line)
    return lines


def break_long_word(word: str, metrics: ITextMetrics, size: float, max_width: float) -> list[str]:
    """Split ``word`` character by character into fragments that fit ``max_width``."""
    parts: list[str] = []
    part = ""
    for char in word:
        candidate = part + char
        if metrics.width_of(candidate, size) <= max_width:
            part = candidate
        else:
            # A single glyph wider than the column still gets its own fragment.
            if part:
                parts.append(part)
            part = char
    if part:
        parts.append(part)
    return parts
