from dataclasses import dataclass
from typing import Dict, List, Tuple

from wcwidth import wcwidth


def display_width(text: str) -> int:
    """Printable width of text, honouring wide characters."""
    width = 0
    for ch in (text or "").expandtabs(4):
        w = wcwidth(ch)
        if w is None:
            w = 0
        width += max(0, w)
    return width


def trim_display(text: str, width: int) -> str:
    text = (text or "").expandtabs(4)
    acc = []
    used = 0
    for ch in text:
        w = wcwidth(ch) or 0
        if w < 0:
            w = 0
        if used + w > width:
            break
        acc.append(ch)
        used += w
    return "".join(acc)


def pad_display(text: str, width: int) -> str:
    """Trim and right-pad text to exactly `width` visible cells."""
    trimmed = trim_display(text, width)
    used = display_width(trimmed)
    if used < width:
        trimmed += " " * (width - used)
    return trimmed


@dataclass
class ColumnLayout:
    """Percentage-based table layout.

    `columns` is a list of (name, percent) pairs. Percentages need not sum to
    100; the unclaimed remainder is left as trailing space.
    """
    columns: List[Tuple[str, int]]
    min_width: int = 3
    spacing: int = 1

    def calculate_widths(self, term_width: int) -> Dict[str, int]:
        separators = self.spacing * max(0, len(self.columns) - 1)
        usable = max(self.min_width * len(self.columns), term_width - separators)
        return {name: max(self.min_width, (usable * percent) // 100) for name, percent in self.columns}


__all__ = ["ColumnLayout", "display_width", "trim_display", "pad_display"]
