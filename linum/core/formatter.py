# linum/core/formatter.py
# Render numbered lines as "<number column> <text>" strings

from __future__ import annotations

from typing import Sequence

from .constants import PadMode
from .padding import pad
from .types import NumberedDocument, NumberedLine


# * Width of the number column: longest line of text (0 for no lines)
def column_width(texts: Sequence[str]) -> int:
    return max((len(text) for text in texts), default=0)


def _number_string(line: NumberedLine) -> str:
    return str(line.ordinal) if line.is_numbered else ""


# * Render each numbered line w/ its number padded to the column width
def render(
    mode: PadMode, doc: NumberedDocument, fit_numbers: bool = False
) -> list[str]:
    """Format a numbered document for display.

    The column width is taken from the longest *text* line, not from the
    numbers. A number wider than that column raises ``PaddingError`` unless
    ``fit_numbers`` widens the column to the longest number as well.
    """
    numbers = [_number_string(line) for line in doc]
    texts = [line.text for line in doc]

    width = column_width(texts)
    if fit_numbers:
        width = max(width, column_width(numbers))

    return [f"{pad(mode, width, number)} {text}" for number, text in zip(numbers, texts)]
