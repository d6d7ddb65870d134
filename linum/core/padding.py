# linum/core/padding.py
# Fixed-width padding primitive for number columns

from __future__ import annotations

from .constants import PadMode
from .exceptions import PaddingError


# * Pad value w/ spaces to exactly width characters on the side(s) given by mode
def pad(mode: PadMode, width: int, value: str) -> str:
    """Return ``value`` padded with spaces to exactly ``width`` characters.

    Raises:
        PaddingError: ``value`` is longer than ``width`` (or ``width`` is negative).
    """
    diff = width - len(value)
    if diff < 0:
        raise PaddingError(
            f"'{value}' ({len(value)} chars) does not fit in a column of width {width}",
            value=value,
            width=width,
        )

    if mode is PadMode.PAD_LEFT:
        return " " * diff + value
    if mode is PadMode.PAD_RIGHT:
        return value + " " * diff
    if mode is PadMode.PAD_CENTER:
        # odd leftover space goes to the right
        left = diff // 2
        return " " * left + value + " " * (diff - left)
    raise ValueError(f"Unknown pad mode: {mode!r}")
