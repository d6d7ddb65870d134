# linum/core/types.py
# Core type definitions used throughout linum

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# * One source line paired w/ the ordinal it displays (None when left blank)
@dataclass(frozen=True)
class NumberedLine:
    ordinal: Optional[int]
    text: str

    @property
    def is_numbered(self) -> bool:
        return self.ordinal is not None


# Numbered lines for one file, in source order
NumberedDocument = list[NumberedLine]
