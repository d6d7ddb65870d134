# linum/linum_io/__init__.py
# Package initialization & exports for linum I/O operations

from .documents import read_lines
from .generics import read_json_safe

__all__ = [
    "read_lines",
    "read_json_safe",
]
