# linum/linum_io/documents.py
# Read an input file into raw lines w/ explicit errors for missing files & undecodable lines

from __future__ import annotations

from pathlib import Path

from ..core.exceptions import FileReadError, LineDecodeError
from ..core.verbose import vlog_file_read


# * Read a text file & return its lines w/o terminators
def read_lines(path: Path, encoding: str = "utf-8") -> list[str]:
    """Read ``path`` fully and split it into lines.

    Lines end at ``\\n``, and a ``\\r`` right before it is dropped as well.
    A final terminator does not start an extra empty line, so an empty file
    yields no lines. An unterminated last line is kept as-is, ``\\r`` and
    all. Each line is decoded separately so a bad byte sequence is reported
    with its 1-based line number.

    Raises:
        FileReadError: the path is missing, a directory, or unreadable.
        LineDecodeError: a line is not valid in ``encoding``.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        raise FileReadError(f"File not found: {path}", path)
    except IsADirectoryError:
        raise FileReadError(f"Is a directory: {path}", path)
    except PermissionError:
        raise FileReadError(f"Permission denied: {path}", path)
    except OSError as e:
        raise FileReadError(f"Cannot read {path}: {e.strerror or e}", path) from e

    vlog_file_read(path, len(data))

    terminated = data.split(b"\n")
    # the piece after the last \n has no terminator of its own
    tail = terminated.pop()
    raw_lines = [raw[:-1] if raw.endswith(b"\r") else raw for raw in terminated]
    if tail:
        raw_lines.append(tail)

    lines: list[str] = []
    for line_number, raw in enumerate(raw_lines, start=1):
        try:
            lines.append(raw.decode(encoding))
        except UnicodeDecodeError as e:
            raise LineDecodeError(
                f"Cannot decode line {line_number} of {path} as {encoding}: {e.reason}",
                path,
                line_number,
            ) from e

    return lines
