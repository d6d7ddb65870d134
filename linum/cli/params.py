# linum/cli/params.py
# CLI argument & option definitions

from __future__ import annotations

from typing import Any

import typer


def FileArg() -> Any:
    # existence is checked by the reader so missing files get a linum error, not a usage error
    return typer.Argument(
        ...,
        help="Path to the text file to number",
        metavar="FILEPATH",
        show_default=False,
    )


def ReverseOpt() -> Any:
    return typer.Option(
        False,
        "--reverse",
        "-r",
        help="Print the numbered lines in reverse order",
    )


def SkipEmptyOpt() -> Any:
    return typer.Option(
        False,
        "--skip-empty",
        "-s",
        help="Leave empty lines unnumbered & don't count them",
    )


def LeftAlignOpt() -> Any:
    return typer.Option(
        False,
        "--left-align",
        "-l",
        help="Left-align numbers in their column (pad on the right)",
    )


def VerboseOpt() -> Any:
    return typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging on stderr"
    )


def LogFileOpt() -> Any:
    return typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    )
