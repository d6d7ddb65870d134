# linum/cli/app.py
# Root Typer application: number the lines of one file & print them

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables once at startup (LINUM_CONFIG may live in .env)
load_dotenv()

from .. import __version__
from ..config.settings import get_settings, settings_manager
from ..core.pipeline import number_lines
from ..core.verbose import VerboseSession, vlog_config
from ..linum_io import read_lines
from .decorators import handle_linum_error
from .logic import ArgResolver
from .params import (
    FileArg,
    ReverseOpt,
    SkipEmptyOpt,
    LeftAlignOpt,
    VerboseOpt,
    LogFileOpt,
)


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"linum {__version__}")
        raise typer.Exit()


# * Number the lines of a file, like nl / cat -n
@app.command(help="Number the lines of [bold]FILEPATH[/] & print them to stdout.")
@handle_linum_error
def number(
    ctx: typer.Context,
    filepath: Path = FileArg(),
    reverse: bool = ReverseOpt(),
    skip_empty: bool = SkipEmptyOpt(),
    left_align: bool = LeftAlignOpt(),
    verbose: bool = VerboseOpt(),
    log_file: Optional[Path] = LogFileOpt(),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version & exit.",
    ),
) -> None:
    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()
    settings = get_settings(ctx)

    # log_file implies verbose mode
    with VerboseSession(
        enabled=verbose or log_file is not None,
        log_file=log_file,
        dev_mode=settings.dev_mode,
    ):
        for key, value in asdict(settings).items():
            vlog_config(key, value)

        options = ArgResolver(settings).resolve_options(
            skip_empty=skip_empty, left_align=left_align, reverse=reverse
        )
        lines = read_lines(filepath, encoding=settings.encoding)
        rendered = number_lines(lines, options)

    # whole document is rendered before anything is printed
    for line in rendered:
        typer.echo(line)
