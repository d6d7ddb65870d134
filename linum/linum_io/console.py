# linum/linum_io/console.py
# Centralized diagnostic console for the entire linum application

# Diagnostics, warnings & errors all go through this single Console, bound to stderr
# so that stdout carries nothing but the numbered lines.
#
# Usage patterns:
# - Diagnostics & errors: `console.print(...)` (Rich markup allowed)
# - Numbered output: `typer.echo(...)`, never this console (file text may contain markup)
# - Tests: use configure_console()/reset_console() for isolation

from __future__ import annotations
from typing import Optional, Any
from rich.console import Console


# proxy delegating to underlying Console instance; allows reconfiguring/resetting console w/out breaking module-level references
class _ConsoleProxy:
    __slots__ = ("_console",)

    def __init__(self) -> None:
        self._console = Console(stderr=True)

    def __getattr__(self, name: str) -> Any:
        return getattr(self._console, name)

    def _set_console(self, new_console: Console) -> None:
        self._console = new_console

    def _get_console(self) -> Console:
        return self._console


# single proxy instance used by all modules
console = _ConsoleProxy()


# * Configure console w/ specific settings (useful for tests & CLI modes)
def configure_console(
    width: Optional[int] = None,
    force_terminal: Optional[bool] = None,
    record: bool = False,
) -> Console:
    kwargs: dict[str, Any] = {"stderr": True}
    if width is not None:
        kwargs["width"] = width
    if force_terminal is not None:
        kwargs["force_terminal"] = force_terminal
    if record:
        kwargs["record"] = True

    console._set_console(Console(**kwargs))
    return console._get_console()


# * Reset console to default configuration (useful for tests)
def reset_console() -> Console:
    console._set_console(Console(stderr=True))
    return console._get_console()


__all__ = [
    "console",
    "configure_console",
    "reset_console",
]
