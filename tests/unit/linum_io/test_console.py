# tests/unit/linum_io/test_console.py
# Unit tests for the stderr console proxy

from rich.console import Console

from linum.linum_io import console as console_module
from linum.linum_io.console import configure_console, console, reset_console


# * Proxy forwards attributes to a stderr Console
def test_console_is_stderr():
    reset_console()
    assert console._get_console().stderr is True


# * configure_console swaps the underlying console while keeping stderr
def test_configure_console_record():
    configured = configure_console(width=40, record=True)
    try:
        assert isinstance(configured, Console)
        assert configured.width == 40
        assert configured.stderr is True

        console.print("hello")
        assert "hello" in configured.export_text()
    finally:
        reset_console()


# * Module exports the documented names
def test_exports():
    assert set(console_module.__all__) == {
        "console",
        "configure_console",
        "reset_console",
    }
