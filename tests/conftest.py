# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory w/o a config file
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()
    (fake_home / ".linum").mkdir()

    monkeypatch.setattr(Path, "home", lambda: fake_home)
    monkeypatch.delenv("LINUM_CONFIG", raising=False)

    # ! reset global settings_manager state so each test reads its own config
    from linum.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = None

    # ! reset output manager to NullOutputManager for test isolation
    from linum.core.output import reset_output_manager

    reset_output_manager()

    yield fake_home

    reset_output_manager()


@pytest.fixture
def write_config(isolate_config):
    # Write ~/.linum/config.json in the isolated home & drop cached settings
    def _write(data):
        config_file = isolate_config / ".linum" / "config.json"
        if isinstance(data, str):
            config_file.write_text(data, encoding="utf-8")
        else:
            config_file.write_text(json.dumps(data), encoding="utf-8")

        from linum.config.settings import settings_manager

        settings_manager._settings = None
        return config_file

    return _write


@pytest.fixture
def make_text_file(tmp_path):
    # Create a text file from a list of lines (newline-terminated)
    def _make(lines, name="input.txt", trailing_newline=True):
        path = tmp_path / name
        text = "\n".join(lines)
        if trailing_newline and lines:
            text += "\n"
        path.write_bytes(text.encode("utf-8"))
        return path

    return _make


@pytest.fixture
def sample_lines():
    # Lines w/ blanks in the middle & at the end
    return [
        "first line",
        "",
        "third line",
        "   ",
        "",
        "sixth",
    ]
