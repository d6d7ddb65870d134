# tests/integration/test_cli_errors.py
# Integration tests for CLI error conditions, exit codes & friendly error messages

import pytest
from typer.testing import CliRunner

from linum.cli.app import app
from linum.config.settings import LinumSettings


@pytest.fixture
def runner():
    return CliRunner()


# * Missing file is reported & exits 1 instead of printing nothing
def test_missing_file(runner, tmp_path):
    result = runner.invoke(app, [str(tmp_path / "missing.txt")])

    assert result.exit_code == 1
    assert "File Error" in result.output
    assert "File not found" in result.output


# * Directory instead of file
def test_directory(runner, tmp_path):
    result = runner.invoke(app, [str(tmp_path)])

    assert result.exit_code == 1
    assert "File Error" in result.output


# * Missing FILEPATH is a usage error (Click standard exit code 2)
def test_missing_argument(runner):
    result = runner.invoke(app, [], env={"NO_COLOR": "1", "TERM": "dumb"})

    assert result.exit_code == 2


# * Invalid bytes are reported w/ their line number
def test_decode_error(runner, tmp_path):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"ok\n\xff\n")

    result = runner.invoke(app, [str(path)])

    assert result.exit_code == 1
    assert "Decode Error" in result.output
    assert "line 2" in result.output


# * Configured encoding is used for decoding
def test_configured_encoding(runner, tmp_path):
    path = tmp_path / "latin.txt"
    path.write_bytes("caf\xe9\n".encode("latin-1"))

    result = runner.invoke(app, [str(path)], obj=LinumSettings(encoding="latin-1"))

    assert result.exit_code == 0
    assert result.output == "   1 café\n"


# * Number wider than every line fails fast w/ a formatting error
def test_number_wider_than_column(runner, tmp_path):
    path = tmp_path / "blank.txt"
    path.write_bytes(b"\n\n")

    result = runner.invoke(app, [str(path)])

    assert result.exit_code == 1
    assert "Formatting Error" in result.output
    assert "fit_numbers" in result.output


# * fit_numbers widens the column instead of failing
def test_fit_numbers_setting(runner, tmp_path):
    path = tmp_path / "blank.txt"
    path.write_bytes(b"\n\n")

    result = runner.invoke(app, [str(path)], obj=LinumSettings(fit_numbers=True))

    assert result.exit_code == 0
    assert result.output == "1 \n2 \n"


# * Nothing is printed to stdout when the pipeline fails part-way
def test_no_partial_output(runner, tmp_path):
    path = tmp_path / "many.txt"
    path.write_bytes(b"".join(b"x\n" for _ in range(12)))

    result = runner.invoke(app, [str(path)])

    assert result.exit_code == 1
    assert "1 x" not in result.output


# * Invalid config file warns & falls back to defaults
def test_invalid_config_warns(runner, make_text_file, write_config):
    write_config("{broken")
    path = make_text_file(["a"])

    result = runner.invoke(app, [str(path)])

    assert result.exit_code == 0
    assert "Warning: Invalid config file" in result.output
    assert "1 a" in result.output


# * Config naming an encoding that can't be split on \n falls back to utf-8
def test_config_encoding_not_line_splittable(runner, make_text_file, write_config):
    write_config({"encoding": "utf-16"})
    path = make_text_file(["a"])

    result = runner.invoke(app, [str(path)])

    assert result.exit_code == 0
    assert "Warning: Invalid config file" in result.output
    assert "1 a" in result.output
    assert "Decode Error" not in result.output
