# linum/config/settings.py
# Configuration management for linum: default flags, alignment, encoding & dev mode

from __future__ import annotations

import codecs
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, cast

import typer

from ..core.constants import ALIGN_TO_PAD_MODE, DEFAULT_ALIGN, PadMode
from ..core.exceptions import JSONParsingError, SettingsValidationError
from ..linum_io.generics import read_json_safe

# environment variable overriding the config file location (may be set in .env)
CONFIG_ENV_VAR = "LINUM_CONFIG"


# newline must round-trip as the lone \n byte (a leading BOM is tolerated)
def _splits_on_newline_byte(encoding: str) -> bool:
    try:
        return (
            "\n".encode(encoding).endswith(b"\n")
            and b"\n".decode(encoding) == "\n"
        )
    except UnicodeError:
        return False


# * Settings dataclass; CLI flags can only switch these behaviours on
@dataclass
class LinumSettings:
    # numbering defaults
    skip_empty: bool = False
    reverse: bool = False

    # number alignment: right | left | center
    align: str = DEFAULT_ALIGN

    # widen the number column when a number is longer than every line
    fit_numbers: bool = False

    # input decoding
    encoding: str = "utf-8"

    # dev mode setting (allows DEBUG output w/ --verbose)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        # strict bool validation (no coercion)
        for name in ("skip_empty", "reverse", "fit_numbers", "dev_mode"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise SettingsValidationError(
                    f"{name} must be a boolean (true/false), "
                    f"got {type(value).__name__}: {value}",
                    setting_name=name,
                    value=value,
                )

        if self.align not in ALIGN_TO_PAD_MODE:
            raise SettingsValidationError(
                f"align must be one of {sorted(ALIGN_TO_PAD_MODE)}, got '{self.align}'",
                setting_name="align",
                value=self.align,
            )

        if not isinstance(self.encoding, str):
            raise SettingsValidationError(
                f"encoding must be a string, got {type(self.encoding).__name__}",
                setting_name="encoding",
                value=self.encoding,
            )
        try:
            codec = codecs.lookup(self.encoding)
        except LookupError:
            raise SettingsValidationError(
                f"unknown encoding '{self.encoding}'",
                setting_name="encoding",
                value=self.encoding,
            )
        # bytes<->bytes codecs such as hex or base64
        if not getattr(codec, "_is_text_encoding", True):
            raise SettingsValidationError(
                f"'{self.encoding}' is not a text encoding",
                setting_name="encoding",
                value=self.encoding,
            )
        # files are split on the \n byte before decoding (rules out UTF-16/32, EBCDIC)
        if not _splits_on_newline_byte(codec.name):
            raise SettingsValidationError(
                f"encoding '{self.encoding}' does not write newline as a single \\n byte",
                setting_name="encoding",
                value=self.encoding,
            )

    @property
    def pad_mode(self) -> PadMode:
        return ALIGN_TO_PAD_MODE[self.align]


# * Default config location: $LINUM_CONFIG, else ~/.linum/config.json
def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".linum" / "config.json"


# * Settings management class w/ JSON loading & caching
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path
        self._settings: Optional[LinumSettings] = None

    @property
    def resolved_path(self) -> Path:
        return self.config_path or default_config_path()

    # load settings from file or return defaults
    def load(self) -> LinumSettings:
        if self._settings is not None:
            return self._settings

        path = self.resolved_path
        if path.exists():
            try:
                data = read_json_safe(path)
                self._settings = LinumSettings(**data)
            except (JSONParsingError, SettingsValidationError, TypeError) as e:
                typer.echo(f"Warning: Invalid config file {path}: {e}", err=True)
                typer.echo("Using default settings", err=True)
                self._settings = LinumSettings()
        else:
            self._settings = LinumSettings()

        return self._settings

    # get a specific setting value (None for unknown keys)
    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())

    # drop cached settings so the next load() re-reads the file
    def reset_cache(self) -> None:
        self._settings = None


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[LinumSettings] = None
) -> LinumSettings:
    # prefer explicitly provided settings
    if provided is not None:
        return provided

    # search ctx, parent, & root for LinumSettings
    candidates: list[typer.Context] = [ctx]
    parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
    if parent is not None:
        candidates.append(parent)
    find_root = getattr(ctx, "find_root", None)
    root_ctx = (
        cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    )
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, LinumSettings):
            return obj

    # fallback to loading from disk
    return settings_manager.load()
