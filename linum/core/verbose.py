# linum/core/verbose.py
# Verbose logging helpers - delegate to the registered output manager w/ categories for file reads, pipeline stages & config

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import get_output_manager, set_output_manager, OutputLevel


# * Initialize verbose logging for a session
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
) -> None:
    if enabled and dev_mode:
        requested_level = OutputLevel.DEBUG
    elif enabled:
        requested_level = OutputLevel.VERBOSE
    else:
        requested_level = OutputLevel.NORMAL

    # ! Lazy import: core must not depend on the CLI layer at import time
    from ..cli.output_manager import OutputManager

    manager = OutputManager()
    manager.initialize(
        requested_level=requested_level,
        dev_mode=dev_mode,
        log_file=log_file,
    )
    set_output_manager(manager)


# * Log file read operation
def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Read: {path}{size_str}", "FILE")


# * Log pipeline stage
def vlog_stage(stage: str, description: str | None = None) -> None:
    if description:
        get_output_manager().verbose(f"{stage}: {description}", "STAGE")
    else:
        get_output_manager().verbose(stage, "STAGE")


# * Log configuration values being used
def vlog_config(key: str, value: Any) -> None:
    get_output_manager().verbose(f"{key} = {value}", "CONFIG")


# * Dev-mode only logging
def vlog_dev(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().debug(message, f"DEV:{category}", detail)


# * Context manager for verbose logging session
class VerboseSession:
    def __init__(
        self,
        enabled: bool = False,
        log_file: Path | None = None,
        dev_mode: bool = False,
    ):
        self.enabled = enabled
        self.log_file = log_file
        self.dev_mode = dev_mode

    def __enter__(self) -> "VerboseSession":
        init_verbose(self.enabled, self.log_file, self.dev_mode)
        get_output_manager().start_session()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        get_output_manager().end_session()
