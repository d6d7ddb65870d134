# linum/cli/output_manager.py
# Diagnostic output implementation for verbose & debug modes

# * Real implementation w/ Rich console output (stderr) & file logging
# * Registered via set_output_manager() at CLI startup

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import Optional, TextIO

from ..core.output import OutputLevel


class OutputManager:
    # Implements OutputInterface protocol for use w/ the core registry
    # Console output goes through the stderr console; log file gets plain text

    def __init__(self) -> None:
        self._level = OutputLevel.NORMAL
        self._dev_mode = False
        self._session_start: float | None = None
        self._log_file_path: Path | None = None
        self._log_file_handle: Optional[TextIO] = None

    def initialize(
        self,
        requested_level: OutputLevel = OutputLevel.NORMAL,
        dev_mode: bool = False,
        log_file: Path | None = None,
    ) -> None:
        self._dev_mode = dev_mode
        self._level = self._compute_effective_level(requested_level, dev_mode)
        self._session_start = time.time()
        self._setup_log_file(log_file)

    def _compute_effective_level(
        self, requested: OutputLevel, dev_mode: bool
    ) -> OutputLevel:
        # DEBUG requires dev_mode; cap at VERBOSE otherwise
        max_allowed = OutputLevel.DEBUG if dev_mode else OutputLevel.VERBOSE
        return min(requested, max_allowed)

    # OutputInterface implementation

    def get_level(self) -> OutputLevel:
        return self._level

    def debug(
        self, msg: str, category: str = "DEBUG", detail: Optional[str] = None
    ) -> None:
        if self._level >= OutputLevel.DEBUG:
            self._emit(f"[magenta]\\[{category}][/]", msg, category, detail)

    def verbose(
        self, msg: str, category: str = "INFO", detail: Optional[str] = None
    ) -> None:
        if self._level >= OutputLevel.VERBOSE:
            self._emit(f"[bold cyan]\\[{category}][/]", msg, category, detail)

    # console line w/ elapsed time, then the same text to the log file
    def _emit(self, tag: str, msg: str, category: str, detail: Optional[str]) -> None:
        from ..linum_io.console import console

        console.print(f"[dim]\\[{self._elapsed()}][/] {tag} {msg}")
        detail_lines = detail.split("\n") if detail else []
        for line in detail_lines:
            console.print(f"  [dim]{line}[/]")
        # file logging (plain text)
        self._write_to_file(f"[{self._elapsed()}] [{category}] {msg}")
        for line in detail_lines:
            self._write_to_file(f"  {line}")

    def start_session(self) -> None:
        self._session_start = time.time()
        if self._log_file_handle:
            self._write_to_file(f"\n{'='*60}")
            self._write_to_file(f"Session Started: {datetime.now().isoformat()}")
            self._write_to_file(f"Level: {self._level.name}")
            if self._dev_mode:
                self._write_to_file("Mode: Developer (dev_mode enabled)")
            self._write_to_file(f"{'='*60}\n")

    def end_session(self) -> None:
        if self._log_file_handle:
            self._write_to_file(f"\n{'='*60}")
            self._write_to_file(f"Session Ended: {datetime.now().isoformat()}")
            self._write_to_file(f"{'='*60}\n")
        self.cleanup()

    # File logging

    def _elapsed(self) -> str:
        if self._session_start is None:
            return "0.00s"
        return f"{time.time() - self._session_start:.2f}s"

    def _setup_log_file(self, log_file: Path | None) -> None:
        self.cleanup()

        self._log_file_path = log_file
        if log_file is not None:
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                self._log_file_handle = open(log_file, "a", encoding="utf-8")
            except OSError:
                # logging to file is best-effort; console diagnostics still work
                self._log_file_path = None
                self._log_file_handle = None

    def _write_to_file(self, msg: str) -> None:
        if self._log_file_handle is not None:
            self._log_file_handle.write(f"{msg}\n")
            self._log_file_handle.flush()

    def cleanup(self) -> None:
        if self._log_file_handle is not None:
            self._log_file_handle.close()
            self._log_file_handle = None
