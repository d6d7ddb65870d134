# linum/core/output.py
# Output level definitions, interface protocol & registry for diagnostic output
# * Pure module (no I/O); the Rich-backed implementation lives in linum/cli/output_manager.py
# * Registry lets core modules log without importing the CLI layer

from __future__ import annotations

from enum import IntEnum
from typing import Protocol, runtime_checkable, Optional


# * Diagnostic levels: NORMAL prints nothing, VERBOSE adds stages, DEBUG adds dev detail
class OutputLevel(IntEnum):
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3


# * What core code may call on the registered manager
@runtime_checkable
class OutputInterface(Protocol):
    def get_level(self) -> OutputLevel: ...

    def debug(
        self, msg: str, category: str = "DEBUG", detail: Optional[str] = None
    ) -> None: ...

    def verbose(
        self, msg: str, category: str = "INFO", detail: Optional[str] = None
    ) -> None: ...

    def start_session(self) -> None: ...

    def end_session(self) -> None: ...


# * Stand-in until the CLI registers a real manager (library use, unit tests)
class NullOutputManager:
    def get_level(self) -> OutputLevel:
        return OutputLevel.NORMAL

    def debug(
        self, msg: str, category: str = "DEBUG", detail: Optional[str] = None
    ) -> None:
        pass

    def verbose(
        self, msg: str, category: str = "INFO", detail: Optional[str] = None
    ) -> None:
        pass

    def start_session(self) -> None:
        pass

    def end_session(self) -> None:
        pass


_output_manager: OutputInterface = NullOutputManager()


def set_output_manager(manager: OutputInterface) -> None:
    global _output_manager
    _output_manager = manager


def get_output_manager() -> OutputInterface:
    return _output_manager


# * Back to the no-op manager (between CLI runs & in tests)
def reset_output_manager() -> None:
    global _output_manager
    _output_manager = NullOutputManager()
