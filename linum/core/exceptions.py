# linum/core/exceptions.py
# Custom exception hierarchy for linum (pure - no I/O operations)

from pathlib import Path
from typing import Any


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for linum
class LinumError(Exception):
    pass


# * Base error for file I/O operations
class FileOperationError(LinumError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Failed to open or read the input file
class FileReadError(FileOperationError):
    pass


# * A single line could not be decoded w/ the configured encoding
class LineDecodeError(FileOperationError):
    def __init__(self, message: str, path: Path | str, line_number: int):
        super().__init__(message, path)
        self.line_number = line_number

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"path={self.path!r}, line_number={self.line_number!r})"
        )


# * Base error for rendering numbered lines
class FormatError(LinumError):
    pass


# * Value does not fit in the requested column width
class PaddingError(FormatError):
    def __init__(self, message: str, value: str, width: int):
        super().__init__(message)
        self.value = value
        self.width = width

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"value={self.value!r}, width={self.width!r})"
        )


# * Configuration errors
class ConfigurationError(LinumError):
    pass


# * Settings value validation failed
class SettingsValidationError(ConfigurationError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * JSON parsing errors
class JSONParsingError(LinumError):
    pass
