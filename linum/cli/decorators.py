# linum/cli/decorators.py
# CLI decorator mapping linum errors to labelled messages & exit status 1

import functools
from typing import Callable, TypeVar, Any, cast

from rich.markup import escape

from ..core.exceptions import (
    LinumError,
    LineDecodeError,
    FileOperationError,
    PaddingError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])

FIT_NUMBERS_HINT = (
    "The number column is as wide as the longest line; "
    'set "fit_numbers": true in the config file to widen it.'
)


# * Decorator for handling linum errors in CLI commands w/ Rich output
def handle_linum_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # ! Lazy import to avoid circular dependencies
        from ..linum_io.console import console

        try:
            return func(*args, **kwargs)
        except LineDecodeError as e:
            console.print(format_error_message("Decode Error", escape(str(e))))
            raise SystemExit(1)
        except FileOperationError as e:
            console.print(format_error_message("File Error", escape(str(e))))
            raise SystemExit(1)
        except PaddingError as e:
            console.print(format_error_message("Formatting Error", escape(str(e))))
            console.print(f"[dim]{FIT_NUMBERS_HINT}[/]")
            raise SystemExit(1)
        except LinumError as e:
            console.print(format_error_message("Error", escape(str(e))))
            raise SystemExit(1)
        except Exception as e:
            console.print(format_error_message("Unexpected Error", escape(str(e))))
            raise SystemExit(1)

    return cast(F, wrapper)
