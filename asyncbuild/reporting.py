"""
AsyncBuild Error Reporting
==========================

Process-wide sink for source errors that are not handled by a custom error view.

The default reporter prints the error and its traceback to stderr with rich.
Tests and applications swap it with ``set_error_reporter`` and restore it with
``_reset_error_reporter``.
"""

import threading
from typing import Any, Optional

from rich.console import Console
from rich.traceback import Traceback

from .types.common_types import ErrorReporterFn, Trace

DEFAULT_CONTEXT = "while updating async builder"

_console = Console(stderr=True)


def print_error(error: Any, trace: Trace, context: str) -> None:
    """Default reporter: render ``error`` with its traceback on stderr."""
    _console.rule(f"[bold red]Error caught {context}")
    if isinstance(error, BaseException):
        _console.print(Traceback.from_exception(type(error), error, trace))
    else:
        _console.print(repr(error))


_error_reporter: Optional[ErrorReporterFn] = None
_error_reporter_lock = threading.Lock()


def get_error_reporter() -> ErrorReporterFn:
    """Get the installed reporter, falling back to ``print_error``."""
    return _error_reporter or print_error


def set_error_reporter(reporter: Optional[ErrorReporterFn]) -> ErrorReporterFn:
    """Install ``reporter`` process-wide and return the previous one."""
    global _error_reporter
    with _error_reporter_lock:
        previous = get_error_reporter()
        _error_reporter = reporter
    return previous


def report_error(error: Any, trace: Trace = None, context: str = DEFAULT_CONTEXT) -> None:
    """Forward an error to the installed reporter. Fire-and-forget."""
    get_error_reporter()(error, trace, context)


def _reset_error_reporter() -> None:
    """Restore the default reporter (for testing)."""
    set_error_reporter(None)
