"""Unit tests for the process-wide error reporter."""

import pytest

from asyncbuild import (
    get_error_reporter,
    print_error,
    report_error,
    set_error_reporter,
)
from asyncbuild.reporting import DEFAULT_CONTEXT


@pytest.mark.unit
def test_default_reporter_is_the_printer():
    """Without an installed reporter errors are printed"""
    assert get_error_reporter() is print_error


@pytest.mark.unit
def test_set_error_reporter_returns_previous():
    """Swapping the reporter hands back the old one"""
    calls = []

    def reporter(error, trace, context):
        calls.append((error, context))

    previous = set_error_reporter(reporter)
    report_error("boom")

    assert previous is print_error
    assert calls == [("boom", DEFAULT_CONTEXT)]
    assert get_error_reporter() is reporter


@pytest.mark.unit
def test_print_error_renders_exception_with_traceback(capsys):
    """The default printer writes the traceback to stderr"""
    try:
        raise ValueError("boom")
    except ValueError as exc:
        print_error(exc, exc.__traceback__, DEFAULT_CONTEXT)

    err = capsys.readouterr().err
    assert "ValueError" in err
    assert "boom" in err
    assert DEFAULT_CONTEXT in err


@pytest.mark.unit
def test_print_error_renders_non_exceptions(capsys):
    """Arbitrary error objects are printed with repr"""
    print_error("Test error message", None, DEFAULT_CONTEXT)

    assert "'Test error message'" in capsys.readouterr().err
