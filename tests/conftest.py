"""
Shared pytest fixtures and configuration for AsyncBuild tests.
"""

import pytest

from asyncbuild import _reset_error_reporter, set_error_reporter
from tests.utils import ReportedError


@pytest.fixture(autouse=True)
def reset_error_reporter():
    """Restore the default error reporter around each test to prevent leakage."""
    _reset_error_reporter()
    yield
    _reset_error_reporter()


@pytest.fixture
def reported_errors():
    """Install a reporter that records every reported error."""
    errors = []

    def record(error, trace, context):
        errors.append(ReportedError(error, trace, context))

    set_error_reporter(record)
    return errors
