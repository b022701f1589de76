"""
AsyncBuild Common Types - Shared Type Definitions
=================================================

This module contains type variables, callback signatures and sentinels shared by
the builder, initializer and source adapter modules. Keeping them in one place
avoids circular imports between those packages.
"""

from enum import Enum
from types import TracebackType
from typing import Any, Callable, Optional, TypeVar

# ============================================================================
# TYPE VARIABLES
# ============================================================================

T = TypeVar("T")

# ============================================================================
# SENTINELS
# ============================================================================


class _Empty:
    """Sentinel for 'no value' in snapshots and memo records."""

    def __repr__(self):
        return "EMPTY"

    def __bool__(self):
        return False


EMPTY = _Empty()

# ============================================================================
# CALLBACK TYPES
# ============================================================================

Trace = Optional[TracebackType]

WaitingBuilderFn = Callable[[], Any]
ValueBuilderFn = Callable[[Optional[T]], Any]
ErrorBuilderFn = Callable[[Any, Trace], Any]

# report(error, trace, context_label)
ErrorReporterFn = Callable[[Any, Trace, str], None]

ValueCallback = Callable[[T], None]
ErrorCallback = Callable[[Any, Trace], None]
CloseCallback = Callable[[], None]

Disposer = Callable[[T], None]

# ============================================================================
# STATES
# ============================================================================


class SubscriptionState(Enum):
    """Coarse state of a SubscriptionController, derived from its snapshot."""

    IDLE = "idle"
    WAITING_FUTURE = "waiting_future"
    WAITING_STREAM = "waiting_stream"
    HAS_VALUE = "has_value"
    ERRORED = "errored"
    CLOSED = "closed"
