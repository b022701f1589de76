"""
AsyncBuild Types
================

Shared type variables, callback signatures, sentinels and source protocols.
"""

from .common_types import (
    EMPTY,
    CloseCallback,
    Disposer,
    ErrorBuilderFn,
    ErrorCallback,
    ErrorReporterFn,
    SubscriptionState,
    T,
    Trace,
    ValueBuilderFn,
    ValueCallback,
    WaitingBuilderFn,
)
from .protocols import (
    FutureLike,
    StreamLike,
    StreamSubscription,
    ValueStream,
    has_current_value,
)

__all__ = [
    "EMPTY",
    "T",
    "Trace",
    "CloseCallback",
    "Disposer",
    "ErrorBuilderFn",
    "ErrorCallback",
    "ErrorReporterFn",
    "ValueBuilderFn",
    "ValueCallback",
    "WaitingBuilderFn",
    "SubscriptionState",
    "FutureLike",
    "StreamLike",
    "StreamSubscription",
    "ValueStream",
    "has_current_value",
]
