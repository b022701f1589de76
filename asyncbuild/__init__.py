"""
AsyncBuild - Async producers as rebuild-driven snapshots
========================================================

AsyncBuild adapts futures and streams into a synchronous snapshot that a
declarative rendering layer reads on every render pass, and memoizes the
construction of such sources so they are not recreated on every pass.
"""

from .builder import AsyncConfig, Snapshot, SubscriptionController
from .errors import (
    AsyncBuildError,
    ConfigurationError,
    LifecycleError,
    UnsupportedSourceError,
)
from .init import MAX_INIT_ARGS, InitConfig, MemoizedInitializer
from .reporting import (
    get_error_reporter,
    print_error,
    report_error,
    set_error_reporter,
    _reset_error_reporter,
)
from .sources import (
    AsyncIteratorStream,
    DoneCallbackFuture,
    RxStream,
    as_future_like,
    as_stream_like,
)
from .types import (
    EMPTY,
    FutureLike,
    StreamLike,
    StreamSubscription,
    SubscriptionState,
    ValueStream,
    has_current_value,
)

__all__ = [
    # Subscription lifecycle
    "AsyncConfig",
    "Snapshot",
    "SubscriptionController",
    "SubscriptionState",
    # Memoized initialization
    "InitConfig",
    "MemoizedInitializer",
    "MAX_INIT_ARGS",
    # Source capabilities
    "FutureLike",
    "StreamLike",
    "StreamSubscription",
    "ValueStream",
    "has_current_value",
    # Source adapters
    "AsyncIteratorStream",
    "DoneCallbackFuture",
    "RxStream",
    "as_future_like",
    "as_stream_like",
    # Error reporting
    "get_error_reporter",
    "print_error",
    "report_error",
    "set_error_reporter",
    # Exceptions
    "AsyncBuildError",
    "ConfigurationError",
    "LifecycleError",
    "UnsupportedSourceError",
    # Sentinel
    "EMPTY",
    # Testing utilities (internal use)
    "_reset_error_reporter",
]
