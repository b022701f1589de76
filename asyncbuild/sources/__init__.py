"""
AsyncBuild Sources
==================

Adapters from Python async primitives to the FutureLike and StreamLike
capabilities consumed by the builder.
"""

from .aiter import AsyncIteratorStream, TaskSubscription
from .futures import DoneCallbackFuture, as_future_like, is_future_source
from .rx import RxStream, RxSubscription
from .streams import as_stream_like, is_stream_source

__all__ = [
    "AsyncIteratorStream",
    "TaskSubscription",
    "DoneCallbackFuture",
    "RxStream",
    "RxSubscription",
    "as_future_like",
    "as_stream_like",
    "is_future_source",
    "is_stream_source",
]
