"""
AsyncBuild Stream Adapter Selection
===================================

Chooses the StreamLike adapter for a stream source.
"""

from typing import Any

from reactivex import Observable

from ..errors import UnsupportedSourceError
from ..types.protocols import StreamLike
from .aiter import AsyncIteratorStream
from .rx import RxStream


def is_stream_source(source: Any) -> bool:
    """Check whether ``source`` can be bound as a stream."""
    return (
        isinstance(source, (Observable, StreamLike))
        or hasattr(source, "__aiter__")
    )


def as_stream_like(source: Any) -> StreamLike[Any]:
    """
    Return a StreamLike view of ``source``.

    rx observables are checked first: they expose a ``subscribe`` method with a
    different contract.

    Raises:
        UnsupportedSourceError: If ``source`` is not a supported stream.
    """
    if isinstance(source, Observable):
        return RxStream(source)
    if isinstance(source, StreamLike):
        return source
    if hasattr(source, "__aiter__"):
        return AsyncIteratorStream(source)
    raise UnsupportedSourceError(
        f"Cannot use {type(source).__name__} as a stream source"
    )
