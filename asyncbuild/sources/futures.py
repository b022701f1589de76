"""
AsyncBuild Future Adapters
==========================

Adapts Python's future primitives to the FutureLike capability.

Supported sources:
- objects already implementing ``on_complete(on_value, on_error)``
- ``asyncio.Future`` and ``asyncio.Task``
- ``concurrent.futures.Future``

Futures that are already resolved deliver their result synchronously from
``on_complete`` (concurrent futures) or on the next loop iteration (asyncio).
"""

import asyncio
import concurrent.futures
from typing import Any, Generic, Union

from ..errors import UnsupportedSourceError
from ..types.common_types import ErrorCallback, T, ValueCallback
from ..types.protocols import FutureLike

PrimitiveFuture = Union["asyncio.Future[Any]", "concurrent.futures.Future[Any]"]


class DoneCallbackFuture(Generic[T]):
    """
    FutureLike view of any future exposing ``add_done_callback``.

    A cancelled future is delivered as an error carrying the CancelledError
    raised by ``result()``.
    """

    __slots__ = ("_future",)

    def __init__(self, future: PrimitiveFuture):
        self._future = future

    @property
    def future(self) -> PrimitiveFuture:
        return self._future

    def on_complete(self, on_value: ValueCallback[T], on_error: ErrorCallback) -> None:
        def _done(future) -> None:
            try:
                value = future.result()
            except (Exception, asyncio.CancelledError) as exc:
                on_error(exc, exc.__traceback__)
            else:
                on_value(value)

        self._future.add_done_callback(_done)

    def __repr__(self) -> str:
        return f"DoneCallbackFuture({self._future!r})"


def is_future_source(source: Any) -> bool:
    """Check whether ``source`` can be bound as a future."""
    return (
        isinstance(source, FutureLike)
        or asyncio.isfuture(source)
        or isinstance(source, concurrent.futures.Future)
    )


def as_future_like(source: Any) -> FutureLike[Any]:
    """
    Return a FutureLike view of ``source``.

    Raises:
        UnsupportedSourceError: If ``source`` is not a supported future.
    """
    if isinstance(source, FutureLike):
        return source
    if asyncio.isfuture(source) or isinstance(source, concurrent.futures.Future):
        return DoneCallbackFuture(source)
    raise UnsupportedSourceError(
        f"Cannot use {type(source).__name__} as a future source"
    )
