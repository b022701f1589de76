"""
AsyncBuild Source Protocols
===========================

This module defines the minimal capability contracts the builder consumes. The
library never implements futures or streams itself; anything satisfying these
protocols (or adaptable by ``asyncbuild.sources``) can be bound to a
SubscriptionController.

Key Contracts:
- FutureLike: resolves exactly once, with a value or an error
- StreamLike: emits zero or more values/errors, then a terminal close
- StreamSubscription: the live listen handle (cancel, pause, resume)
- ValueStream: optional capability of a stream that remembers its last value
"""

from typing import Any, Protocol, runtime_checkable

from .common_types import CloseCallback, ErrorCallback, T, ValueCallback


@runtime_checkable
class FutureLike(Protocol[T]):
    """
    A single-shot producer.

    Exactly one of the two callbacks fires, exactly once. The callbacks may be
    invoked synchronously from ``on_complete`` when the result is already known.
    """

    def on_complete(
        self, on_value: ValueCallback[T], on_error: ErrorCallback
    ) -> None: ...


@runtime_checkable
class StreamSubscription(Protocol):
    """Live listen handle returned by ``StreamLike.subscribe``."""

    @property
    def is_paused(self) -> bool: ...

    def pause(self) -> None: ...

    def resume(self) -> None: ...

    def cancel(self) -> None: ...


@runtime_checkable
class StreamLike(Protocol[T]):
    """A push-based, possibly unbounded event sequence."""

    def subscribe(
        self,
        on_value: ValueCallback[T],
        on_error: ErrorCallback,
        on_close: CloseCallback,
    ) -> StreamSubscription: ...


@runtime_checkable
class ValueStream(Protocol[T]):
    """
    Optional capability of a stream that remembers its last pushed value.

    Example:
        ```python
        if has_current_value(stream):
            seed = stream.value
        ```
    """

    @property
    def has_value(self) -> bool: ...

    @property
    def value(self) -> T: ...


def has_current_value(stream: Any) -> bool:
    """Capability query: does ``stream`` currently hold a remembered value?"""
    return isinstance(stream, ValueStream) and bool(stream.has_value)
