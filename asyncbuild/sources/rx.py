"""
AsyncBuild ReactiveX Adapter
============================

Adapts ``reactivex`` observables to the StreamLike capability.

A ``BehaviorSubject`` remembers its last value, so RxStream exposes it through
the ValueStream capability and the builder can seed its snapshot before the
first live emission. ReactiveX has no native pause, so a paused RxSubscription
buffers deliveries and flushes them in order on resume.
"""

import logging
from collections import deque
from typing import Any, Callable, Deque, Generic, Optional, Tuple

from reactivex import Observable
from reactivex.abc import DisposableBase
from reactivex.subject import BehaviorSubject

from ..types.common_types import CloseCallback, ErrorCallback, T, ValueCallback


class RxSubscription:
    """StreamSubscription over an rx disposable with pause buffering."""

    def __init__(
        self,
        observable: Observable,
        on_value: ValueCallback[Any],
        on_error: ErrorCallback,
        on_close: CloseCallback,
    ):
        self._on_value = on_value
        self._on_error = on_error
        self._on_close = on_close
        self._paused = False
        self._cancelled = False
        self._buffer: Deque[Tuple[Callable, Tuple[Any, ...]]] = deque()
        self._disposable: Optional[DisposableBase] = None

        disposable = observable.subscribe(
            on_next=self._next,
            on_error=self._error,
            on_completed=self._completed,
        )
        # Cancelled during a synchronous replay
        if self._cancelled:
            disposable.dispose()
        else:
            self._disposable = disposable

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def pending(self) -> int:
        """Number of buffered deliveries waiting for resume."""
        return len(self._buffer)

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False
        while self._buffer and not self._paused and not self._cancelled:
            callback, args = self._buffer.popleft()
            callback(*args)

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        self._buffer.clear()
        if self._disposable is not None:
            self._disposable.dispose()
            self._disposable = None

    def _deliver(self, callback: Callable, *args: Any) -> None:
        if self._cancelled:
            return
        if self._paused:
            self._buffer.append((callback, args))
            return
        callback(*args)

    def _next(self, value: Any) -> None:
        self._deliver(self._on_value, value)

    def _error(self, error: Exception) -> None:
        self._deliver(self._on_error, error, getattr(error, "__traceback__", None))

    def _completed(self) -> None:
        self._deliver(self._on_close)


class RxStream(Generic[T]):
    """StreamLike view of a ``reactivex`` observable or subject."""

    __slots__ = ("_observable",)

    def __init__(self, observable: Observable):
        self._observable = observable

    @property
    def observable(self) -> Observable:
        return self._observable

    @property
    def has_value(self) -> bool:
        return isinstance(self._observable, BehaviorSubject) and not (
            self._observable.is_disposed
        )

    @property
    def value(self) -> T:
        if not self.has_value:
            raise AttributeError(f"{self._observable!r} has no current value")
        return self._observable.value

    def subscribe(
        self,
        on_value: ValueCallback[T],
        on_error: ErrorCallback,
        on_close: CloseCallback,
    ) -> RxSubscription:
        logging.debug(f"Subscribing to rx observable {self._observable!r}")
        return RxSubscription(self._observable, on_value, on_error, on_close)

    def __repr__(self) -> str:
        return f"RxStream({self._observable!r})"
