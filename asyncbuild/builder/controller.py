"""
AsyncBuild Subscription Controller
==================================

SubscriptionController adapts a future or stream into a synchronous snapshot that
a rendering layer reads on every render pass.

The controller owns the only live subscription to its bound source. Every bind
creates a new binding record, and every delivery is checked against the current
binding before it may touch the snapshot. Deliveries from replaced or disposed
bindings are dropped without a rebuild and without a report.

Render resolution order, evaluated by ``build()``:
1. error view, when an error is recorded and ``error`` is configured
2. closed view, when the stream closed and ``closed`` is configured
3. waiting view, when nothing fired yet and ``waiting`` is configured
4. ``builder`` with the last value, or ``initial`` when nothing fired

Example:
    ```python
    controller = SubscriptionController(
        AsyncConfig(stream=messages, builder=lambda msg: f"Last: {msg}")
    )
    controller.subscribe(lambda c: screen.show(c.build()))
    ...
    controller.reconfigure(controller.config.replace(pause=True))
    controller.dispose()
    ```
"""

import dataclasses
import logging
import threading
from typing import Any, Callable, Generic, Optional, Set

from ..errors import LifecycleError
from ..reporting import DEFAULT_CONTEXT, report_error
from ..sources.aiter import AsyncIteratorStream, running_loop
from ..sources.futures import as_future_like
from ..sources.streams import as_stream_like
from ..types.common_types import EMPTY, SubscriptionState, T, Trace
from ..types.protocols import StreamSubscription, has_current_value
from ..util.equality import same_value
from .config import AsyncConfig
from .snapshot import Snapshot


class _Binding:
    """One bind of one source. Callbacks carrying any other binding are stale."""

    __slots__ = ("source", "is_stream", "subscription", "skip_first", "seed")

    def __init__(self, source: Any, is_stream: bool):
        self.source = source
        self.is_stream = is_stream
        self.subscription: Optional[StreamSubscription] = None
        self.skip_first = False
        self.seed: Any = EMPTY


class SubscriptionController(Generic[T]):
    """
    Subscription lifecycle state machine for one future or stream at a time.

    The controller binds its configured source on construction. The host calls
    ``reconfigure`` whenever its inputs change, ``build`` to materialize the
    current view, and ``dispose`` when the consuming component goes away.
    Rebuild requests are delivered to observers registered with ``subscribe``.
    """

    def __init__(self, config: AsyncConfig[T]) -> None:
        self._config = config
        self._snapshot = Snapshot()
        self._binding: Optional[_Binding] = None
        self._mounted = True
        self._observers: Set[Callable] = set()
        self._lock = threading.RLock()

        if config.future is not None:
            self._init_future()
        elif config.stream is not None:
            self._init_stream()

        self._update_pause()

    # ========================================================================
    # STATE ACCESS
    # ========================================================================

    @property
    def config(self) -> AsyncConfig[T]:
        return self._config

    @property
    def snapshot(self) -> Snapshot:
        """Copy of the current snapshot."""
        return dataclasses.replace(self._snapshot)

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    @property
    def subscription(self) -> Optional[StreamSubscription]:
        """Live stream subscription, if a stream is bound."""
        return self._binding.subscription if self._binding is not None else None

    @property
    def state(self) -> SubscriptionState:
        binding = self._binding
        snapshot = self._snapshot
        if binding is None:
            return SubscriptionState.IDLE
        if snapshot.has_error:
            return SubscriptionState.ERRORED
        if snapshot.is_closed:
            return SubscriptionState.CLOSED
        if snapshot.has_fired:
            return SubscriptionState.HAS_VALUE
        if binding.is_stream:
            return SubscriptionState.WAITING_STREAM
        return SubscriptionState.WAITING_FUTURE

    # ========================================================================
    # RECONFIGURATION
    # ========================================================================

    def reconfigure(self, config: AsyncConfig[T]) -> "SubscriptionController[T]":
        """
        Apply the configuration of a new render pass.

        Sources are compared by identity: an unchanged future or stream keeps
        its subscription and snapshot, a different one is rebound.
        """
        if not self._mounted:
            raise LifecycleError("Cannot reconfigure a disposed SubscriptionController")

        old_config = self._config
        self._config = config

        try:
            if config.future is not None:
                if config.future is not old_config.future:
                    self._init_future()
            elif config.stream is not None:
                if config.stream is not old_config.stream:
                    self._init_stream()
            else:
                self._cancel(retain=config.retain)
        except Exception:
            self._config = old_config
            raise

        self._update_pause()
        return self

    def bind(self, future: Any = None, stream: Any = None) -> "SubscriptionController[T]":
        """Rebind to ``future``, ``stream`` or nothing, keeping the other settings."""
        return self.reconfigure(self._config.replace(future=future, stream=stream))

    def set_pause(self, paused: bool) -> "SubscriptionController[T]":
        """Pause or resume the live stream subscription. Idempotent."""
        return self.reconfigure(self._config.replace(pause=paused))

    def dispose(self) -> None:
        """Cancel the subscription and clear the snapshot. Idempotent."""
        if not self._mounted:
            return
        self._mounted = False
        self._cancel(retain=False)
        with self._lock:
            self._observers.clear()
        logging.debug(f"Disposed {self!r}")

    # ========================================================================
    # REBUILD OBSERVERS
    # ========================================================================

    def subscribe(self, func: Callable) -> "SubscriptionController[T]":
        """Register ``func(controller)`` to be called on every rebuild request."""
        with self._lock:
            self._observers.add(func)
        return self

    def unsubscribe(self, func: Callable) -> None:
        with self._lock:
            self._observers.discard(func)

    def _mark_needs_build(self) -> None:
        if not self._mounted:
            return

        with self._lock:
            observers_snapshot = tuple(self._observers)

        for observer in observers_snapshot:
            try:
                observer(self)
            except Exception as e:
                logging.error(f"Error in rebuild observer {observer!r}: {e}")

    # ========================================================================
    # RENDERING
    # ========================================================================

    def build(self) -> Any:
        """Materialize the current snapshot through the configured callbacks."""
        config = self._config
        snapshot = self._snapshot

        if snapshot.has_error and config.error is not None:
            return config.error(snapshot.last_error, snapshot.last_trace)

        if snapshot.is_closed and config.closed is not None:
            return config.closed(self._current_value())

        if not snapshot.has_fired and config.waiting is not None:
            return config.waiting()

        return config.builder(self._current_value())

    def _current_value(self) -> Optional[T]:
        if self._snapshot.has_fired:
            return self._snapshot.last_value
        return self._config.initial

    # ========================================================================
    # BINDING
    # ========================================================================

    def _cancel(self, retain: bool) -> None:
        binding = self._binding
        self._binding = None

        if binding is not None:
            logging.debug(f"Unbinding {binding.source!r}")
            if binding.subscription is not None:
                binding.subscription.cancel()
                binding.subscription = None

        if not retain:
            self._snapshot.clear()
        self._snapshot.is_closed = False

    def _init_future(self) -> None:
        source = self._config.future
        future = as_future_like(source)

        self._cancel(retain=self._config.retain)
        binding = _Binding(source, is_stream=False)
        self._binding = binding
        logging.debug(f"Binding future {source!r}")

        future.on_complete(
            lambda value: self._handle_value(binding, value),
            lambda error, trace: self._handle_error(binding, error, trace),
        )

    def _init_stream(self) -> None:
        source = self._config.stream
        stream = as_stream_like(source)
        if isinstance(stream, AsyncIteratorStream):
            running_loop()

        self._cancel(retain=self._config.retain)
        binding = _Binding(source, is_stream=True)
        self._binding = binding
        logging.debug(f"Binding stream {source!r}")

        if has_current_value(stream):
            binding.skip_first = True
            binding.seed = stream.value
            self._snapshot.last_value = binding.seed
            self._snapshot.has_fired = True

        subscription = stream.subscribe(
            lambda value: self._handle_value(binding, value),
            lambda error, trace: self._handle_error(binding, error, trace),
            lambda: self._handle_close(binding),
        )

        if binding is self._binding:
            binding.subscription = subscription
        else:
            # Rebound while the subscription replayed synchronously
            subscription.cancel()

    def _update_pause(self) -> None:
        subscription = self.subscription
        if subscription is None:
            return

        if self._config.pause and not subscription.is_paused:
            logging.debug(f"Pausing {self._binding.source!r}")
            subscription.pause()
        elif not self._config.pause and subscription.is_paused:
            logging.debug(f"Resuming {self._binding.source!r}")
            subscription.resume()

    # ========================================================================
    # DELIVERY
    # ========================================================================

    def _is_stale(self, binding: _Binding) -> bool:
        if binding is self._binding and self._mounted:
            return False
        logging.debug(f"Dropped stale delivery from {binding.source!r}")
        return True

    def _handle_value(self, binding: _Binding, value: T) -> None:
        if self._is_stale(binding):
            return

        if binding.skip_first:
            binding.skip_first = False
            if same_value(value, binding.seed):
                return

        self._snapshot.last_value = value
        self._snapshot.has_fired = True
        self._mark_needs_build()

    def _handle_close(self, binding: _Binding) -> None:
        if self._is_stale(binding):
            return

        binding.skip_first = False
        self._snapshot.is_closed = True
        if self._config.closed is not None:
            self._mark_needs_build()

    def _handle_error(self, binding: _Binding, error: Any, trace: Trace) -> None:
        if self._is_stale(binding):
            return

        binding.skip_first = False
        self._snapshot.last_error = error
        self._snapshot.last_trace = trace

        if self._config.error is not None:
            self._mark_needs_build()

        if not self._config.is_silent:
            reporter = self._config.report_error or report_error
            try:
                reporter(error, trace, DEFAULT_CONTEXT)
            except Exception as e:
                logging.error(f"Error in error reporter {reporter!r}: {e}")

    # ========================================================================
    # CONTEXT MANAGER
    # ========================================================================

    def __enter__(self) -> "SubscriptionController[T]":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.dispose()

    def __repr__(self) -> str:
        return f"SubscriptionController(state={self.state.value})"
