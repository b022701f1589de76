"""
AsyncBuild Builder Configuration
================================

AsyncConfig is the immutable description of one render pass's inputs to a
SubscriptionController: the bound source, the render callbacks and the flags.
The host creates a new AsyncConfig whenever its own inputs change and hands it
to ``SubscriptionController.reconfigure``.

Example:
    ```python
    config = AsyncConfig(
        future=fetch_user(),
        waiting=lambda: "Loading...",
        builder=lambda user: f"Hello {user}",
        error=lambda error, trace: f"Error! {error}",
    )
    ```
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Generic, Optional

from ..errors import ConfigurationError
from ..sources.futures import is_future_source
from ..sources.streams import is_stream_source
from ..types.common_types import (
    ErrorBuilderFn,
    ErrorReporterFn,
    T,
    ValueBuilderFn,
    WaitingBuilderFn,
)


@dataclass(frozen=True, eq=False)
class AsyncConfig(Generic[T]):
    """
    Configuration of a SubscriptionController.

    Either ``future`` or ``stream`` may be given, not both. Sources are compared
    by identity on reconfiguration, so they must not be recreated on every
    render pass (see MemoizedInitializer).

    Attributes:
        builder: Default view, called with the last value or ``initial``.
        waiting: View shown before the first value arrives.
        error: View shown once a source error was recorded.
        closed: View shown after a stream closes, called with the last value.
        future: Future source (FutureLike, asyncio or concurrent future).
        stream: Stream source (StreamLike, rx observable or async iterable).
        initial: Fallback value used before a value is available.
        pause: Pause the live stream subscription.
        retain: Keep value/error state when the source is replaced.
        silent: Skip the error reporter. Defaults to ``error is not None``.
        report_error: Error reporter; the process-wide one when None.
    """

    builder: ValueBuilderFn[T]
    waiting: Optional[WaitingBuilderFn] = None
    error: Optional[ErrorBuilderFn] = None
    closed: Optional[ValueBuilderFn[T]] = None
    future: Any = None
    stream: Any = None
    initial: Optional[T] = None
    pause: bool = False
    retain: bool = False
    silent: Optional[bool] = None
    report_error: Optional[ErrorReporterFn] = None

    def __post_init__(self) -> None:
        if self.builder is None or not callable(self.builder):
            raise ConfigurationError("AsyncConfig requires a callable builder")
        if self.future is not None and self.stream is not None:
            raise ConfigurationError(
                "AsyncConfig should be given either a stream or future"
            )
        if self.future is not None and self.closed is not None:
            raise ConfigurationError(
                "AsyncConfig should not be given both a future and closed builder"
            )
        if self.future is not None and not is_future_source(self.future):
            raise ConfigurationError(
                f"Cannot use {type(self.future).__name__} as a future source"
            )
        if self.stream is not None and not is_stream_source(self.stream):
            raise ConfigurationError(
                f"Cannot use {type(self.stream).__name__} as a stream source"
            )

    @property
    def is_silent(self) -> bool:
        """Effective silent flag: explicit value, else whether an error view exists."""
        if self.silent is None:
            return self.error is not None
        return self.silent

    def replace(self, **changes: Any) -> "AsyncConfig[T]":
        """Return a copy with ``changes`` applied (the next render pass)."""
        return dataclasses.replace(self, **changes)
