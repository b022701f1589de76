"""
AsyncBuild Async Iterator Adapter
=================================

Adapts async iterables (async generators, channels, ...) to the StreamLike
capability by pumping them in an asyncio task on the running loop.

Pausing holds the next delivery and stops pulling from the iterator until the
subscription is resumed. Exhaustion signals close. An exception raised by the
iterator ends it, so it is delivered as an error followed by close.
"""

import asyncio
import logging
from typing import Any, AsyncIterable, Generic

from ..errors import ConfigurationError
from ..types.common_types import CloseCallback, ErrorCallback, T, ValueCallback


def running_loop() -> asyncio.AbstractEventLoop:
    """
    Return the running event loop that pumps async iterables.

    Raises:
        ConfigurationError: If no event loop is running in this thread.
    """
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        raise ConfigurationError(
            "Async iterables can only be bound while an event loop is running"
        ) from None


class TaskSubscription:
    """StreamSubscription backed by an asyncio task."""

    def __init__(
        self,
        iterable: AsyncIterable[Any],
        on_value: ValueCallback[Any],
        on_error: ErrorCallback,
        on_close: CloseCallback,
    ):
        loop = running_loop()
        self._resumed = asyncio.Event()
        self._resumed.set()
        self._task = loop.create_task(
            self._pump(iterable, on_value, on_error, on_close)
        )

    @property
    def is_paused(self) -> bool:
        return not self._resumed.is_set()

    @property
    def task(self) -> "asyncio.Task[None]":
        return self._task

    def pause(self) -> None:
        self._resumed.clear()

    def resume(self) -> None:
        self._resumed.set()

    def cancel(self) -> None:
        self._task.cancel()

    async def _pump(
        self,
        iterable: AsyncIterable[Any],
        on_value: ValueCallback[Any],
        on_error: ErrorCallback,
        on_close: CloseCallback,
    ) -> None:
        iterator = iterable.__aiter__()
        try:
            async for item in iterator:
                await self._resumed.wait()
                on_value(item)
        except asyncio.CancelledError:
            logging.debug(f"Stopped pumping {iterable!r}")
            raise
        except Exception as exc:
            on_error(exc, exc.__traceback__)
        finally:
            aclose = getattr(iterator, "aclose", None)
            if aclose is not None:
                await aclose()
        on_close()


class AsyncIteratorStream(Generic[T]):
    """StreamLike view of an async iterable."""

    __slots__ = ("_iterable",)

    def __init__(self, iterable: AsyncIterable[T]):
        self._iterable = iterable

    @property
    def iterable(self) -> AsyncIterable[T]:
        return self._iterable

    def subscribe(
        self,
        on_value: ValueCallback[T],
        on_error: ErrorCallback,
        on_close: CloseCallback,
    ) -> TaskSubscription:
        return TaskSubscription(self._iterable, on_value, on_error, on_close)

    def __repr__(self) -> str:
        return f"AsyncIteratorStream({self._iterable!r})"
