"""
AsyncBuild Memoized Initializer
===============================

MemoizedInitializer runs a construction function once per distinct
configuration and a disposal function once, at end of life.

Changing the configuration replaces the stored value without disposing the
previous one. Only the final value reaches the disposer. Values that own
resources and are replaced mid-life have to be released by the caller.

Example:
    ```python
    with MemoizedInitializer(InitConfig.of(start_feed, "prices")) as feed:
        controller = SubscriptionController(AsyncConfig(stream=feed.value, builder=show))
        ...
        feed.reconfigure(InitConfig.of(start_feed, "volumes"))
    ```
"""

import logging
from typing import Any, Generic, Optional

from ..errors import LifecycleError
from ..types.common_types import EMPTY, T
from .config import InitConfig


class MemoizedInitializer(Generic[T]):
    """Memo record of one (configuration, value) pair."""

    def __init__(self, config: Optional[InitConfig[T]] = None) -> None:
        self._config: Optional[InitConfig[T]] = config
        self._value: Any = EMPTY
        self._active = False
        self._init_count = 0

    @property
    def config(self) -> Optional[InitConfig[T]]:
        return self._config

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def init_count(self) -> int:
        """Number of times the getter has been run."""
        return self._init_count

    @property
    def value(self) -> T:
        if not self._active:
            raise LifecycleError("MemoizedInitializer is not active")
        return self._value

    def activate(self, config: Optional[InitConfig[T]] = None) -> T:
        """Construct the first value, from ``config`` when given."""
        if self._active:
            raise LifecycleError("MemoizedInitializer is already active")
        config = config if config is not None else self._config
        if config is None:
            raise LifecycleError("MemoizedInitializer has no configuration")
        self._init(config)
        self._active = True
        return self._value

    def reconfigure(self, config: InitConfig[T]) -> T:
        """Store ``config``, constructing a new value only when it differs."""
        if not self._active:
            raise LifecycleError("Cannot reconfigure an inactive MemoizedInitializer")

        if config.should_init(self._config):
            logging.debug(f"Reinitializing with {config.getter!r}{config.args!r}")
            self._init(config)
        else:
            self._config = config
        return self._value

    def deactivate(self) -> None:
        """Dispose the final value and release the record. Idempotent."""
        if not self._active:
            return

        config, value = self._config, self._value
        self._active = False
        self._config = None
        self._value = EMPTY

        if config.disposer is not None:
            config.disposer(value)

    def build(self) -> Any:
        """Render the memoized value, or return it when no builder is set."""
        value = self.value
        if self._config.builder is None:
            return value
        return self._config.builder(value)

    def _init(self, config: InitConfig[T]) -> None:
        # Key and value are stored together, only once the getter succeeded
        value = config.init_value()
        self._config, self._value = config, value
        self._init_count += 1

    def __enter__(self) -> "MemoizedInitializer[T]":
        if not self._active:
            self.activate()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.deactivate()

    def __repr__(self) -> str:
        return f"MemoizedInitializer(active={self._active}, value={self._value!r})"
