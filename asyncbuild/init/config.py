"""
AsyncBuild Initializer Configuration
====================================

InitConfig describes what a MemoizedInitializer constructs: a getter and the
ordered arguments passed to it. Two configurations are equivalent when the
getter is the same and every argument compares equal, position by position.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Tuple

from ..errors import ConfigurationError
from ..types.common_types import Disposer, T, ValueBuilderFn
from ..util.equality import same_value

MAX_INIT_ARGS = 7


@dataclass(frozen=True, eq=False)
class InitConfig(Generic[T]):
    """
    Configuration of a MemoizedInitializer.

    Attributes:
        getter: Construction function, called as ``getter(*args)``.
        args: Zero to seven positional arguments.
        builder: Render callback receiving the memoized value.
        disposer: Called once with the final value at end of life.
    """

    getter: Callable[..., T]
    args: Tuple[Any, ...] = ()
    builder: Optional[ValueBuilderFn[T]] = None
    disposer: Optional[Disposer[T]] = None

    def __post_init__(self) -> None:
        if not callable(self.getter):
            raise ConfigurationError("InitConfig requires a callable getter")
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))
        if len(self.args) > MAX_INIT_ARGS:
            raise ConfigurationError(
                f"InitConfig supports at most {MAX_INIT_ARGS} arguments, "
                f"got {len(self.args)}"
            )

    @classmethod
    def of(
        cls,
        getter: Callable[..., T],
        *args: Any,
        builder: Optional[ValueBuilderFn[T]] = None,
        disposer: Optional[Disposer[T]] = None,
    ) -> "InitConfig[T]":
        return cls(getter, args, builder=builder, disposer=disposer)

    def init_value(self) -> T:
        return self.getter(*self.args)

    def should_init(self, other: "InitConfig[Any]") -> bool:
        """True when ``other`` would construct a different value than this config."""
        if self.getter != other.getter:
            return True
        if len(self.args) != len(other.args):
            return True
        return not all(same_value(a, b) for a, b in zip(self.args, other.args))
