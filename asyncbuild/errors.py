"""
AsyncBuild Exceptions
=====================

Errors raised by the library itself. Errors produced by bound sources are never
raised; they are captured into the controller snapshot and reported instead.
"""


class AsyncBuildError(Exception):
    """Base class for asyncbuild errors."""

    pass


class ConfigurationError(AsyncBuildError, ValueError):
    """Invalid builder or initializer configuration."""

    pass


class LifecycleError(AsyncBuildError, RuntimeError):
    """Operation not allowed in the current lifecycle phase."""

    pass


class UnsupportedSourceError(AsyncBuildError, TypeError):
    """Object cannot be adapted to a future or stream."""

    pass
