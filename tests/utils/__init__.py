"""
Test utilities for AsyncBuild.

This package contains in-memory futures, streams and a render recorder used to
drive the state machines without a rendering layer.
"""

from .fakes import (
    Completer,
    FakeFuture,
    FakeStream,
    FakeSubscription,
    RenderRecorder,
    ReportedError,
    StreamController,
    ValueStreamController,
    completed,
)

__all__ = [
    "Completer",
    "FakeFuture",
    "FakeStream",
    "FakeSubscription",
    "RenderRecorder",
    "ReportedError",
    "StreamController",
    "ValueStreamController",
    "completed",
]
