"""
AsyncBuild Snapshot
===================

The render-visible state of a SubscriptionController.
"""

from dataclasses import dataclass
from typing import Any

from ..types.common_types import EMPTY, Trace


@dataclass
class Snapshot:
    """
    Mutable snapshot owned by one SubscriptionController.

    ``last_value`` and ``last_error`` hold EMPTY until something is recorded.
    ``has_fired`` and ``last_error`` are independent: a stream may emit values
    and error later.
    """

    last_value: Any = EMPTY
    last_error: Any = EMPTY
    last_trace: Trace = None
    has_fired: bool = False
    is_closed: bool = False

    @property
    def has_error(self) -> bool:
        return self.last_error is not EMPTY

    def clear(self) -> None:
        self.last_value = EMPTY
        self.last_error = EMPTY
        self.last_trace = None
        self.has_fired = False
