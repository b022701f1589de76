"""
AsyncBuild Builder
==================

The subscription lifecycle state machine and its configuration.
"""

from .config import AsyncConfig
from .controller import SubscriptionController
from .snapshot import Snapshot

__all__ = ["AsyncConfig", "Snapshot", "SubscriptionController"]
