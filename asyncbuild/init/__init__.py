"""
AsyncBuild Initializer
======================

Run a construction function once per distinct configuration.
"""

from .config import MAX_INIT_ARGS, InitConfig
from .initializer import MemoizedInitializer

__all__ = ["InitConfig", "MemoizedInitializer", "MAX_INIT_ARGS"]
