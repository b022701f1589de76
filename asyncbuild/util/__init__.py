"""
AsyncBuild Utilities
====================
"""

from .equality import same_value

__all__ = ["same_value"]
