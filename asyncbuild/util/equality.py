"""
Value comparison helpers shared by the builder and the initializer.
"""

from typing import Any


def same_value(a: Any, b: Any) -> bool:
    """
    Identity-or-equality comparison that never raises.

    Values whose ``==`` is not a plain truth value (arrays, for example) only
    compare equal when they are the same object.
    """
    if a is b:
        return True
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        return False
