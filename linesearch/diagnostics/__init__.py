"""Diagnostics and debugging utilities for linesearch."""

from .core import (
    assert_descent_direction,
    curvature_condition,
    is_descent_direction,
    sufficient_decrease,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    reset_debug_mode,
    set_debug_enabled,
)

__all__ = [
    "sufficient_decrease",
    "curvature_condition",
    "is_descent_direction",
    "assert_descent_direction",
    "is_debug_enabled",
    "set_debug_enabled",
    "reset_debug_mode",
    "debug_context",
]
