"""Debug mode management for linesearch."""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "LINESEARCH_DEBUG"
_TRUTHY = ("1", "true", "yes", "on")


def _env_flag() -> bool:
    return os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = _env_flag()


def is_debug_enabled() -> bool:
    """
    Return whether debug mode is currently enabled.

    Debug mode can be toggled via set_debug_enabled(...) or the
    LINESEARCH_DEBUG environment variable. While it is on, every trial
    step of a search is written to the package logger at DEBUG level.

    Returns
    -------
    bool
        True if debug mode is enabled, False otherwise.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable debug mode.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


def reset_debug_mode() -> bool:
    """Re-read LINESEARCH_DEBUG and return the resulting debug state."""
    global _debug_enabled
    _debug_enabled = _env_flag()
    return _debug_enabled


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Context manager to temporarily enable or disable debug mode.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode within the context.

    Example
    -------
    >>> with debug_context(True):
    ...     # trial steps are logged inside the block
    ...     pass
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
