"""linesearch - Armijo and Wolfe backtracking line searches for NumPy and PyTorch."""

__version__ = "0.1.0"

from .core import Vector, coerce_vectors, dot
from .diagnostics import (
    assert_descent_direction,
    curvature_condition,
    debug_context,
    is_debug_enabled,
    is_descent_direction,
    set_debug_enabled,
    sufficient_decrease,
)
from .exceptions import DimensionMismatchError, InvalidArgumentError, LineSearchError
from .logging import configure_logging, get_logger, set_log_level
from .search import (
    ArmijoConfig,
    ArmijoSearch,
    BacktrackingSearch,
    LineSearchResult,
    Status,
    WolfeConfig,
    WolfeSearch,
    armijo_search,
    backtracking_steps,
    wolfe_search,
)

__all__ = [
    "__version__",
    # Searches
    "ArmijoSearch",
    "WolfeSearch",
    "BacktrackingSearch",
    "armijo_search",
    "wolfe_search",
    "backtracking_steps",
    # Configuration and results
    "ArmijoConfig",
    "WolfeConfig",
    "LineSearchResult",
    "Status",
    # Vectors
    "Vector",
    "coerce_vectors",
    "dot",
    # Errors
    "LineSearchError",
    "InvalidArgumentError",
    "DimensionMismatchError",
    # Diagnostics
    "sufficient_decrease",
    "curvature_condition",
    "is_descent_direction",
    "assert_descent_direction",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
