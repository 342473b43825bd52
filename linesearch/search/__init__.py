"""Backtracking line searches (Armijo and Wolfe).

Example
-------
>>> import numpy as np
>>> from linesearch.search import WolfeSearch
>>> f = lambda x: float(x @ x)
>>> g = lambda x: 2 * x
>>> x0 = np.array([2.0])
>>> WolfeSearch(f, g).search(f(x0), x0, g(x0), -g(x0))
0.5
"""

from .armijo import ArmijoSearch, armijo_search
from .backtracking import BacktrackingSearch, backtracking_steps
from .core import (
    DEFAULT_BETA,
    DEFAULT_C1,
    DEFAULT_C2,
    DEFAULT_MAX_ITER,
    DEFAULT_MIN_STEP,
    DEFAULT_STEP_SCALE,
    ArmijoConfig,
    GradientFunction,
    LineSearchResult,
    Status,
    ValueFunction,
    WolfeConfig,
)
from .wolfe import WolfeSearch, wolfe_search

__all__ = [
    "DEFAULT_BETA",
    "DEFAULT_C1",
    "DEFAULT_C2",
    "DEFAULT_MAX_ITER",
    "DEFAULT_MIN_STEP",
    "DEFAULT_STEP_SCALE",
    "ArmijoConfig",
    "ArmijoSearch",
    "BacktrackingSearch",
    "GradientFunction",
    "LineSearchResult",
    "Status",
    "ValueFunction",
    "WolfeConfig",
    "WolfeSearch",
    "armijo_search",
    "backtracking_steps",
    "wolfe_search",
]
