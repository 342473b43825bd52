"""Armijo backtracking line search."""

from __future__ import annotations

from typing import Any

from ..core.vector import Vector
from .backtracking import BacktrackingSearch
from .core import (
    DEFAULT_BETA,
    DEFAULT_C1,
    DEFAULT_MAX_ITER,
    DEFAULT_MIN_STEP,
    DEFAULT_STEP_SCALE,
    ArmijoConfig,
    ValueFunction,
)


class ArmijoSearch(BacktrackingSearch):
    """
    Backtracking search enforcing only sufficient decrease.

    A trial step ``alpha`` is accepted as soon as

        f(x0) - f(x0 + alpha d) >= -c1 * alpha * (g0 . d)

    Steps shrink as ``beta**m * step_scale``. If no step is accepted before
    ``max_iter`` trials or before the step falls to ``min_step``, the search
    returns ``0.0``.

    Example
    -------
    >>> import numpy as np
    >>> search = ArmijoSearch(lambda x: float(x @ x))
    >>> search.search(4.0, np.array([2.0]), np.array([4.0]), np.array([-1.0]))
    1.0
    """

    config: ArmijoConfig

    def __init__(
        self,
        value_fn: ValueFunction,
        *,
        step_scale: float = DEFAULT_STEP_SCALE,
        min_step: float = DEFAULT_MIN_STEP,
        beta: float = DEFAULT_BETA,
        c1: float = DEFAULT_C1,
        max_iter: int = DEFAULT_MAX_ITER,
    ) -> None:
        super().__init__(
            value_fn,
            ArmijoConfig(
                step_scale=step_scale,
                min_step=min_step,
                beta=beta,
                c1=c1,
                max_iter=max_iter,
            ),
        )


def armijo_search(
    value_fn: ValueFunction,
    init_value: float,
    init_point: Vector,
    init_grad: Vector,
    direction: Vector,
    **config: Any,
) -> float:
    """One-shot Armijo search; ``config`` takes the ArmijoSearch keywords."""
    return ArmijoSearch(value_fn, **config).search(init_value, init_point, init_grad, direction)


__all__ = ["ArmijoSearch", "armijo_search"]
