"""Wolfe-condition backtracking line search."""

from __future__ import annotations

from typing import Any, Optional

from ..core.vector import Vector, as_vector, check_same_shape, dot
from ..diagnostics.core import curvature_condition
from .backtracking import BacktrackingSearch
from .core import (
    DEFAULT_BETA,
    DEFAULT_C1,
    DEFAULT_C2,
    DEFAULT_MAX_ITER,
    DEFAULT_MIN_STEP,
    DEFAULT_STEP_SCALE,
    GradientFunction,
    ValueFunction,
    WolfeConfig,
)


class WolfeSearch(BacktrackingSearch):
    """
    Backtracking search enforcing sufficient decrease and curvature.

    Each trial step ``alpha`` must first satisfy sufficient decrease,

        f(x0) - f(x0 + alpha d) >= -c1 * alpha * (g0 . d)

    and only then is the gradient evaluated at the trial point to check the
    one-sided curvature condition

        grad f(x0 + alpha d) . d >= c2 * (g0 . d)

    Points failing the first test never cost a gradient evaluation.
    Returns ``0.0`` when no step passes both tests.
    """

    config: WolfeConfig

    def __init__(
        self,
        value_fn: ValueFunction,
        grad_fn: GradientFunction,
        *,
        step_scale: float = DEFAULT_STEP_SCALE,
        min_step: float = DEFAULT_MIN_STEP,
        beta: float = DEFAULT_BETA,
        c1: float = DEFAULT_C1,
        c2: float = DEFAULT_C2,
        max_iter: int = DEFAULT_MAX_ITER,
    ) -> None:
        if not callable(grad_fn):
            raise TypeError(f"grad_fn must be callable, got {type(grad_fn).__name__}.")
        super().__init__(
            value_fn,
            WolfeConfig(
                step_scale=step_scale,
                min_step=min_step,
                beta=beta,
                c1=c1,
                c2=c2,
                max_iter=max_iter,
            ),
        )
        self.grad_fn = grad_fn

    def _accept_point(
        self,
        x: Vector,
        direction: Vector,
        grad_dot_dir: float,
    ) -> tuple[bool, Optional[Vector]]:
        grad = as_vector(self.grad_fn(x), like=x)
        check_same_shape(point=x, grad=grad)
        return curvature_condition(dot(grad, direction), grad_dot_dir, self.config.c2), grad


def wolfe_search(
    value_fn: ValueFunction,
    grad_fn: GradientFunction,
    init_value: float,
    init_point: Vector,
    init_grad: Vector,
    direction: Vector,
    **config: Any,
) -> float:
    """One-shot Wolfe search; ``config`` takes the WolfeSearch keywords."""
    search = WolfeSearch(value_fn, grad_fn, **config)
    return search.search(init_value, init_point, init_grad, direction)


__all__ = ["WolfeSearch", "wolfe_search"]
