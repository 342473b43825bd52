"""Geometric backtracking shared by the Armijo and Wolfe searches."""

from __future__ import annotations

import math
from typing import Iterator, Optional

from ..core.vector import (
    Vector,
    check_same_shape,
    coerce_vectors,
    dot,
    to_scalar,
    trial_point,
)
from ..diagnostics.core import sufficient_decrease
from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from .core import ArmijoConfig, LineSearchResult, Status, ValueFunction

logger = get_logger(__name__)


def backtracking_steps(
    step_scale: float,
    beta: float,
    min_step: float,
    max_iter: int,
) -> Iterator[float]:
    """
    Yield the trial step lengths ``beta**m * step_scale``.

    The sequence ends after ``max_iter`` steps, or as soon as the step just
    yielded is at or below ``min_step``. That last step is still yielded, so
    the first step is always produced when ``max_iter >= 1``. A growing
    schedule (``|beta| > 1``) also ends once the step overflows.

    >>> list(backtracking_steps(1.0, 0.5, 0.1, 100))
    [1.0, 0.5, 0.25, 0.125, 0.0625]
    """
    previous: Optional[float] = None
    for m in range(max_iter):
        if previous is not None and not previous > min_step:
            return
        try:
            previous = beta**m * step_scale
        except OverflowError:
            return
        if not math.isfinite(previous):
            return
        yield previous


class BacktrackingSearch:
    """
    Base for searches that try ``beta**m * step_scale`` until one is accepted.

    Subclasses bind their evaluators at construction and may add a second
    acceptance gate through :meth:`_accept_point`, which is only consulted
    for trial points that already satisfy sufficient decrease.
    """

    config: ArmijoConfig

    def __init__(self, value_fn: ValueFunction, config: ArmijoConfig) -> None:
        if not callable(value_fn):
            raise TypeError(f"value_fn must be callable, got {type(value_fn).__name__}.")
        self.value_fn = value_fn
        self.config = config

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config!r})"

    def search(
        self,
        init_value: float,
        init_point: Vector,
        init_grad: Vector,
        direction: Vector,
    ) -> float:
        """
        Return an acceptable step length along ``direction``, or ``0.0``.

        Parameters
        ----------
        init_value:
            Objective value at ``init_point``.
        init_point:
            Starting point.
        init_grad:
            Gradient at ``init_point``.
        direction:
            Search direction, normally a descent direction.

        Raises
        ------
        InvalidArgumentError
            If ``config.step_scale <= 0``.
        DimensionMismatchError
            If the three vectors do not share one shape.
        """
        return self.run(init_value, init_point, init_grad, direction).alpha

    def run(
        self,
        init_value: float,
        init_point: Vector,
        init_grad: Vector,
        direction: Vector,
    ) -> LineSearchResult:
        """Like :meth:`search` but return the full :class:`LineSearchResult`."""
        cfg = self.config
        cfg.validate()
        init_value = to_scalar(init_value)
        init_point, init_grad, direction = coerce_vectors(init_point, init_grad, direction)
        check_same_shape(init_point=init_point, init_grad=init_grad, direction=direction)

        grad_dot_dir = dot(init_grad, direction)
        if not grad_dot_dir < 0:
            logger.warning(
                "Direction is not a descent direction (grad . direction = %.6e).",
                grad_dot_dir,
            )

        debug = is_debug_enabled()
        if debug:
            logger.debug("%s from value %.6e", type(self).__name__, init_value)

        nit = nfev = njev = 0
        steps = backtracking_steps(cfg.step_scale, cfg.beta, cfg.min_step, cfg.max_iter)
        for alpha in steps:
            nit += 1
            x = trial_point(init_point, alpha, direction)
            value = to_scalar(self.value_fn(x))
            nfev += 1

            if debug:
                away = cfg.c1 * alpha * grad_dot_dir
                logger.debug(
                    "alpha: %.6e, init_val: %.6e, curr_val: %.6e, away: %.6e, target: %.6e",
                    alpha,
                    init_value,
                    value,
                    away,
                    init_value + away,
                )

            if not sufficient_decrease(init_value, value, alpha, grad_dot_dir, cfg.c1):
                continue

            accepted, grad = self._accept_point(x, direction, grad_dot_dir)
            if grad is not None:
                njev += 1
            if accepted:
                if debug:
                    logger.debug("accepted alpha %.6e after %d trial(s)", alpha, nit)
                return LineSearchResult(
                    alpha=alpha,
                    status=Status.ACCEPTED,
                    nit=nit,
                    nfev=nfev,
                    njev=njev,
                    value=value,
                    grad=grad,
                )

        if debug:
            logger.debug("no acceptable step after %d trial(s)", nit)
        return LineSearchResult(
            alpha=0.0,
            status=Status.EXHAUSTED,
            nit=nit,
            nfev=nfev,
            njev=njev,
        )

    def _accept_point(
        self,
        x: Vector,
        direction: Vector,
        grad_dot_dir: float,
    ) -> tuple[bool, Optional[Vector]]:
        """Second acceptance gate; returns (accepted, gradient evaluated at x)."""
        return True, None


__all__ = ["BacktrackingSearch", "backtracking_steps"]
