"""Checks for the acceptance conditions used by the line searches."""

from __future__ import annotations

from ..core.vector import Vector, coerce_vectors, dot


def sufficient_decrease(
    init_value: float,
    value: float,
    alpha: float,
    grad_dot_dir: float,
    c1: float,
) -> bool:
    """
    Return whether the Armijo (sufficient decrease) condition holds.

    The test is ``init_value - value >= -c1 * alpha * grad_dot_dir``, which
    for a descent direction (``grad_dot_dir < 0``) demands that the trial
    value lies strictly below the starting value. Plain IEEE comparison
    applies: a NaN trial value fails, -inf passes.

    Parameters
    ----------
    init_value:
        Objective value at the starting point.
    value:
        Objective value at the trial point.
    alpha:
        Trial step length.
    grad_dot_dir:
        Directional derivative at the starting point.
    c1:
        Sufficient-decrease constant.
    """
    return init_value - value >= -c1 * alpha * grad_dot_dir


def curvature_condition(
    trial_dot_dir: float,
    grad_dot_dir: float,
    c2: float,
) -> bool:
    """
    Return whether the one-sided curvature condition holds.

    The test is ``trial_dot_dir >= c2 * grad_dot_dir`` where
    ``trial_dot_dir`` is the directional derivative at the trial point.
    Unlike the strong Wolfe form there is no absolute value, so large
    positive slopes past the minimizer (+inf included) are accepted.
    """
    return trial_dot_dir >= c2 * grad_dot_dir


def is_descent_direction(grad: Vector, direction: Vector) -> bool:
    """Return True if ``grad . direction < 0``."""
    grad, direction = coerce_vectors(grad, direction)
    return dot(grad, direction) < 0


def assert_descent_direction(grad: Vector, direction: Vector) -> None:
    """
    Assert that ``direction`` points downhill.

    Raises
    ------
    ValueError
        If ``grad . direction >= 0``.
    """
    grad, direction = coerce_vectors(grad, direction)
    slope = dot(grad, direction)
    if not slope < 0:
        raise ValueError(
            f"Search direction must be a descent direction, got grad . direction = {slope:.6e}."
        )


__all__ = [
    "assert_descent_direction",
    "curvature_condition",
    "is_descent_direction",
    "sufficient_decrease",
]
