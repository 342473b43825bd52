"""Configuration and result types shared by the line searches."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from ..core.vector import Vector
from ..exceptions import InvalidArgumentError
from ..logging import get_logger

ValueFunction = Callable[[Vector], Any]
GradientFunction = Callable[[Vector], Vector]

DEFAULT_STEP_SCALE = 1.0
DEFAULT_MIN_STEP = 0.1
DEFAULT_BETA = 0.5
DEFAULT_C1 = 1e-5
DEFAULT_C2 = 0.9
DEFAULT_MAX_ITER = 10_000

logger = get_logger(__name__)


class Status(Enum):
    """Outcome of a line search."""

    ACCEPTED = "accepted"
    EXHAUSTED = "exhausted"


@dataclass
class ArmijoConfig:
    """
    Tunable parameters of a backtracking search.

    Trial step lengths are ``beta**m * step_scale`` for ``m = 0, 1, ...``.
    The search stops after ``max_iter`` trials, or once the last trial step
    is at or below ``min_step``.

    The fields may be changed between searches; they are validated at the
    start of every search rather than on assignment.
    """

    step_scale: float = DEFAULT_STEP_SCALE
    min_step: float = DEFAULT_MIN_STEP
    beta: float = DEFAULT_BETA
    c1: float = DEFAULT_C1
    max_iter: int = DEFAULT_MAX_ITER

    def validate(self) -> None:
        """Raise InvalidArgumentError if ``step_scale`` is not positive."""
        if not self.step_scale > 0:
            raise InvalidArgumentError("step_scale", self.step_scale, "> 0")
        if not 0 < self.beta < 1:
            logger.warning(
                "beta=%s is outside (0, 1); trial steps will not shrink geometrically.",
                self.beta,
            )


@dataclass
class WolfeConfig(ArmijoConfig):
    """Backtracking parameters plus the curvature constant ``c2``."""

    c2: float = DEFAULT_C2


@dataclass
class LineSearchResult:
    """
    Full outcome of one search call.

    Attributes:
        alpha: Accepted step length, or ``0.0`` when no step was accepted.
        status: ``Status.ACCEPTED`` or ``Status.EXHAUSTED``.
        nit: Number of trial steps tried.
        nfev: Number of objective evaluations.
        njev: Number of gradient evaluations.
        value: Objective value at the accepted point.
        grad: Gradient at the accepted point (Wolfe search only).
    """

    alpha: float
    status: Status
    nit: int
    nfev: int
    njev: int = 0
    value: Optional[float] = None
    grad: Optional[Vector] = None

    @property
    def success(self) -> bool:
        """True when a step length was accepted."""
        return self.status is Status.ACCEPTED


__all__ = [
    "DEFAULT_BETA",
    "DEFAULT_C1",
    "DEFAULT_C2",
    "DEFAULT_MAX_ITER",
    "DEFAULT_MIN_STEP",
    "DEFAULT_STEP_SCALE",
    "ArmijoConfig",
    "GradientFunction",
    "LineSearchResult",
    "Status",
    "ValueFunction",
    "WolfeConfig",
]
