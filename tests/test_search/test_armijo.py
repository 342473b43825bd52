import logging
from io import StringIO

import numpy as np
import pytest

from linesearch.diagnostics import debug_context, sufficient_decrease
from linesearch.exceptions import DimensionMismatchError, InvalidArgumentError
from linesearch.logging import configure_logging
from linesearch.search import ArmijoSearch, LineSearchResult, Status, armijo_search


def square(x: np.ndarray) -> float:
    return float(x @ x)


def rosen(x: np.ndarray) -> float:
    return (1 - x[0]) ** 2 + 100 * (x[1] - x[0] ** 2) ** 2


def rosen_grad(x: np.ndarray) -> np.ndarray:
    return np.array(
        [
            -2 * (1 - x[0]) - 400 * x[0] * (x[1] - x[0] ** 2),
            200 * (x[1] - x[0] ** 2),
        ]
    )


def test_armijo_quadratic_first_step_satisfies_decrease():
    search = ArmijoSearch(square)
    alpha = search.search(4.0, np.array([2.0]), np.array([4.0]), np.array([-1.0]))
    assert alpha == 1.0
    assert (2 - alpha) ** 2 <= 4 + 1e-5 * alpha * (-4)


def test_armijo_default_configuration():
    cfg = ArmijoSearch(square).config
    assert cfg.step_scale == 1.0
    assert cfg.min_step == 0.1
    assert cfg.beta == 0.5
    assert cfg.c1 == 1e-5
    assert cfg.max_iter == 10_000


def test_armijo_backtracks_past_overshoot(counting):
    f = counting(square)
    x0 = np.array([2.0])
    grad = np.array([4.0])
    result = ArmijoSearch(f).run(4.0, x0, grad, -grad)
    # alpha=1 lands on x=-2 with no decrease; alpha=0.5 hits the minimizer.
    assert result.alpha == 0.5
    assert result.status is Status.ACCEPTED
    assert result.success
    assert result.nit == 2
    assert result.nfev == f.calls == 2
    assert result.njev == 0
    assert result.value == 0.0


def test_armijo_rosenbrock_steepest_descent():
    x = np.array([-1.2, 1.0])
    grad = rosen_grad(x)
    direction = -grad
    alpha = ArmijoSearch(rosen, min_step=1e-6).search(rosen(x), x, grad, direction)
    assert alpha == pytest.approx(2.0**-10)
    assert rosen(x + alpha * direction) <= rosen(x) + 1e-5 * alpha * (grad @ direction)


def test_armijo_non_descent_direction_returns_zero(counting):
    f = counting(square)
    alpha = ArmijoSearch(f).search(4.0, np.array([2.0]), np.array([4.0]), np.array([1.0]))
    assert alpha == 0.0
    # Default schedule: 1, 0.5, 0.25, 0.125, 0.0625.
    assert f.calls == 5


def test_armijo_exhausts_iteration_budget_without_raising(counting):
    f = counting(lambda x: 10.0 + float(x[0]))
    search = ArmijoSearch(f, min_step=0.0, max_iter=50)
    result = search.run(10.0, np.array([0.0]), np.array([-1.0]), np.array([1.0]))
    assert result.alpha == 0.0
    assert result.status is Status.EXHAUSTED
    assert result.nit == 50
    assert f.calls == 50


def test_armijo_stops_at_min_step(counting):
    f = counting(lambda x: 100.0)
    search = ArmijoSearch(f, step_scale=0.1, min_step=0.1)
    assert search.search(1.0, np.zeros(2), np.ones(2), -np.ones(2)) == 0.0
    assert f.calls == 1


def test_armijo_zero_max_iter_never_evaluates(counting):
    f = counting(square)
    search = ArmijoSearch(f, max_iter=0)
    assert search.search(4.0, np.array([2.0]), np.array([4.0]), np.array([-1.0])) == 0.0
    assert f.calls == 0


@pytest.mark.parametrize("step_scale", [0.0, -1.0, float("nan")])
def test_armijo_rejects_non_positive_step_scale(counting, step_scale):
    f = counting(square)
    search = ArmijoSearch(f, step_scale=step_scale)
    with pytest.raises(InvalidArgumentError):
        search.search(4.0, np.array([2.0]), np.array([4.0]), np.array([-1.0]))
    assert f.calls == 0


def test_invalid_argument_is_value_error():
    search = ArmijoSearch(square)
    search.config.step_scale = 0.0
    with pytest.raises(ValueError, match="step_scale"):
        search.search(4.0, np.array([2.0]), np.array([4.0]), np.array([-1.0]))


def test_armijo_config_is_mutable_between_calls():
    search = ArmijoSearch(square)
    args = (4.0, np.array([2.0]), np.array([4.0]), np.array([-4.0]))
    assert search.search(*args) == 0.5
    search.config.step_scale = 0.25
    assert search.search(*args) == 0.25


def test_armijo_is_idempotent():
    search = ArmijoSearch(rosen, min_step=1e-6)
    x = np.array([-1.2, 1.0])
    grad = rosen_grad(x)
    first = search.run(rosen(x), x, grad, -grad)
    second = search.run(rosen(x), x, grad, -grad)
    assert isinstance(first, LineSearchResult)
    assert first == second


def test_armijo_does_not_mutate_inputs():
    x = np.array([2.0, -1.0])
    grad = 2 * x
    direction = -grad
    ArmijoSearch(square).search(square(x), x, grad, direction)
    assert np.array_equal(x, [2.0, -1.0])
    assert np.array_equal(direction, [-4.0, 2.0])


def test_armijo_backtracks_past_nan_values():
    def f(x: np.ndarray) -> float:
        return float("nan") if x[0] < 0 else float(x[0] ** 2)

    alpha = ArmijoSearch(f).search(4.0, np.array([2.0]), np.array([4.0]), np.array([-4.0]))
    assert alpha == 0.5


def test_armijo_accepts_negative_infinite_value():
    alpha = ArmijoSearch(lambda x: float("-inf")).search(
        1.0, np.zeros(1), np.ones(1), -np.ones(1)
    )
    assert alpha == 1.0


def test_armijo_growing_schedule_exhausts_without_overflow():
    result = ArmijoSearch(lambda x: 100.0, beta=1.5).run(
        1.0, np.zeros(1), np.ones(1), -np.ones(1)
    )
    assert result.alpha == 0.0
    assert result.status is Status.EXHAUSTED
    # 1.5**m overflows near m=1751, well before max_iter.
    assert 1000 < result.nit == result.nfev < 10_000


def test_armijo_dimension_mismatch_fails_fast(counting):
    f = counting(square)
    with pytest.raises(DimensionMismatchError):
        ArmijoSearch(f).search(1.0, np.zeros(2), np.ones(2), np.ones(3))
    assert f.calls == 0


def test_armijo_propagates_evaluator_errors():
    def f(x: np.ndarray) -> float:
        raise ArithmeticError("outside domain")

    with pytest.raises(ArithmeticError, match="outside domain"):
        ArmijoSearch(f).search(1.0, np.ones(1), np.ones(1), -np.ones(1))


def test_armijo_requires_callable():
    with pytest.raises(TypeError):
        ArmijoSearch(3.0)


def test_armijo_search_function_accepts_overrides():
    alpha = armijo_search(
        square, 4.0, [2.0], [4.0], [-4.0], step_scale=0.5, beta=0.25
    )
    assert alpha == 0.5


def test_armijo_accepted_step_passes_condition_for_random_quadratics(rng):
    for _ in range(10):
        q = rng.normal(size=(3, 3))
        A = q @ q.T + np.eye(3)

        def f(x: np.ndarray) -> float:
            return 0.5 * float(x @ A @ x)

        x0 = rng.normal(size=3)
        grad = A @ x0
        result = ArmijoSearch(f, min_step=1e-8).run(f(x0), x0, grad, -grad)
        assert result.alpha > 0
        assert sufficient_decrease(
            f(x0), f(x0 - result.alpha * grad), result.alpha, float(grad @ -grad), 1e-5
        )


def test_armijo_debug_mode_logs_trial_steps(restore_diagnostics):
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)
    with debug_context(True):
        ArmijoSearch(square).search(4.0, np.array([2.0]), np.array([4.0]), np.array([-4.0]))
    output = stream.getvalue()
    assert "curr_val" in output
    assert "accepted alpha" in output


def test_armijo_warns_on_non_descent_and_bad_beta(restore_diagnostics):
    stream = StringIO()
    configure_logging(level=logging.WARNING, stream=stream)
    search = ArmijoSearch(square, beta=1.5, max_iter=3)
    assert search.search(4.0, np.array([2.0]), np.array([4.0]), np.array([1.0])) == 0.0
    output = stream.getvalue()
    assert "beta=1.5" in output
    assert "not a descent direction" in output
