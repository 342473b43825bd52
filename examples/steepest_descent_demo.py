"""
Example: steepest descent on the Rosenbrock function

Shows the two line searches driving a bare-bones steepest descent loop, and
how a zero step length is used to stop the loop.
"""

import numpy as np

from linesearch import ArmijoSearch, WolfeSearch


def rosen(x: np.ndarray) -> float:
    return float((1 - x[0]) ** 2 + 100 * (x[1] - x[0] ** 2) ** 2)


def rosen_grad(x: np.ndarray) -> np.ndarray:
    return np.array(
        [
            -2 * (1 - x[0]) - 400 * x[0] * (x[1] - x[0] ** 2),
            200 * (x[1] - x[0] ** 2),
        ]
    )


def descend(search, x0: np.ndarray, iterations: int = 200) -> tuple[np.ndarray, int]:
    x = x0.copy()
    for it in range(iterations):
        grad = rosen_grad(x)
        if np.linalg.norm(grad) < 1e-8:
            return x, it
        direction = -grad
        alpha = search.search(rosen(x), x, grad, direction)
        if alpha == 0.0:
            return x, it
        x = x + alpha * direction
    return x, iterations


def main() -> None:
    x0 = np.array([-1.2, 1.0])
    print(f"Start: x = {x0}, f = {rosen(x0):.6f}")

    armijo = ArmijoSearch(rosen, min_step=1e-10)
    wolfe = WolfeSearch(rosen, rosen_grad, min_step=1e-10, c2=0.9)

    for name, search in (("Armijo", armijo), ("Wolfe", wolfe)):
        x, iterations = descend(search, x0)
        print(f"{name}: {iterations} iterations, x = {x}, f = {rosen(x):.6f}")

    print(f"Final value below start: {rosen(descend(wolfe, x0)[0]) < rosen(x0)}")


if __name__ == "__main__":
    main()
