"""Pytest configuration and shared fixtures for linesearch tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- Evaluation-counting wrappers for objectives and gradients
- A fixture that restores logging and debug mode after a test
"""

import logging
import os
from typing import Callable, Generator

import numpy as np
import pytest
import torch

from linesearch.diagnostics import is_debug_enabled, set_debug_enabled
from linesearch.logging import configure_logging


def _seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG seeded from TEST_RNG_SEED (default 0)."""
    return np.random.default_rng(_seed())


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Provide a deterministic CPU torch RNG seeded from TEST_RNG_SEED."""
    generator = torch.Generator()
    generator.manual_seed(_seed())
    return generator


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Set global numpy and torch seeds for every test."""
    np.random.seed(_seed())
    torch.manual_seed(_seed())


class CountingCall:
    """Wrap a callable and record every point it is evaluated at."""

    def __init__(self, fn: Callable) -> None:
        self.fn = fn
        self.points: list = []

    def __call__(self, x):
        self.points.append(x.clone() if isinstance(x, torch.Tensor) else np.array(x))
        return self.fn(x)

    @property
    def calls(self) -> int:
        return len(self.points)


@pytest.fixture
def counting() -> Callable[[Callable], CountingCall]:
    """Factory wrapping a function in a CountingCall."""
    return CountingCall


@pytest.fixture
def restore_diagnostics() -> Generator[None, None, None]:
    """Put logging back to WARNING on stderr and restore debug mode."""
    original = is_debug_enabled()
    try:
        yield
    finally:
        set_debug_enabled(original)
        configure_logging(level=logging.WARNING)
