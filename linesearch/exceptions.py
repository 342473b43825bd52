"""Exception types raised by the line searches."""

from __future__ import annotations


class LineSearchError(Exception):
    """Base class for linesearch errors."""


class InvalidArgumentError(LineSearchError, ValueError):
    """Raised when a search configuration value is out of range."""

    def __init__(self, name: str, value: object, requirement: str) -> None:
        super().__init__(f"{name} must be {requirement}, got {value}.")
        self.name = name
        self.value = value


class DimensionMismatchError(LineSearchError, ValueError):
    """Raised when the vectors of a search call do not share one shape."""

    def __init__(self, shapes: dict[str, tuple[int, ...]]) -> None:
        listing = ", ".join(f"{name}={shape}" for name, shape in shapes.items())
        super().__init__(f"Vector shapes must match, got {listing}.")
        self.shapes = dict(shapes)


__all__ = ["LineSearchError", "InvalidArgumentError", "DimensionMismatchError"]
