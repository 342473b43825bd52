"""Core abstractions shared by the line searches."""

from .vector import (
    Vector,
    as_vector,
    check_same_shape,
    coerce_vectors,
    dot,
    is_tensor,
    shape_of,
    to_scalar,
    trial_point,
)

__all__ = [
    "Vector",
    "as_vector",
    "check_same_shape",
    "coerce_vectors",
    "dot",
    "is_tensor",
    "shape_of",
    "to_scalar",
    "trial_point",
]
