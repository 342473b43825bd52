"""Vector contract used by the line searches.

A search only needs three things from its vectors: addition, scalar
multiplication and a dot product. NumPy arrays and PyTorch tensors both
provide them; anything else array-like is converted to a float64 array.
Within one call every vector is brought to the same kind so that mixed
inputs (for example a tensor point with a list direction) still work.
"""

from __future__ import annotations

from typing import Any, Union

import numpy as np
import torch

from ..exceptions import DimensionMismatchError

Vector = Union[np.ndarray, torch.Tensor]


def is_tensor(value: Any) -> bool:
    """Return True if ``value`` is a torch tensor."""
    return isinstance(value, torch.Tensor)


def _as_tensor(value: Any, like: torch.Tensor) -> torch.Tensor:
    dtype = like.dtype if like.is_floating_point() else torch.get_default_dtype()
    if isinstance(value, torch.Tensor):
        return value.to(device=like.device, dtype=dtype)
    return torch.as_tensor(np.asarray(value, dtype=float), dtype=dtype, device=like.device)


def as_vector(value: Any, like: Vector | None = None) -> Vector:
    """
    Convert ``value`` to the vector kind of ``like``.

    Parameters
    ----------
    value:
        Array, tensor, sequence or scalar to convert.
    like:
        Reference vector. When it is a tensor the result is a tensor with
        its device and (floating) dtype; otherwise a float64 ndarray.
    """
    if like is None:
        like = value if is_tensor(value) else None
    if like is not None and is_tensor(like):
        return _as_tensor(value, like)
    if is_tensor(value):
        return value.detach().cpu().numpy().astype(float)
    return np.asarray(value, dtype=float)


def coerce_vectors(*values: Any) -> tuple[Vector, ...]:
    """
    Bring all ``values`` to a common vector kind.

    If any value is a torch tensor, the first tensor found sets the dtype
    and device of the result. Otherwise every value becomes a float64
    ndarray.
    """
    reference = next((v for v in values if is_tensor(v)), None)
    return tuple(as_vector(v, like=reference) for v in values)


def shape_of(value: Vector) -> tuple[int, ...]:
    """Return the shape of a vector as a plain tuple of ints."""
    return tuple(int(n) for n in value.shape)


def check_same_shape(**vectors: Vector) -> tuple[int, ...]:
    """
    Validate that all named vectors share one shape.

    Returns
    -------
    tuple[int, ...]
        The common shape.

    Raises
    ------
    DimensionMismatchError
        If the shapes differ.
    """
    shapes = {name: shape_of(vec) for name, vec in vectors.items()}
    distinct = set(shapes.values())
    if len(distinct) > 1:
        raise DimensionMismatchError(shapes)
    return next(iter(distinct)) if distinct else ()


def dot(a: Vector, b: Vector) -> float:
    """Return the dot product of two same-shaped vectors as a float."""
    if is_tensor(a):
        return float(torch.dot(a.reshape(-1), b.reshape(-1)))
    return float(np.dot(np.ravel(a), np.ravel(b)))


def trial_point(origin: Vector, alpha: float, direction: Vector) -> Vector:
    """Return ``origin + alpha * direction`` as a new vector."""
    return origin + alpha * direction


def to_scalar(value: Any) -> float:
    """Convert an objective value (float, NumPy scalar, 0-d tensor) to float."""
    if is_tensor(value):
        if value.numel() != 1:
            raise ValueError(
                f"Objective must return a scalar, got tensor of shape {tuple(value.shape)}."
            )
        return float(value.item())
    arr = np.asarray(value, dtype=float)
    if arr.size != 1:
        raise ValueError(f"Objective must return a scalar, got array of shape {arr.shape}.")
    return float(arr.reshape(()))


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
