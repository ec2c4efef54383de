"""Vector helpers for tensors whose last dimension holds (x, y)."""

from typing import Union

import torch
from torch import Tensor


def add(a: Tensor, b: Tensor) -> Tensor:
    return a + b


def subtract(a: Tensor, b: Tensor) -> Tensor:
    return a - b


def scale(v: Tensor, factor: Union[float, Tensor]) -> Tensor:
    return v * factor


def length(v: Tensor) -> Tensor:
    """Euclidean length over the last dimension, shape ``v.shape[:-1]``."""
    return torch.linalg.vector_norm(v, dim=-1)


def normalize(v: Tensor) -> Tensor:
    """
    Scale vectors to unit length.

    Zero vectors are returned unchanged instead of producing NaN.

    Parameters
    ----------
    v : Tensor
        Vectors, shape (*batch, 2).

    Returns
    -------
    Tensor
        Unit vectors, shape (*batch, 2).
    """
    norm = length(v).unsqueeze(-1)
    return scale(v, 1 / torch.where(norm == 0, torch.ones_like(norm), norm))


def perpendicular(v: Tensor) -> Tensor:
    """Rotate vectors by -90 degrees: (x, y) -> (y, -x)."""
    return torch.stack([v[..., 1], -v[..., 0]], dim=-1)
