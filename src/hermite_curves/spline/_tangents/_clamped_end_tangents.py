"""Tangents with caller-supplied derivatives at both ends."""

from typing import Union

import torch
from torch import Tensor

from .._solve_tridiagonal import solve_tridiagonal


def clamped_end_tangents_1d(
    points: Tensor,
    start_tangent: Union[float, Tensor],
    end_tangent: Union[float, Tensor],
) -> Tensor:
    """
    Compute tangents for a clamped-end Hermite spline along one axis.

    The first and last tangents are fixed to ``start_tangent`` and
    ``end_tangent``. Each interior tangent m[i] satisfies

        m[i-1] + 4*m[i] + m[i+1] = 3*(p[i+1] - p[i-1])

    which makes the second derivative continuous across the knots.

    Parameters
    ----------
    points : Tensor
        Coordinates of the control points along one axis, shape (*batch, n).
        Each batch row is solved as an independent system.
    start_tangent : float or Tensor
        Tangent at the first point, broadcastable to (*batch,).
    end_tangent : float or Tensor
        Tangent at the last point, broadcastable to (*batch,).

    Returns
    -------
    Tensor
        Tangents, shape (*batch, n). Empty, shape (*batch, 0), when fewer
        than 3 points are given.
    """
    n = points.shape[-1]
    batch_shape = points.shape[:-1]

    if n < 3:
        return points.new_empty((*batch_shape, 0))

    # [0 1 1 ... 1 0]
    zero = points.new_zeros(1)
    lower = torch.cat([zero, points.new_ones(n - 2), zero])

    # [1 4 4 ... 4 1]
    one = points.new_ones(1)
    diag = torch.cat([one, points.new_full((n - 2,), 4.0), one])

    upper = lower

    start = torch.as_tensor(
        start_tangent, dtype=points.dtype, device=points.device
    ).expand(batch_shape)
    end = torch.as_tensor(
        end_tangent, dtype=points.dtype, device=points.device
    ).expand(batch_shape)

    # [t0, 3(p2 - p0), 3(p3 - p1), ..., tn]
    rhs = torch.cat(
        [
            start.unsqueeze(-1),
            3 * (points[..., 2:] - points[..., :-2]),
            end.unsqueeze(-1),
        ],
        dim=-1,
    )

    return solve_tridiagonal(lower, diag, upper, rhs)
