"""Tangents with zero second derivative at both ends."""

import torch
from torch import Tensor

from .._solve_tridiagonal import solve_tridiagonal


def natural_spline_tangents_1d(points: Tensor) -> Tensor:
    """
    Compute tangents for a natural Hermite spline along one axis.

    The end rows encode a vanishing second derivative,

        2*m[0] + m[1] = 3*(p[1] - p[0])
        m[n-2] + 2*m[n-1] = 3*(p[n-1] - p[n-2])

    and interior rows are the same as for the clamped-end spline.

    Parameters
    ----------
    points : Tensor
        Coordinates of the control points along one axis, shape (*batch, n).

    Returns
    -------
    Tensor
        Tangents, shape (*batch, n). Empty, shape (*batch, 0), when fewer
        than 3 points are given.
    """
    n = points.shape[-1]

    if n < 3:
        return points.new_empty((*points.shape[:-1], 0))

    # [0 1 1 ... 1 1]
    lower = torch.cat([points.new_zeros(1), points.new_ones(n - 1)])

    # [2 4 4 ... 4 2]
    two = points.new_full((1,), 2.0)
    diag = torch.cat([two, points.new_full((n - 2,), 4.0), two])

    # [1 1 1 ... 1 0]
    upper = torch.cat([points.new_ones(n - 1), points.new_zeros(1)])

    # [3(p1 - p0), 3(p2 - p0), ..., 3(pn - pn-1)]
    rhs = torch.cat(
        [
            3 * (points[..., 1:2] - points[..., 0:1]),
            3 * (points[..., 2:] - points[..., :-2]),
            3 * (points[..., -1:] - points[..., -2:-1]),
        ],
        dim=-1,
    )

    return solve_tridiagonal(lower, diag, upper, rhs)
