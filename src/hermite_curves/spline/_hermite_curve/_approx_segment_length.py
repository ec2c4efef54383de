"""Polyline approximation of Hermite segment length."""

from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

from ...geometry import length, subtract
from ._interpolate_segment import interpolate_segment

if TYPE_CHECKING:
    from ._control_point import ControlPoint


def approx_segment_length(
    cp0: ControlPoint,
    cp1: ControlPoint,
    num_samples: int = 11,
) -> Tensor:
    """
    Approximate the length of a Hermite segment by a sampled polyline.

    The segment is evaluated at ``num_samples`` evenly spaced parameters in
    [0, 1] and the distances between consecutive samples are summed. The
    result never exceeds the true arc length and the gap grows with
    curvature.

    Parameters
    ----------
    cp0 : ControlPoint
        Start of the segment(s), batch size (*segment_shape).
    cp1 : ControlPoint
        End of the segment(s), same batch size as ``cp0``.
    num_samples : int
        Number of samples along the segment. Default is 11, a step of 0.1.

    Returns
    -------
    Tensor
        Approximate lengths, shape (*segment_shape).
    """
    if num_samples < 2:
        raise ValueError(f"num_samples must be at least 2, got {num_samples}")

    u = torch.linspace(
        0.0,
        1.0,
        num_samples,
        dtype=cp0.position.dtype,
        device=cp0.position.device,
    )

    samples = interpolate_segment(cp0, cp1, u)

    chords = subtract(samples[..., 1:, :], samples[..., :-1, :])

    return length(chords).sum(dim=-1)
