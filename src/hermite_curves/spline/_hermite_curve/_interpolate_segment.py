from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from ._hermite_basis import hermite_basis
from ._segment_parameters import segment_parameters

if TYPE_CHECKING:
    from ._control_point import ControlPoint


def interpolate_segment(
    cp0: ControlPoint,
    cp1: ControlPoint,
    u: Union[float, Tensor],
) -> Tensor:
    """
    Position on the Hermite segment from ``cp0`` to ``cp1``.

    Parameters
    ----------
    cp0 : ControlPoint
        Start of the segment(s), batch size (*segment_shape).
    cp1 : ControlPoint
        End of the segment(s), same batch size as ``cp0``.
    u : float or Tensor
        Segment parameter(s), clamped to [0, 1].

    Returns
    -------
    Tensor
        Positions, shape (*segment_shape, *u_shape, 2).
    """
    return hermite_basis(*segment_parameters(cp0, cp1, u))
