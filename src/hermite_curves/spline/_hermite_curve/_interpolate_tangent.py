from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from ...geometry import normalize, perpendicular
from ._hermite_basis import hermite_basis_gradient
from ._segment_parameters import segment_parameters

if TYPE_CHECKING:
    from ._control_point import ControlPoint


def interpolate_tangent(
    cp0: ControlPoint,
    cp1: ControlPoint,
    u: Union[float, Tensor],
) -> Tensor:
    """
    Unit normal of the Hermite segment from ``cp0`` to ``cp1``.

    The curve gradient g = dH/du is rotated by -90 degrees to (g.y, -g.x)
    and scaled to unit length, so the result is the normal of the curve
    despite the function's name. Where the gradient vanishes the zero
    vector is returned.

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
        Unit normals, shape (*segment_shape, *u_shape, 2).
    """
    gradient = hermite_basis_gradient(*segment_parameters(cp0, cp1, u))

    return normalize(perpendicular(gradient))
