"""Editable cubic Hermite curve and its segment evaluation."""

from ._approx_segment_length import approx_segment_length
from ._control_point import ControlPoint
from ._hermite_basis import hermite_basis, hermite_basis_gradient
from ._hermite_curve import HermiteCurve, hermite_curve
from ._interpolate_segment import interpolate_segment
from ._interpolate_tangent import interpolate_tangent

__all__ = [
    "ControlPoint",
    "HermiteCurve",
    "approx_segment_length",
    "hermite_basis",
    "hermite_basis_gradient",
    "hermite_curve",
    "interpolate_segment",
    "interpolate_tangent",
]
