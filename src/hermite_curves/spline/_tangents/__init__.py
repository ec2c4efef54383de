"""Tangent generation for Hermite curves from control-point positions."""

from ._clamped_end_tangents import clamped_end_tangents_1d
from ._natural_spline_tangents import natural_spline_tangents_1d

__all__ = [
    "clamped_end_tangents_1d",
    "natural_spline_tangents_1d",
]
