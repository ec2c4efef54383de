"""Piecewise cubic Hermite curves for PyTorch tensors.

Control points carry a position and a tangent. Tangents can be given by
hand or generated from the positions by solving a tridiagonal system,
either with clamped end tangents or with natural (zero curvature) ends.
The curve is then sampled segment by segment into positions and unit
normals for rendering.

Convenience Functions
---------------------
hermite_curve
    Create a sampled curve from position and tangent tensors.

Curves
------
HermiteCurve
    Ordered control points with tangent generation and sampling.
ControlPoint
    Position and tangent of one knot, or of a batch of knots.

Segment Evaluation
------------------
hermite_basis
    Cubic Hermite position on the unit interval.
hermite_basis_gradient
    First derivative of the cubic Hermite basis.
interpolate_segment
    Position on a segment between two control points.
interpolate_tangent
    Unit normal on a segment between two control points.
approx_segment_length
    Polyline approximation of segment length.

Tangent Generation
------------------
clamped_end_tangents_1d
    Tangents with fixed end tangents along one axis.
natural_spline_tangents_1d
    Tangents with natural end conditions along one axis.
solve_tridiagonal
    Thomas algorithm for tridiagonal systems.

Exceptions and Warnings
-----------------------
SplineError
    Base exception for spline operations.
TridiagonalSystemError
    Inconsistent sizes in a tridiagonal system.
SingularSystemWarning
    Tridiagonal solve produced non-finite values.
"""

from ._hermite_curve import (
    ControlPoint,
    HermiteCurve,
    approx_segment_length,
    hermite_basis,
    hermite_basis_gradient,
    hermite_curve,
    interpolate_segment,
    interpolate_tangent,
)
from ._singular_system_warning import SingularSystemWarning
from ._solve_tridiagonal import solve_tridiagonal
from ._spline_error import SplineError
from ._tangents import clamped_end_tangents_1d, natural_spline_tangents_1d
from ._tridiagonal_system_error import TridiagonalSystemError

__all__ = [
    "ControlPoint",
    "HermiteCurve",
    "SingularSystemWarning",
    "SplineError",
    "TridiagonalSystemError",
    "approx_segment_length",
    "clamped_end_tangents_1d",
    "hermite_basis",
    "hermite_basis_gradient",
    "hermite_curve",
    "interpolate_segment",
    "interpolate_tangent",
    "natural_spline_tangents_1d",
    "solve_tridiagonal",
]
