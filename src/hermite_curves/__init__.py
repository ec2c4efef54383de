"""hermite_curves: interactive piecewise cubic Hermite curves on PyTorch tensors."""

from . import (
    geometry,
    spline,
)

__all__ = [
    "geometry",
    "spline",
]

__version__ = "0.1.0"
