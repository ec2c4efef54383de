"""Two-dimensional vector arithmetic."""

from ._vector import (
    add,
    length,
    normalize,
    perpendicular,
    scale,
    subtract,
)

__all__ = [
    "add",
    "length",
    "normalize",
    "perpendicular",
    "scale",
    "subtract",
]
