from ._spline_error import SplineError


class TridiagonalSystemError(SplineError):
    """Raised when the bands and right-hand side of a tridiagonal system disagree in size."""

    pass
