"""Cubic Hermite basis on the unit interval."""

from torch import Tensor

from ...geometry import add, scale


def hermite_basis(
    u: Tensor,
    p0: Tensor,
    p1: Tensor,
    pt0: Tensor,
    pt1: Tensor,
) -> Tensor:
    """
    Evaluate a cubic Hermite segment at u in [0, 1].

    H(u) = (2u^3 - 3u^2 + 1)*p0 + (-2u^3 + 3u^2)*p1
         + (u^3 - 2u^2 + u)*pt0 + (u^3 - u^2)*pt1

    All arguments broadcast elementwise, so each coordinate axis is
    interpolated independently.
    """
    u2 = u * u
    u3 = u2 * u

    h_00 = 2 * u3 - 3 * u2 + 1
    h_01 = -2 * u3 + 3 * u2
    h_10 = u3 - 2 * u2 + u
    h_11 = u3 - u2

    return add(
        add(scale(p0, h_00), scale(p1, h_01)),
        add(scale(pt0, h_10), scale(pt1, h_11)),
    )


def hermite_basis_gradient(
    u: Tensor,
    p0: Tensor,
    p1: Tensor,
    pt0: Tensor,
    pt1: Tensor,
) -> Tensor:
    """
    First derivative dH/du of a cubic Hermite segment.

    H'(u) = 3u^2*(2p0 - 2p1 + pt0 + pt1) - 2u*(3p0 - 3p1 + 2pt0 + pt1) + pt0
    """
    return (
        3 * u * u * (2 * p0 - 2 * p1 + pt0 + pt1)
        - 2 * u * (3 * p0 - 3 * p1 + 2 * pt0 + pt1)
        + pt0
    )
