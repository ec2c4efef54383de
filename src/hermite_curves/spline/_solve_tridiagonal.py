import warnings

import torch
from torch import Tensor

from ._singular_system_warning import SingularSystemWarning
from ._tridiagonal_system_error import TridiagonalSystemError


def solve_tridiagonal(
    lower: Tensor,
    diag: Tensor,
    upper: Tensor,
    rhs: Tensor,
) -> Tensor:
    """
    Solve a tridiagonal system Ax = d using the Thomas algorithm.

    Row i of the system reads:
        lower[i] * x[i-1] + diag[i] * x[i] + upper[i] * x[i+1] = rhs[i]

    so ``lower[0]`` and ``upper[n-1]`` fall outside the matrix and are
    ignored. All three bands share the length of the system.

    Parameters
    ----------
    lower : Tensor
        Sub-diagonal, shape (n,)
    diag : Tensor
        Main diagonal, shape (n,)
    upper : Tensor
        Super-diagonal, shape (n,)
    rhs : Tensor
        Right-hand side, shape (*batch, n)

    Returns
    -------
    Tensor
        Solution x, shape (*batch, n)

    Raises
    ------
    TridiagonalSystemError
        If the bands are not 1-D, differ in length, are empty, or the last
        dimension of rhs does not match them.

    Notes
    -----
    No pivoting is performed. The systems built for Hermite tangents are
    diagonally dominant, which keeps every pivot away from zero. A zero
    pivot produces non-finite values; they are returned as they are with a
    SingularSystemWarning.

    Every step builds new tensors instead of writing in place, so the solve
    is differentiable with respect to all four inputs.
    """
    if diag.dim() != 1:
        raise TridiagonalSystemError(
            f"diag must be 1-D, got shape {tuple(diag.shape)}"
        )

    n = diag.shape[0]

    if lower.shape != (n,) or upper.shape != (n,):
        raise TridiagonalSystemError(
            f"lower, diag and upper must all have length {n}, "
            f"got {tuple(lower.shape)}, {tuple(diag.shape)} and {tuple(upper.shape)}"
        )
    if rhs.dim() == 0 or rhs.shape[-1] != n:
        raise TridiagonalSystemError(
            f"rhs must have trailing dimension {n}, got shape {tuple(rhs.shape)}"
        )
    if n == 0:
        raise TridiagonalSystemError("Cannot solve an empty system")

    # rhs: (*batch, n) -> (n, *batch)
    rhs_t = rhs.movedim(-1, 0)

    # Forward sweep
    c_prime_list = [upper[0] / diag[0]]
    d_prime_list = [rhs_t[0] / diag[0]]

    for i in range(1, n):
        denom = diag[i] - c_prime_list[i - 1] * lower[i]
        c_prime_list.append(upper[i] / denom)
        d_prime_list.append(
            (rhs_t[i] - d_prime_list[i - 1] * lower[i]) / denom
        )

    # Back substitution
    x_list = [None] * n
    x_list[n - 1] = d_prime_list[n - 1]

    for i in range(n - 2, -1, -1):
        x_list[i] = d_prime_list[i] - c_prime_list[i] * x_list[i + 1]

    # (n, *batch) -> (*batch, n)
    x = torch.stack(x_list, dim=0).movedim(0, -1)

    inputs_finite = all(
        torch.all(torch.isfinite(band)) for band in (lower, diag, upper, rhs)
    )

    if inputs_finite and not torch.all(torch.isfinite(x)):
        warnings.warn(
            f"Tridiagonal system of size {n} is singular or nearly so; "
            f"the solution contains non-finite values.",
            SingularSystemWarning,
        )

    return x
