from __future__ import annotations

from typing import TYPE_CHECKING, Tuple, Union

import torch
from torch import Tensor

if TYPE_CHECKING:
    from ._control_point import ControlPoint


def segment_parameters(
    cp0: ControlPoint,
    cp1: ControlPoint,
    u: Union[float, Tensor],
) -> Tuple[Tensor, Tensor, Tensor, Tensor, Tensor]:
    """
    Broadcast a batch of segments against a batch of parameters.

    Returns ``u`` clamped to [0, 1] with shape (*1s, *u_shape, 1) and the
    endpoint positions and tangents with shape (*segment_shape, *1s, 2), so
    that combining them yields (*segment_shape, *u_shape, 2).
    """
    position = cp0.position
    segment_shape = position.shape[:-1]

    u = torch.as_tensor(u, dtype=position.dtype, device=position.device)
    u = torch.clamp(u, 0.0, 1.0)
    query_shape = u.shape

    u = u.reshape(*([1] * len(segment_shape)), *query_shape, 1)

    def expand(value: Tensor) -> Tensor:
        return value.reshape(*segment_shape, *([1] * len(query_shape)), 2)

    return (
        u,
        expand(cp0.position),
        expand(cp1.position),
        expand(cp0.tangent),
        expand(cp1.tangent),
    )
