"""Editable piecewise cubic Hermite curve."""

from typing import Callable, List, Optional, Tuple, Union

import torch
from torch import Tensor

from .._tangents import clamped_end_tangents_1d, natural_spline_tangents_1d
from ._approx_segment_length import approx_segment_length
from ._control_point import ControlPoint
from ._interpolate_segment import interpolate_segment
from ._interpolate_tangent import interpolate_tangent


class HermiteCurve:
    """Ordered control points and the curve sampled through them.

    Points are appended in order and each consecutive pair forms one
    segment. The sampled caches ``curve_points`` and ``curve_tangents``
    only change when ``generate_curve`` runs; after ``add_point`` they are
    stale until the caller regenerates them, typically from the change
    handler.

    Parameters
    ----------
    dtype : torch.dtype, optional
        Floating dtype of stored tensors. Default is
        ``torch.get_default_dtype()``.
    device : torch.device, optional
        Device of stored tensors.
    segment_samples : int
        Samples taken per segment, both segment ends included. Default is
        11, a parameter step of 0.1.

    Examples
    --------
    >>> curve = HermiteCurve()
    >>> curve.add_point(100, 100, 0, 10)
    >>> curve.add_point(150, 150, -10, -10)
    >>> curve.add_point(170, 90, 20, 10)
    >>> curve.generate_tangents_natural_spline()
    >>> curve.generate_curve()
    >>> curve.curve_points.shape
    torch.Size([22, 2])
    """

    def __init__(
        self,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
        segment_samples: int = 11,
    ):
        if segment_samples < 2:
            raise ValueError(
                f"segment_samples must be at least 2, got {segment_samples}"
            )

        self.dtype = dtype if dtype is not None else torch.get_default_dtype()
        self.device = device
        self.segment_samples = segment_samples

        self._points: List[ControlPoint] = []
        self._curve_points = self._empty_samples()
        self._curve_tangents = self._empty_samples()
        self._on_change: Optional[Callable[[], None]] = None

    def __len__(self) -> int:
        return len(self._points)

    @property
    def points(self) -> Tuple[ControlPoint, ...]:
        return tuple(self._points)

    @property
    def curve_points(self) -> Tensor:
        """Sampled positions, shape (n_samples, 2)."""
        return self._curve_points

    @property
    def curve_tangents(self) -> Tensor:
        """Unit normals at the sampled positions, shape (n_samples, 2)."""
        return self._curve_tangents

    def on_change_handler(self, callback: Optional[Callable[[], None]]):
        """Register the callback fired after every point mutation.

        Only one callback is kept; registering another replaces it and
        ``None`` removes it. The callback runs synchronously and must not
        add or clear points itself.
        """
        self._on_change = callback

    def add_point(
        self,
        x: Union[float, Tensor],
        y: Union[float, Tensor],
        tangent_x: Union[float, Tensor] = 0.0,
        tangent_y: Union[float, Tensor] = 0.0,
    ):
        self._points.append(
            ControlPoint(
                position=self._vector(x, y),
                tangent=self._vector(tangent_x, tangent_y),
                batch_size=[],
            )
        )

        self._notify()

    def clear_points(self):
        self._points = []
        self._curve_points = self._empty_samples()
        self._curve_tangents = self._empty_samples()

        self._notify()

    def generate_tangents(self, boundary: str = "natural"):
        """Recompute every tangent under the given boundary condition.

        Parameters
        ----------
        boundary : str
            ``"natural"`` for zero second derivative at both ends or
            ``"clamped"`` to keep the current first and last tangents.
        """
        if boundary == "natural":
            self.generate_tangents_natural_spline()
        elif boundary == "clamped":
            self.generate_tangents_clamped_end()
        else:
            raise ValueError(f"Unknown boundary condition: {boundary}")

    def generate_tangents_clamped_end(self):
        """Recompute tangents, keeping the first and last tangents fixed.

        Does nothing with fewer than 3 points.
        """
        if not self._points:
            return

        positions = self._positions()

        # x and y are solved as two independent rows of one batch
        tangents = clamped_end_tangents_1d(
            positions.T,
            self._points[0].tangent,
            self._points[-1].tangent,
        )

        self._assign_tangents(tangents)

    def generate_tangents_natural_spline(self):
        """Recompute tangents so the curve has no curvature at its ends.

        Does nothing with fewer than 3 points.
        """
        if not self._points:
            return

        tangents = natural_spline_tangents_1d(self._positions().T)

        self._assign_tangents(tangents)

    def generate_curve(self):
        """Resample ``curve_points`` and ``curve_tangents`` from the points.

        Each of the ``len(self) - 1`` segments contributes
        ``segment_samples`` samples, segment ends included, so the sample
        at a shared knot appears twice. With fewer than 2 points both
        caches are emptied.
        """
        if len(self._points) < 2:
            self._curve_points = self._empty_samples()
            self._curve_tangents = self._empty_samples()
            return

        start, end = self._segments()

        u = torch.linspace(
            0.0,
            1.0,
            self.segment_samples,
            dtype=start.position.dtype,
            device=start.position.device,
        )

        # (n_segments, segment_samples, 2) -> (n_samples, 2)
        self._curve_points = interpolate_segment(start, end, u).reshape(-1, 2)
        self._curve_tangents = interpolate_tangent(start, end, u).reshape(
            -1, 2
        )

    def approx_length(self) -> Tensor:
        """Sum of the polyline length approximations of all segments."""
        if len(self._points) < 2:
            return torch.zeros((), dtype=self.dtype, device=self.device)

        start, end = self._segments()

        return approx_segment_length(start, end).sum()

    def _notify(self):
        if self._on_change is not None:
            self._on_change()

    def _vector(
        self,
        x: Union[float, Tensor],
        y: Union[float, Tensor],
    ) -> Tensor:
        return torch.stack(
            [
                torch.as_tensor(x, dtype=self.dtype, device=self.device),
                torch.as_tensor(y, dtype=self.dtype, device=self.device),
            ]
        )

    def _empty_samples(self) -> Tensor:
        return torch.empty((0, 2), dtype=self.dtype, device=self.device)

    def _positions(self) -> Tensor:
        return torch.stack([point.position for point in self._points])

    def _tangents(self) -> Tensor:
        return torch.stack([point.tangent for point in self._points])

    def _segments(self) -> Tuple[ControlPoint, ControlPoint]:
        positions = self._positions()
        tangents = self._tangents()
        n_segments = len(self._points) - 1

        start = ControlPoint(
            position=positions[:-1],
            tangent=tangents[:-1],
            batch_size=[n_segments],
        )
        end = ControlPoint(
            position=positions[1:],
            tangent=tangents[1:],
            batch_size=[n_segments],
        )

        return start, end

    def _assign_tangents(self, tangents: Tensor):
        # tangents: (2, n), or (2, 0) when too few points to solve
        for i in range(tangents.shape[-1]):
            self._points[i].tangent = tangents[:, i].clone()


def hermite_curve(
    positions: Tensor,
    tangents: Optional[Tensor] = None,
    boundary: Optional[str] = None,
    **options,
) -> HermiteCurve:
    """Create a sampled Hermite curve from control-point data.

    Parameters
    ----------
    positions : Tensor
        Control-point positions, shape (n, 2).
    tangents : Tensor, optional
        Control-point tangents, shape (n, 2). Default is all zeros.
    boundary : str, optional
        If given, tangents are regenerated with this boundary condition
        (``"natural"`` or ``"clamped"``) before sampling.
    **options
        Keyword arguments forwarded to :class:`HermiteCurve`. ``dtype``
        defaults to the dtype of floating-point ``positions``.

    Returns
    -------
    curve : HermiteCurve
        Curve with ``generate_curve`` already applied.

    Examples
    --------
    >>> import torch
    >>> positions = torch.tensor([[0.0, 0.0], [10.0, 5.0], [20.0, 0.0]])
    >>> curve = hermite_curve(positions, boundary="natural")
    >>> curve.curve_points.shape
    torch.Size([22, 2])
    """
    positions = torch.as_tensor(positions)

    if positions.dim() != 2 or positions.shape[-1] != 2:
        raise ValueError(
            f"positions must have shape (n, 2), got {tuple(positions.shape)}"
        )

    if tangents is None:
        tangents = torch.zeros_like(positions)
    else:
        tangents = torch.as_tensor(tangents)

    if tangents.shape != positions.shape:
        raise ValueError(
            f"positions and tangents must have same shape, "
            f"got {tuple(positions.shape)} and {tuple(tangents.shape)}"
        )

    if "dtype" not in options and positions.is_floating_point():
        options["dtype"] = positions.dtype

    curve = HermiteCurve(**options)

    for position, tangent in zip(positions, tangents):
        curve.add_point(position[0], position[1], tangent[0], tangent[1])

    if boundary is not None:
        curve.generate_tangents(boundary)

    curve.generate_curve()

    return curve
