"""Axis-aligned bounding box of a point set."""

from __future__ import annotations

from typing import Optional

import torch
from tensordict import tensorclass
from torch import Tensor

from ._tolerance import _tolerance
from ._validate_points import _validate_points


@tensorclass
class AxisAlignedBoundingBox:
    """Box with faces perpendicular to the coordinate axes.

    Attributes
    ----------
    center : Tensor
        Box center, shape (3,).
    half_lengths : Tensor
        Half the edge length along x, y and z, shape (3,).
    """

    center: Tensor
    half_lengths: Tensor

    @property
    def lower_corner(self) -> Tensor:
        """Corner with the smallest coordinates."""
        return self.center - self.half_lengths

    @property
    def upper_corner(self) -> Tensor:
        """Corner with the largest coordinates."""
        return self.center + self.half_lengths

    @property
    def volume(self) -> Tensor:
        """Volume enclosed by the box."""
        return (2 * self.half_lengths).prod()

    @property
    def surface_area(self) -> Tensor:
        """Total area of the six faces."""
        x, y, z = self.half_lengths.unbind(-1)
        return 8 * (x * y + y * z + z * x)

    def contains(self, points: Tensor, atol: Optional[float] = None) -> Tensor:
        """Test whether points lie inside the box.

        Parameters
        ----------
        points : Tensor
            Query points, shape (..., 3).
        atol : float, optional
            Absolute slack added to each half length.

        Returns
        -------
        Tensor
            Boolean mask, shape (...).
        """
        if atol is None:
            atol = _tolerance(torch.cat([self.center, self.half_lengths]))

        offset = (points - self.center).abs()

        return torch.all(offset <= self.half_lengths + atol, dim=-1)


def axis_aligned_bounding_box(points: Tensor) -> AxisAlignedBoundingBox:
    """Compute the minimum axis-aligned box enclosing a set of points.

    Parameters
    ----------
    points : Tensor
        Points, shape (n, 3) with n >= 1.

    Returns
    -------
    AxisAlignedBoundingBox
        The box spanned by the componentwise minimum and maximum.

    Raises
    ------
    InsufficientPointsError
        If ``points`` is empty.
    ValueError
        If ``points`` does not have shape (n, 3).

    Examples
    --------
    >>> points = torch.tensor([[0.0, 0.0, 0.0], [2.0, 1.0, 0.0]])
    >>> box = axis_aligned_bounding_box(points)
    >>> box.half_lengths
    tensor([1.0000, 0.5000, 0.0000])
    """
    points = _validate_points(points)

    lower = points.amin(dim=0)
    upper = points.amax(dim=0)

    return AxisAlignedBoundingBox(
        center=(lower + upper) / 2,
        half_lengths=(upper - lower) / 2,
        batch_size=[],
    )
