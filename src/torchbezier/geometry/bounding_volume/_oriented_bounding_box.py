"""Oriented bounding box of a point set."""

from __future__ import annotations

import itertools
from typing import Optional

import torch
from tensordict import tensorclass
from torch import Tensor

from ._tolerance import _tolerance
from ._validate_points import _validate_points


@tensorclass
class OrientedBoundingBox:
    """Box with arbitrary orientation.

    A point ``x`` has box coordinates ``(x - center) @ rotation``, so the
    columns of ``rotation`` are the box axes expressed in world space.

    Attributes
    ----------
    center : Tensor
        Box center in world space, shape (3,).
    rotation : Tensor
        Proper rotation matrix whose columns are the box axes, shape (3, 3).
    half_lengths : Tensor
        Half the edge length along each box axis, shape (3,).
    """

    center: Tensor
    rotation: Tensor
    half_lengths: Tensor

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

        local = (points - self.center) @ self.rotation

        return torch.all(local.abs() <= self.half_lengths + atol, dim=-1)


def _frame_about_axis(axis: Tensor, centered: Tensor) -> Tensor:
    # Complete ``axis`` with the principal directions of the points
    # projected onto the plane perpendicular to it.
    helper = torch.zeros_like(axis)
    helper[torch.argmin(axis.abs())] = 1

    e1 = torch.linalg.cross(axis, helper)
    e1 = e1 / torch.linalg.vector_norm(e1)
    e2 = torch.linalg.cross(axis, e1)

    plane = torch.stack([e1, e2], dim=1)
    projected = centered @ plane

    _, directions = torch.linalg.eigh(projected.T @ projected)

    return torch.cat([axis.unsqueeze(1), plane @ directions], dim=1)


def _candidate_frames(points: Tensor) -> list[Tensor]:
    centered = points - points.mean(dim=0)

    frames = [torch.eye(3, dtype=points.dtype, device=points.device)]

    _, principal = torch.linalg.eigh(centered.T @ centered)
    frames.append(principal)

    tiny = torch.finfo(points.dtype).eps * points.abs().max()

    for i, j in itertools.combinations(range(points.shape[0]), 2):
        direction = points[j] - points[i]
        length = torch.linalg.vector_norm(direction)

        if length <= tiny:
            continue

        frames.append(_frame_about_axis(direction / length, centered))

    return frames


def oriented_bounding_box(points: Tensor) -> OrientedBoundingBox:
    r"""Compute a tight oriented box enclosing a set of points.

    Each candidate frame is fitted with the extents of the points along
    its axes and the box of smallest volume is returned; surface area
    breaks ties, which matters for planar and collinear point sets.

    The candidate frames are:

    - the world axes, so the result is never worse than the
      axis-aligned box;
    - the principal axes of the point scatter matrix;
    - for every pair of distinct points, a frame whose first axis runs
      along the pair and whose other two axes are the principal axes of
      the points projected onto the perpendicular plane.

    Parameters
    ----------
    points : Tensor
        Points, shape (n, 3) with n >= 1.

    Returns
    -------
    OrientedBoundingBox
        Enclosing box with a right-handed ``rotation``.

    Raises
    ------
    InsufficientPointsError
        If ``points`` is empty.
    ValueError
        If ``points`` does not have shape (n, 3).

    Notes
    -----
    The pair frames make the cost quadratic in the number of points, so
    this is intended for small sets such as control polygons. The exact
    minimum-volume box is not guaranteed.
    """
    points = _validate_points(points).detach()

    # Volumes closer than this are treated as equal
    extent = (points.amax(dim=0) - points.amin(dim=0)).max().item()
    volume_atol = 8 * _tolerance(points).item() * max(extent, 1.0) ** 2

    best = None

    for frame in _candidate_frames(points):
        if torch.linalg.det(frame) < 0:
            frame = torch.cat([frame[:, :2], -frame[:, 2:]], dim=1)

        local = points @ frame

        lower = local.amin(dim=0)
        upper = local.amax(dim=0)

        box = OrientedBoundingBox(
            center=frame @ ((lower + upper) / 2),
            rotation=frame,
            half_lengths=(upper - lower) / 2,
            batch_size=[],
        )

        volume = box.volume.item()
        area = box.surface_area.item()

        if best is None or volume < best[0] - volume_atol:
            best = (volume, area, box)
        elif volume <= best[0] + volume_atol and area < best[1]:
            best = (volume, area, box)

    return best[2]
