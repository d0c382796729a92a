"""Minimum enclosing sphere of a point set."""

from __future__ import annotations

import itertools
import logging
import math
from typing import Optional

import torch
from tensordict import tensorclass
from torch import Tensor

from ._tolerance import _tolerance
from ._validate_points import _validate_points

logger = logging.getLogger(__name__)


@tensorclass
class BoundingSphere:
    """Sphere enclosing a set of points.

    Attributes
    ----------
    center : Tensor
        Sphere center, shape (3,).
    radius : Tensor
        Sphere radius, shape ().
    """

    center: Tensor
    radius: Tensor

    @property
    def volume(self) -> Tensor:
        """Volume enclosed by the sphere."""
        return 4.0 / 3.0 * math.pi * self.radius**3

    def contains(self, points: Tensor, atol: Optional[float] = None) -> Tensor:
        """Test whether points lie inside the sphere.

        Parameters
        ----------
        points : Tensor
            Query points, shape (..., 3).
        atol : float, optional
            Absolute slack added to the radius. Defaults to a few ulps of
            the sphere's coordinate scale.

        Returns
        -------
        Tensor
            Boolean mask, shape (...).
        """
        if atol is None:
            atol = _tolerance(torch.cat([self.center, self.radius.reshape(1)]))

        distance = torch.linalg.vector_norm(points - self.center, dim=-1)

        return distance <= self.radius + atol


def _sphere_from_two(p: Tensor, q: Tensor) -> tuple[Tensor, Tensor]:
    center = (p + q) / 2

    return center, torch.linalg.vector_norm(p - center)


def _sphere_from_three(p: Tensor, q: Tensor, r: Tensor) -> tuple[Tensor, Tensor]:
    a = q - p
    b = r - p

    n = torch.linalg.cross(a, b)
    nn = torch.dot(n, n)

    aa = torch.dot(a, a)
    bb = torch.dot(b, b)

    # sin^2 of the angle between a and b below eps: collinear support
    if nn <= torch.finfo(p.dtype).eps * aa * bb:
        logger.debug("Collinear support points, using farthest pair")

        return max(
            (_sphere_from_two(p, q), _sphere_from_two(p, r), _sphere_from_two(q, r)),
            key=lambda sphere: sphere[1].item(),
        )

    offset = (
        torch.linalg.cross(n, a) * bb + torch.linalg.cross(b, n) * aa
    ) / (2 * nn)

    return p + offset, torch.linalg.vector_norm(offset)


def _sphere_from_four(
    p: Tensor, q: Tensor, r: Tensor, s: Tensor
) -> tuple[Tensor, Tensor]:
    edges = torch.stack([q - p, r - p, s - p])

    lengths = torch.linalg.vector_norm(edges, dim=-1)
    determinant = torch.linalg.det(edges)

    # Coplanar support: solve by brute force over the smaller supports
    if determinant.abs() <= torch.finfo(p.dtype).eps * lengths.prod():
        logger.debug("Coplanar support points, using smallest sub-support")

        return _smallest_enclosing([p, q, r, s])

    rhs = (edges * edges).sum(dim=-1) / 2
    offset = torch.linalg.solve(edges, rhs)

    return p + offset, torch.linalg.vector_norm(offset)


def _smallest_enclosing(points: list[Tensor]) -> tuple[Tensor, Tensor]:
    stacked = torch.stack(points)
    atol = _tolerance(stacked)

    candidates = [
        _sphere_from_two(p, q) for p, q in itertools.combinations(points, 2)
    ]
    candidates += [
        _sphere_from_three(p, q, r)
        for p, q, r in itertools.combinations(points, 3)
    ]

    best = None
    for center, radius in candidates:
        distance = torch.linalg.vector_norm(stacked - center, dim=-1)
        if bool(torch.all(distance <= radius + atol)):
            if best is None or radius < best[1]:
                best = (center, radius)

    if best is None:
        best = max(candidates, key=lambda sphere: sphere[1].item())

    return best


def bounding_sphere(points: Tensor) -> BoundingSphere:
    r"""Compute the minimum sphere enclosing a set of points.

    Uses Welzl's incremental algorithm. The sphere is grown only when a
    point falls outside it, and is then rebuilt from a support set of up
    to four points that must lie on its boundary.

    Parameters
    ----------
    points : Tensor
        Points, shape (n, 3) with n >= 1.

    Returns
    -------
    BoundingSphere
        Enclosing sphere. The radius carries a few ulps of slack so that
        every input point is contained despite rounding.

    Raises
    ------
    InsufficientPointsError
        If ``points`` is empty.
    ValueError
        If ``points`` does not have shape (n, 3).

    Notes
    -----
    Degenerate support sets (coincident, collinear or coplanar points) are
    resolved by falling back to the smallest sphere over a smaller support.
    Construction is not differentiable.

    The nested loops visit points in input order; the cost is
    :math:`O(n)` expected for random order and :math:`O(n^4)` in the worst
    case, which is irrelevant for the small point sets this is meant for.

    Examples
    --------
    >>> points = torch.tensor([[-1.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
    >>> sphere = bounding_sphere(points)
    >>> sphere.center
    tensor([0., 0., 0.])
    """
    points = _validate_points(points).detach()

    atol = _tolerance(points)

    def outside(point: Tensor, center: Tensor, radius: Tensor) -> bool:
        return bool(torch.linalg.vector_norm(point - center) > radius + atol)

    center = points[0]
    radius = torch.zeros((), dtype=points.dtype, device=points.device)

    for i in range(1, points.shape[0]):
        if not outside(points[i], center, radius):
            continue

        center, radius = points[i], torch.zeros_like(radius)

        for j in range(i):
            if not outside(points[j], center, radius):
                continue

            center, radius = _sphere_from_two(points[i], points[j])

            for k in range(j):
                if not outside(points[k], center, radius):
                    continue

                center, radius = _sphere_from_three(
                    points[i], points[j], points[k]
                )

                for m in range(k):
                    if not outside(points[m], center, radius):
                        continue

                    center, radius = _sphere_from_four(
                        points[i], points[j], points[k], points[m]
                    )

    # Degenerate fallbacks may not pass through the support points
    farthest = torch.linalg.vector_norm(points - center, dim=-1).max()

    return BoundingSphere(
        center=center.clone(),
        radius=torch.maximum(radius, farthest) + atol,
        batch_size=[],
    )
