"""Bounding volumes of a cubic Bezier curve segment.

The Bernstein weights are non-negative and sum to one on [0, 1], so every
point of the segment is a convex combination of the control points. Any
volume enclosing the four control points therefore encloses the segment;
it is not in general the smallest volume enclosing the curve itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from torchbezier.geometry.bounding_volume import (
    AxisAlignedBoundingBox,
    BoundingSphere,
    OrientedBoundingBox,
    axis_aligned_bounding_box,
    bounding_sphere,
    oriented_bounding_box,
)

if TYPE_CHECKING:
    from ._cubic_bezier import CubicBezierCurve


def cubic_bezier_bounding_sphere(curve: CubicBezierCurve) -> BoundingSphere:
    """Minimum sphere enclosing the control points, and so the segment."""
    return bounding_sphere(curve.control_points)


def cubic_bezier_axis_aligned_bounding_box(
    curve: CubicBezierCurve,
) -> AxisAlignedBoundingBox:
    """Minimum axis-aligned box enclosing the control points."""
    return axis_aligned_bounding_box(curve.control_points)


def cubic_bezier_oriented_bounding_box(
    curve: CubicBezierCurve,
) -> OrientedBoundingBox:
    """Oriented box enclosing the control points."""
    return oriented_bounding_box(curve.control_points)
