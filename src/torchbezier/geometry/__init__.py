"""Geometric operations and queries."""

from . import bounding_volume
from ._exceptions import (
    GeometryError,
    InsufficientPointsError,
)
from .bounding_volume import (
    AxisAlignedBoundingBox,
    BoundingSphere,
    OrientedBoundingBox,
    axis_aligned_bounding_box,
    bounding_sphere,
    oriented_bounding_box,
)

__all__ = [
    "AxisAlignedBoundingBox",
    "BoundingSphere",
    "GeometryError",
    "InsufficientPointsError",
    "OrientedBoundingBox",
    "axis_aligned_bounding_box",
    "bounding_sphere",
    "bounding_volume",
    "oriented_bounding_box",
]
