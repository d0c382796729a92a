"""Bounding volumes of small point sets.

Bounding Volumes
----------------
bounding_sphere
    Minimum enclosing sphere.
axis_aligned_bounding_box
    Minimum enclosing axis-aligned box.
oriented_bounding_box
    Tight enclosing box with arbitrary orientation.

Data Types
----------
BoundingSphere
    Center and radius.
AxisAlignedBoundingBox
    Center and half lengths along the coordinate axes.
OrientedBoundingBox
    Center, rotation and half lengths along the box axes.
"""

from ._axis_aligned_bounding_box import (
    AxisAlignedBoundingBox,
    axis_aligned_bounding_box,
)
from ._bounding_sphere import BoundingSphere, bounding_sphere
from ._oriented_bounding_box import OrientedBoundingBox, oriented_bounding_box

__all__ = [
    "AxisAlignedBoundingBox",
    "BoundingSphere",
    "OrientedBoundingBox",
    "axis_aligned_bounding_box",
    "bounding_sphere",
    "oriented_bounding_box",
]
