"""Hypothesis strategies for cubic Bezier testing."""

from ._control_points import control_points
from ._floating_point_dtypes import floating_point_dtypes
from ._parameters import parameters
from ._shapes import shapes
from ._tensors import tensors

__all__ = [
    # Tensor strategies
    "shapes",
    "tensors",
    # Curve strategies
    "control_points",
    "parameters",
    # Dtype strategies
    "floating_point_dtypes",
]
