"""torchbezier: cubic Bezier curve primitives for PyTorch tensors."""

from . import geometry, spline

__all__ = [
    "geometry",
    "spline",
]

__version__ = "0.1.0"
