"""Cubic Bezier curve segment representation and convenience functions."""

from __future__ import annotations

from typing import Callable, Optional, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchbezier.geometry.bounding_volume import (
    AxisAlignedBoundingBox,
    BoundingSphere,
    OrientedBoundingBox,
)

from ._cubic_bezier_bounding_volume import (
    cubic_bezier_axis_aligned_bounding_box,
    cubic_bezier_bounding_sphere,
    cubic_bezier_oriented_bounding_box,
)
from ._cubic_bezier_conversion import (
    algebraic_from_bezier,
    bezier_from_algebraic,
    bezier_from_hermite,
    hermite_from_bezier,
)
from ._cubic_bezier_evaluate import (
    cubic_bezier_evaluate,
    cubic_bezier_first_derivative,
    cubic_bezier_second_derivative,
    cubic_bezier_third_derivative,
)


@tensorclass
class CubicBezierCurve:
    """A single cubic Bezier curve segment in 3-space.

    The segment is defined by four control points ``[b0, b1, b2, b3]``
    and parameterized by ``u`` in [0, 1], with ``u = 0`` at ``b0`` and
    ``u = 1`` at ``b3``. The curve lies in the convex hull of its control
    points, which the bounding volume methods rely on.

    The control points are never modified by any operation. Precision is
    the dtype of the control points; use ``curve.to(torch.float32)`` and
    similar to change it.

    Attributes
    ----------
    control_points : Tensor
        Control points, shape (4, 3).
    """

    control_points: Tensor

    @classmethod
    def uninitialized(
        cls,
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[torch.device] = None,
    ) -> CubicBezierCurve:
        """Create a curve whose control points are uninitialized memory.

        The control points hold arbitrary values and must be filled in
        before the curve is evaluated or converted.
        """
        return cls(
            control_points=torch.empty(4, 3, dtype=dtype, device=device),
            batch_size=[],
        )

    @classmethod
    def from_algebraic(cls, coefficients: Tensor) -> CubicBezierCurve:
        """Create a curve from algebraic coefficients ``[a3, a2, a1, a0]``."""
        return cubic_bezier_curve(bezier_from_algebraic(coefficients))

    @classmethod
    def from_hermite(cls, coefficients: Tensor) -> CubicBezierCurve:
        """Create a curve from Hermite coefficients ``[h0, h1, hu0, hu1]``."""
        return cubic_bezier_curve(bezier_from_hermite(coefficients))

    def algebraic_coefficients(self) -> Tensor:
        """Algebraic coefficients ``[a3, a2, a1, a0]``, shape (4, 3)."""
        return algebraic_from_bezier(self.control_points)

    def hermite_coefficients(self) -> Tensor:
        """Hermite coefficients ``[h0, h1, hu0, hu1]``, shape (4, 3)."""
        return hermite_from_bezier(self.control_points)

    def evaluate(self, u: Union[float, Tensor]) -> Tensor:
        """Point ``P(u)``. See :func:`cubic_bezier_evaluate`."""
        return cubic_bezier_evaluate(self, u)

    def first_derivative(self, u: Union[float, Tensor]) -> Tensor:
        """Tangent ``dP/du``."""
        return cubic_bezier_first_derivative(self, u)

    def second_derivative(self, u: Union[float, Tensor]) -> Tensor:
        return cubic_bezier_second_derivative(self, u)

    def third_derivative(self, u: Union[float, Tensor]) -> Tensor:
        return cubic_bezier_third_derivative(self, u)

    def bounding_sphere(self) -> BoundingSphere:
        """Sphere enclosing the segment for ``u`` in [0, 1]."""
        return cubic_bezier_bounding_sphere(self)

    def axis_aligned_bounding_box(self) -> AxisAlignedBoundingBox:
        """Axis-aligned box enclosing the segment for ``u`` in [0, 1]."""
        return cubic_bezier_axis_aligned_bounding_box(self)

    def oriented_bounding_box(self) -> OrientedBoundingBox:
        """Oriented box enclosing the segment for ``u`` in [0, 1]."""
        return cubic_bezier_oriented_bounding_box(self)


def cubic_bezier_curve(control_points: Tensor) -> CubicBezierCurve:
    """Create a cubic Bezier curve from its control points.

    Parameters
    ----------
    control_points : Tensor
        Control points ``[b0, b1, b2, b3]``, shape (4, 3). Integer input is
        converted to the default floating point dtype.

    Returns
    -------
    CubicBezierCurve

    Raises
    ------
    ValueError
        If ``control_points`` does not have shape (4, 3).
    """
    control_points = torch.as_tensor(control_points)

    if tuple(control_points.shape) != (4, 3):
        raise ValueError(
            f"Expected control points of shape (4, 3), got {tuple(control_points.shape)}"
        )

    if not control_points.is_floating_point():
        control_points = control_points.to(torch.get_default_dtype())

    return CubicBezierCurve(
        control_points=control_points,
        batch_size=[],
    )


def cubic_bezier(
    control_points: Tensor,
) -> Callable[[Union[float, Tensor]], Tensor]:
    """Create a cubic Bezier curve and return a function evaluating it.

    Parameters
    ----------
    control_points : Tensor
        Control points ``[b0, b1, b2, b3]``, shape (4, 3).

    Returns
    -------
    curve : Callable[[Tensor], Tensor]
        Function that evaluates the curve at given parameter values.

    Examples
    --------
    >>> import torch
    >>> control_points = torch.tensor(
    ...     [[0., 0., 0.], [1., 0., 0.], [1., 1., 0.], [0., 1., 0.]]
    ... )
    >>> curve = cubic_bezier(control_points)
    >>> curve(torch.tensor([0.0, 0.5, 1.0]))
    tensor([[0.0000, 0.0000, 0.0000],
            [0.7500, 0.5000, 0.0000],
            [0.0000, 1.0000, 0.0000]])
    """
    curve = cubic_bezier_curve(control_points)
    return lambda u: cubic_bezier_evaluate(curve, u)
