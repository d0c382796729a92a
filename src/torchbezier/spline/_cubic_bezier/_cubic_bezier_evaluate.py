"""Cubic Bezier curve evaluation from Bernstein basis rows."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Union

import torch
from torch import Tensor

from ._cubic_bezier_basis import (
    _as_parameter,
    bernstein_basis,
    bernstein_basis_first_derivative,
    bernstein_basis_second_derivative,
    bernstein_basis_third_derivative,
)

if TYPE_CHECKING:
    from ._cubic_bezier import CubicBezierCurve


def _evaluate_with(
    basis: Callable[[Tensor], Tensor],
    curve: CubicBezierCurve,
    u: Union[float, Tensor],
) -> Tensor:
    control_points = curve.control_points

    u = _as_parameter(
        u,
        dtype=control_points.dtype,
        device=control_points.device,
    )

    row = basis(u)

    # (*query_shape, 4) x (4, *value_shape) -> (*query_shape, *value_shape)
    return torch.tensordot(row, control_points, dims=([row.dim() - 1], [0]))


def cubic_bezier_evaluate(
    curve: CubicBezierCurve,
    u: Union[float, Tensor],
) -> Tensor:
    r"""Evaluate a cubic Bezier curve.

    .. math::
        P(u) = B_0(u) b_0 + B_1(u) b_1 + B_2(u) b_2 + B_3(u) b_3

    Parameters
    ----------
    curve : CubicBezierCurve
        Curve to evaluate.
    u : float or Tensor
        Curve parameter, shape (*query_shape). Converted to the dtype and
        device of the control points. Values outside [0, 1] extrapolate
        the cubic and do not lie on the segment.

    Returns
    -------
    Tensor
        Points, shape (*query_shape, 3).

    Notes
    -----
    Each call forms the Bernstein row (9 flops) and contracts it with the
    control points (21 flops for 3-vectors). To evaluate the same curve
    at many parameters, convert once with
    :func:`algebraic_from_bezier` (30 flops) and use
    :func:`algebraic_evaluate` (15 flops per point).
    """
    return _evaluate_with(bernstein_basis, curve, u)


def cubic_bezier_first_derivative(
    curve: CubicBezierCurve,
    u: Union[float, Tensor],
) -> Tensor:
    """Evaluate the tangent ``dP/du`` of a cubic Bezier curve.

    At the end points this is ``3 (b1 - b0)`` and ``3 (b3 - b2)``.

    Parameters
    ----------
    curve : CubicBezierCurve
        Curve to evaluate.
    u : float or Tensor
        Curve parameter, shape (*query_shape).

    Returns
    -------
    Tensor
        Tangents, shape (*query_shape, 3).
    """
    return _evaluate_with(bernstein_basis_first_derivative, curve, u)


def cubic_bezier_second_derivative(
    curve: CubicBezierCurve,
    u: Union[float, Tensor],
) -> Tensor:
    """Evaluate ``d2P/du2`` of a cubic Bezier curve."""
    return _evaluate_with(bernstein_basis_second_derivative, curve, u)


def cubic_bezier_third_derivative(
    curve: CubicBezierCurve,
    u: Union[float, Tensor],
) -> Tensor:
    """Evaluate ``d3P/du3`` of a cubic Bezier curve.

    The result is ``6 (b3 - 3 b2 + 3 b1 - b0)`` for every ``u``; ``u`` only
    determines the output shape.
    """
    return _evaluate_with(bernstein_basis_third_derivative, curve, u)
