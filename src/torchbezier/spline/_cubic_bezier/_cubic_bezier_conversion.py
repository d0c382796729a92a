r"""Conversion among Bezier, algebraic and Hermite coefficients.

A cubic curve segment can be written as

.. math::
    P(u) = U A = U M_h H = U M_b B

with :math:`U = [u^3, u^2, u, 1]`, algebraic coefficients
:math:`A = [a_3, a_2, a_1, a_0]`, Hermite coefficients
:math:`H = [h_0, h_1, h_{u0}, h_{u1}]` (end points and end tangents) and
Bezier control points :math:`B = [b_0, b_1, b_2, b_3]`. Every
coefficient is a point, so each form is a tensor of shape
``(4, *value_shape)`` indexed by coefficient along the first axis.

The products :math:`M_b B`, :math:`M_b^{-1} A`, :math:`M_h^{-1} M_b B`
and :math:`M_b^{-1} M_h H` are worked out by hand below. The constant
matrices are sparse with many common subexpressions, so the closed forms
take 12 to 30 flops for 3-vectors instead of the 84 of a 4x4 product.
"""

import torch
from torch import Tensor


def algebraic_from_bezier(control_points: Tensor) -> Tensor:
    """Convert Bezier control points to algebraic coefficients.

    Parameters
    ----------
    control_points : Tensor
        Control points ``[b0, b1, b2, b3]``, shape (4, *value_shape).

    Returns
    -------
    Tensor
        Coefficients ``[a3, a2, a1, a0]`` of
        ``P(u) = a3 u^3 + a2 u^2 + a1 u + a0``, shape (4, *value_shape).

    Examples
    --------
    >>> b = torch.tensor([[0., 0., 0.], [1., 0., 0.], [1., 1., 0.], [0., 1., 0.]])
    >>> algebraic_from_bezier(b)
    tensor([[ 0., -2.,  0.],
            [-3.,  3.,  0.],
            [ 3.,  0.,  0.],
            [ 0.,  0.,  0.]])
    """
    b0, b1, b2, b3 = control_points.unbind(0)

    return torch.stack(
        [
            b3 - b0 + 3 * (b1 - b2),
            3 * (b0 + b2) - 6 * b1,
            3 * (b1 - b0),
            b0,
        ]
    )


def bezier_from_algebraic(coefficients: Tensor) -> Tensor:
    """Convert algebraic coefficients ``[a3, a2, a1, a0]`` to control points."""
    a3, a2, a1, a0 = coefficients.unbind(0)

    return torch.stack(
        [
            a0,
            a1 / 3 + a0,
            (a2 + 2 * a1) / 3 + a0,
            a3 + a2 + a1 + a0,
        ]
    )


def hermite_from_bezier(control_points: Tensor) -> Tensor:
    """Convert Bezier control points to Hermite coefficients.

    Parameters
    ----------
    control_points : Tensor
        Control points ``[b0, b1, b2, b3]``, shape (4, *value_shape).

    Returns
    -------
    Tensor
        ``[h0, h1, hu0, hu1]``: the end points and the tangents
        ``dP/du`` at ``u = 0`` and ``u = 1``, shape (4, *value_shape).
    """
    b0, b1, b2, b3 = control_points.unbind(0)

    return torch.stack([b0, b3, 3 * (b1 - b0), 3 * (b3 - b2)])


def bezier_from_hermite(coefficients: Tensor) -> Tensor:
    """Convert Hermite coefficients ``[h0, h1, hu0, hu1]`` to control points."""
    h0, h1, hu0, hu1 = coefficients.unbind(0)

    return torch.stack([h0, h0 + hu0 / 3, h1 - hu1 / 3, h1])
