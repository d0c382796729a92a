"""Horner evaluation of a cubic in algebraic form."""

from typing import Union

import torch
from torch import Tensor

from ._cubic_bezier_basis import _as_parameter


def algebraic_evaluate(
    coefficients: Tensor,
    u: Union[float, Tensor],
    order: int = 0,
) -> Tensor:
    r"""Evaluate a cubic or one of its derivatives from algebraic coefficients.

    .. math::
        P(u)      &= ((a_3 u + a_2) u + a_1) u + a_0 \\
        P_u(u)    &= (3 a_3 u + 2 a_2) u + a_1 \\
        P_{uu}(u) &= 6 a_3 u + 2 a_2 \\
        P_{uuu}   &= 6 a_3

    This is the cheap path for evaluating one curve at many parameters:
    convert once with :func:`algebraic_from_bezier`, then each point costs
    15, 10, 3 or 0 flops per component depending on ``order``.

    Parameters
    ----------
    coefficients : Tensor
        Algebraic coefficients ``[a3, a2, a1, a0]``, shape
        (4, *value_shape).
    u : float or Tensor
        Curve parameter, shape (*query_shape).
    order : int
        Derivative order, 0 (point) through 3.

    Returns
    -------
    Tensor
        Values, shape (*query_shape, *value_shape).

    Raises
    ------
    ValueError
        If ``order`` is not 0, 1, 2 or 3.

    Examples
    --------
    >>> a = torch.tensor([[0., -2., 0.], [-3., 3., 0.], [3., 0., 0.], [0., 0., 0.]])
    >>> algebraic_evaluate(a, 0.5)
    tensor([0.7500, 0.5000, 0.0000])
    """
    if order not in (0, 1, 2, 3):
        raise ValueError(f"Derivative order must be 0, 1, 2 or 3, got {order}")

    u = _as_parameter(
        u,
        dtype=coefficients.dtype,
        device=coefficients.device,
    )

    # Trailing singleton axes broadcast u against the value shape
    u = u.reshape(u.shape + (1,) * (coefficients.dim() - 1))

    a3, a2, a1, a0 = coefficients.unbind(0)

    if order == 0:
        return ((a3 * u + a2) * u + a1) * u + a0

    if order == 1:
        return (3 * a3 * u + 2 * a2) * u + a1

    if order == 2:
        return 6 * a3 * u + 2 * a2

    return 6 * a3 * torch.ones_like(u)
