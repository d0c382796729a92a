"""Bernstein basis functions of a cubic Bezier curve and their derivatives."""

from typing import Optional, Union

import torch
from torch import Tensor


def _as_parameter(
    u: Union[float, Tensor],
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    u = torch.as_tensor(u, dtype=dtype, device=device)

    if not u.is_floating_point():
        u = u.to(torch.get_default_dtype())

    return u


def bernstein_basis(u: Union[float, Tensor]) -> Tensor:
    r"""Evaluate the cubic Bernstein basis functions.

    .. math::
        B_0 = (1-u)^3, \quad B_1 = 3u(1-u)^2, \quad
        B_2 = 3u^2(1-u), \quad B_3 = u^3

    This is the row :math:`U M_b` with :math:`U = [u^3, u^2, u, 1]`,
    formed from shared powers of :math:`u` and :math:`1-u` instead of the
    matrix product.

    Parameters
    ----------
    u : float or Tensor
        Curve parameter, shape (*query_shape). Values outside [0, 1] are
        allowed.

    Returns
    -------
    Tensor
        Basis values, shape (*query_shape, 4).

    Examples
    --------
    >>> bernstein_basis(torch.tensor(0.5))
    tensor([0.1250, 0.3750, 0.3750, 0.1250])
    """
    u = _as_parameter(u)

    u2 = u * u
    u3 = u * u2

    u1 = 1 - u
    u12 = u1 * u1
    u13 = u1 * u12

    return torch.stack([u13, 3 * u * u12, 3 * u2 * u1, u3], dim=-1)


def bernstein_basis_first_derivative(u: Union[float, Tensor]) -> Tensor:
    r"""Evaluate the first derivatives of the cubic Bernstein basis.

    .. math::
        [-3u^2 + 6u - 3, \; 9u^2 - 12u + 3, \; -9u^2 + 6u, \; 3u^2]

    Parameters
    ----------
    u : float or Tensor
        Curve parameter, shape (*query_shape).

    Returns
    -------
    Tensor
        Basis derivatives, shape (*query_shape, 4).
    """
    u = _as_parameter(u)

    u6 = 6 * u
    u2 = u * u
    u23 = 3 * u2
    u29 = 9 * u2

    return torch.stack(
        [u6 - u23 - 3, u29 - 12 * u + 3, u6 - u29, u23],
        dim=-1,
    )


def bernstein_basis_second_derivative(u: Union[float, Tensor]) -> Tensor:
    r"""Evaluate the second derivatives of the cubic Bernstein basis.

    .. math::
        [6 - 6u, \; 18u - 12, \; 6 - 18u, \; 6u]
    """
    u = _as_parameter(u)

    u6 = 6 * u
    u18 = 18 * u

    return torch.stack([6 - u6, u18 - 12, 6 - u18, u6], dim=-1)


def bernstein_basis_third_derivative(u: Union[float, Tensor]) -> Tensor:
    """Evaluate the third derivatives of the cubic Bernstein basis.

    The third derivative of a cubic is constant, ``[-6, 18, -18, 6]``;
    ``u`` only supplies the shape, dtype and device of the result.
    """
    u = _as_parameter(u)

    one = torch.ones_like(u)

    return torch.stack([-6 * one, 18 * one, -18 * one, 6 * one], dim=-1)
