r"""Cubic Bezier basis matrices and structured matrix-vector products.

With :math:`U = [u^3, u^2, u, 1]` the Bernstein row is :math:`F_b = U M_b`
where

.. math::
    M_b = \begin{bmatrix}
        -1 &  3 & -3 & 1 \\
         3 & -6 &  3 & 0 \\
        -3 &  3 &  0 & 0 \\
         1 &  0 &  0 & 0
    \end{bmatrix}, \qquad
    M_b^{-1} = \begin{bmatrix}
        0 & 0   & 0   & 1 \\
        0 & 0   & 1/3 & 1 \\
        0 & 1/3 & 2/3 & 1 \\
        1 & 1   & 1   & 1
    \end{bmatrix}

and the Hermite/Bezier change of basis is

.. math::
    M_h^{-1} M_b = \begin{bmatrix}
         1 & 0 &  0 & 0 \\
         0 & 0 &  0 & 1 \\
        -3 & 3 &  0 & 0 \\
         0 & 0 & -3 & 3
    \end{bmatrix}, \qquad
    M_b^{-1} M_h = \begin{bmatrix}
        1 & 0 & 0   & 0 \\
        1 & 0 & 1/3 & 0 \\
        0 & 1 & 0   & -1/3 \\
        0 & 1 & 0   & 0
    \end{bmatrix}

The explicit matrices are mostly useful for checking the hand-optimized
``multiply_by_*`` products, which agree with ``matrix @ v`` for any ``v``
of shape ``(4, *trailing_shape)``.
"""

from typing import Optional

import torch
from torch import Tensor


def get_mb(
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Return the Bezier basis matrix ``Mb``.

    ``Mb`` is symmetric.

    Parameters
    ----------
    dtype : torch.dtype, optional
        Floating point type. Defaults to ``torch.get_default_dtype()``.
    device : torch.device, optional
        Device of the returned tensor.

    Returns
    -------
    Tensor
        Shape (4, 4).
    """
    return torch.tensor(
        [
            [-1.0, 3.0, -3.0, 1.0],
            [3.0, -6.0, 3.0, 0.0],
            [-3.0, 3.0, 0.0, 0.0],
            [1.0, 0.0, 0.0, 0.0],
        ],
        dtype=dtype,
        device=device,
    )


def multiply_by_mb(v: Tensor) -> Tensor:
    """Form ``Mb @ v`` using the structure of ``Mb``.

    Since ``Mb`` is symmetric this is also ``v @ Mb`` for a 1-D ``v``.

    Parameters
    ----------
    v : Tensor
        Shape (4, *trailing_shape).

    Returns
    -------
    Tensor
        Shape (4, *trailing_shape).
    """
    v0, v1, v2, v3 = v.unbind(0)

    return torch.stack(
        [
            3 * (v1 - v2) + v3 - v0,
            3 * (v0 + v2) - 6 * v1,
            3 * (v1 - v0),
            v0,
        ]
    )


def get_mb_inv(
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Return the inverse ``Mb^-1`` of the Bezier basis matrix.

    ``Mb^-1`` is symmetric.
    """
    third = 1.0 / 3.0

    return torch.tensor(
        [
            [0.0, 0.0, 0.0, 1.0],
            [0.0, 0.0, third, 1.0],
            [0.0, third, 2.0 * third, 1.0],
            [1.0, 1.0, 1.0, 1.0],
        ],
        dtype=dtype,
        device=device,
    )


def multiply_by_mb_inv(v: Tensor) -> Tensor:
    """Form ``Mb^-1 @ v`` using the structure of ``Mb^-1``.

    Since ``Mb^-1`` is symmetric this is also ``v @ Mb^-1`` for a 1-D
    ``v``.
    """
    v0, v1, v2, v3 = v.unbind(0)

    return torch.stack(
        [
            v3,
            v2 / 3 + v3,
            (v1 + 2 * v2) / 3 + v3,
            v0 + v1 + v2 + v3,
        ]
    )


def get_mh_inv_mb(
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Return ``Mh^-1 Mb``, the Bezier to Hermite conversion matrix.

    Not symmetric. Its inverse is :func:`get_mb_inv_mh`.
    """
    return torch.tensor(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
            [-3.0, 3.0, 0.0, 0.0],
            [0.0, 0.0, -3.0, 3.0],
        ],
        dtype=dtype,
        device=device,
    )


def multiply_by_mh_inv_mb(v: Tensor) -> Tensor:
    """Form ``Mh^-1 Mb @ v`` using the structure of the matrix."""
    v0, v1, v2, v3 = v.unbind(0)

    return torch.stack([v0, v3, 3 * (v1 - v0), 3 * (v3 - v2)])


def get_mb_inv_mh(
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Return ``Mb^-1 Mh``, the Hermite to Bezier conversion matrix.

    Not symmetric. Its inverse is :func:`get_mh_inv_mb`.
    """
    third = 1.0 / 3.0

    return torch.tensor(
        [
            [1.0, 0.0, 0.0, 0.0],
            [1.0, 0.0, third, 0.0],
            [0.0, 1.0, 0.0, -third],
            [0.0, 1.0, 0.0, 0.0],
        ],
        dtype=dtype,
        device=device,
    )


def multiply_by_mb_inv_mh(v: Tensor) -> Tensor:
    """Form ``Mb^-1 Mh @ v`` using the structure of the matrix."""
    v0, v1, v2, v3 = v.unbind(0)

    return torch.stack([v0, v0 + v2 / 3, v1 - v3 / 3, v1])
