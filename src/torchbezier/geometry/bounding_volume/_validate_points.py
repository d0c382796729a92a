import torch
from torch import Tensor

from .._exceptions import InsufficientPointsError


def _validate_points(points: Tensor) -> Tensor:
    points = torch.as_tensor(points)

    if points.dim() != 2 or points.shape[-1] != 3:
        raise ValueError(
            f"Expected points of shape (n, 3), got {tuple(points.shape)}"
        )

    if points.shape[0] == 0:
        raise InsufficientPointsError(
            "At least one point is required to bound a point set"
        )

    if not points.is_floating_point():
        points = points.to(torch.get_default_dtype())

    return points
