import torch
from torch import Tensor

# Slack, in units of machine epsilon relative to the coordinate scale, that
# containment queries and the constructed volumes allow for rounding.
_TOLERANCE_ULPS = 64


def _tolerance(reference: Tensor) -> Tensor:
    """Absolute rounding tolerance for coordinates on the scale of ``reference``."""
    finfo = torch.finfo(reference.dtype)
    scale = reference.detach().abs().max().clamp_min(1.0)
    return _TOLERANCE_ULPS * finfo.eps * scale
