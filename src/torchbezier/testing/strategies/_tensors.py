from typing import Optional, Tuple

import hypothesis.extra.numpy
import hypothesis.strategies
import numpy
import torch

from ._shapes import shapes

_NUMPY_DTYPES = {
    torch.float32: numpy.float32,
    torch.float64: numpy.float64,
}


@hypothesis.strategies.composite
def tensors(
    draw: hypothesis.strategies.DrawFn,
    dtype: torch.dtype = torch.float64,
    shape: Optional[Tuple[int, ...]] = None,
    min_dims: int = 1,
    max_dims: int = 2,
    min_side: int = 1,
    max_side: int = 5,
    elements: Optional[hypothesis.strategies.SearchStrategy[float]] = None,
    device: str = "cpu",
) -> torch.Tensor:
    """Generate random real tensors with configurable properties."""
    if dtype not in _NUMPY_DTYPES:
        raise ValueError(f"Unsupported dtype {dtype}")

    if shape is None:
        shape = draw(shapes(min_dims, max_dims, min_side, max_side))

    if elements is None:
        elements = hypothesis.strategies.floats(
            min_value=-10.0,
            max_value=10.0,
            allow_nan=False,
            allow_infinity=False,
            width=32 if dtype == torch.float32 else 64,
        )

    arr = draw(
        hypothesis.extra.numpy.arrays(
            _NUMPY_DTYPES[dtype], shape, elements=elements
        )
    )

    return torch.tensor(arr, dtype=dtype).to(device)
