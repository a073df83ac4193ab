"""Convolution kernel specifications.

A kernel is either a fixed 3x3 weight matrix or a box blur of arbitrary size.
The box blur is kept as its own variant because it runs through the
separable running-sum path instead of a matrix product.
"""

from dataclasses import dataclass, field
from typing import Union

import numpy as np

from utils.constants import IDENTITY_3X3, BLUR_3X3, SHARPEN_3X3, EDGE_DETECT_3X3
from utils.errors import InvalidParameterError


@dataclass(frozen=True, eq=False)
class MatrixKernel:
    """Fixed 3x3 weight matrix."""

    name: str
    weights: np.ndarray = field(repr=False)

    def __post_init__(self):
        weights = np.asarray(self.weights, dtype=np.float64)
        if weights.shape != (3, 3):
            raise InvalidParameterError(f"Kernel must be 3x3, got {weights.shape}")
        object.__setattr__(self, 'weights', weights)


@dataclass(frozen=True)
class BoxBlurKernel:
    """Mean over a size x size window."""

    size: int = 3

    def __post_init__(self):
        if not isinstance(self.size, (int, np.integer)):
            raise InvalidParameterError(f"Box blur size must be an integer, got {self.size!r}")


Kernel = Union[MatrixKernel, BoxBlurKernel]

IDENTITY = MatrixKernel('identity', IDENTITY_3X3)
BLUR = MatrixKernel('blur', BLUR_3X3)
SHARPEN = MatrixKernel('sharpen', SHARPEN_3X3)
EDGE_DETECT = MatrixKernel('edge_detect', EDGE_DETECT_3X3)

_NAMED = {k.name: k for k in (IDENTITY, BLUR, SHARPEN, EDGE_DETECT)}


def named_kernel(name: str, size: int = 3) -> Kernel:
    """Look up a kernel by name. `size` only applies to 'box_blur'."""
    if name == 'box_blur':
        return BoxBlurKernel(size)
    try:
        return _NAMED[name]
    except KeyError:
        valid = ', '.join(sorted([*_NAMED, 'box_blur']))
        raise InvalidParameterError(f"Unknown kernel {name!r} (expected one of {valid})") from None
