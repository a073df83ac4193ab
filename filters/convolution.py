"""Convolution engine: fixed 3x3 kernels and separable box blur."""

import logging

import numpy as np
from scipy.ndimage import correlate

from models.kernel import Kernel, MatrixKernel, BoxBlurKernel
from utils.errors import InvalidParameterError
from utils.image_io import validate_image

logger = logging.getLogger(__name__)


def convolve_3x3(image: np.ndarray, weights: np.ndarray) -> np.ndarray:
    """Weighted 3x3 neighborhood sum of the source for every interior pixel.

    The 1-pixel border is copied from the source unchanged. Images with no
    interior (fewer than 3 rows or columns) come back as a plain copy.
    """
    validate_image(image)
    weights = np.asarray(weights, dtype=np.float64)
    if weights.shape != (3, 3):
        raise InvalidParameterError(f"Kernel must be 3x3, got {weights.shape}")

    out = image.copy()
    h, w = image.shape[:2]
    if h < 3 or w < 3:
        return out

    src = image.astype(np.float64)
    for c in range(3):
        # Border rows/columns of `filtered` are discarded, so the mode only
        # has to keep the interior exact.
        filtered = correlate(src[:, :, c], weights, mode='nearest')
        out[1:-1, 1:-1, c] = filtered[1:-1, 1:-1]
    return out


def _running_mean(src: np.ndarray, size: int, axis: int) -> np.ndarray:
    """Mean over a sliding window of `size` samples along `axis`.

    Out-of-range positions are clamped to the first/last sample. The window
    sum is updated incrementally: one sample leaves, one enters.
    """
    lines = np.moveaxis(src, axis, 0)
    n = lines.shape[0]
    out = np.empty_like(lines)

    lo = -(size // 2)
    hi = lo + size - 1

    def clamp(i):
        return min(max(i, 0), n - 1)

    acc = np.zeros_like(lines[0])
    for offset in range(lo, hi + 1):
        acc += lines[clamp(offset)]
    out[0] = acc / size

    for i in range(1, n):
        acc += lines[clamp(i + hi)] - lines[clamp(i - 1 + lo)]
        out[i] = acc / size

    return np.moveaxis(out, 0, axis)


def box_blur(image: np.ndarray, size: int) -> np.ndarray:
    """Mean over a size x size window, edge-replicated. size <= 1 is a no-op."""
    validate_image(image)
    if size <= 1:
        return image.copy()

    src = image.astype(np.float64)
    horizontal = _running_mean(src, size, axis=1)
    out = _running_mean(horizontal, size, axis=0)
    return out.astype(image.dtype)


def apply_kernel(image: np.ndarray, kernel: Kernel) -> np.ndarray:
    """Run `kernel` through the matching algorithm."""
    if isinstance(kernel, BoxBlurKernel):
        logger.debug("Box blur, size %d", kernel.size)
        return box_blur(image, kernel.size)
    if isinstance(kernel, MatrixKernel):
        logger.debug("3x3 convolution with %s kernel", kernel.name)
        return convolve_3x3(image, kernel.weights)
    raise InvalidParameterError(f"Unsupported kernel: {kernel!r}")
