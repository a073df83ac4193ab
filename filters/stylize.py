"""Ordered dithering and pixelation."""

import numpy as np

from models.filter_params import DitherParams
from utils.constants import BAYER_2X2
from utils.errors import InvalidParameterError
from utils.image_io import validate_image


def bayer_matrix(size: int) -> np.ndarray:
    """Bayer index matrix of a power-of-two size, values 0..size^2-1."""
    if size < 2 or size & (size - 1):
        raise InvalidParameterError(f"Bayer size must be a power of two >= 2, got {size}")
    m = BAYER_2X2
    while m.shape[0] < size:
        m = np.block([[4 * m, 4 * m + 2], [4 * m + 3, 4 * m + 1]])
    return m


def ordered_dither(image: np.ndarray, params: DitherParams = None) -> np.ndarray:
    """Add a tiled Bayer threshold to every channel and quantize to `levels`."""
    validate_image(image)
    params = params or DitherParams()
    n = params.matrix_size
    h, w = image.shape[:2]

    # thresholds centered on 0, in (-0.5, 0.5)
    threshold = (bayer_matrix(n) + 0.5) / (n * n) - 0.5
    tiled = np.tile(threshold, (h // n + 1, w // n + 1))[:h, :w, None]

    steps = params.levels - 1
    biased = np.clip(image + params.spread * tiled / steps, 0.0, 1.0)
    out = np.round(biased * steps) / steps
    return np.clip(out, 0.0, 1.0).astype(image.dtype)


def pixelate(image: np.ndarray, block: int = 10) -> np.ndarray:
    """Each block x block tile becomes its mean color. Edge tiles may be smaller."""
    validate_image(image)
    if block < 1:
        raise InvalidParameterError(f"Block size must be >= 1, got {block}")
    h, w = image.shape[:2]

    ys = np.arange(0, h, block)
    xs = np.arange(0, w, block)
    sums = np.add.reduceat(np.add.reduceat(image.astype(np.float64), ys, axis=0), xs, axis=1)
    rows = np.diff(np.append(ys, h))
    cols = np.diff(np.append(xs, w))
    means = sums / (rows[:, None, None] * cols[None, :, None])

    out = np.repeat(np.repeat(means, rows, axis=0), cols, axis=1)
    return out.astype(image.dtype)
