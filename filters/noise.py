"""Randomized filters: salt noise, glitch blocks, pixel sorting.

All take an optional numpy Generator so runs can be reproduced.
"""

import numpy as np

from filters.color import luminance
from utils.errors import InvalidParameterError
from utils.image_io import validate_image


def _rng(rng):
    return rng if rng is not None else np.random.default_rng()


def noisy(image: np.ndarray, rng: np.random.Generator = None,
          probability: float = 1 / 6) -> np.ndarray:
    """Replace each pixel by a random color with the given probability."""
    validate_image(image)
    if not (0.0 <= probability <= 1.0):
        raise InvalidParameterError(f"Probability must be in [0, 1], got {probability}")
    rng = _rng(rng)

    out = image.copy()
    mask = rng.random(image.shape[:2]) < probability
    out[mask] = rng.random((int(mask.sum()), 3))
    return out


def glitch(image: np.ndarray, rng: np.random.Generator = None,
           n_glitches: int = 100, max_size=(30, 8)) -> np.ndarray:
    """Copy random rectangles of the source to other random positions.

    `max_size` is (width, height). Rectangles are always read from the
    unmodified source, so glitches never cascade.
    """
    validate_image(image)
    if n_glitches < 0:
        raise InvalidParameterError(f"Glitch count must be >= 0, got {n_glitches}")
    rng = _rng(rng)

    h, w = image.shape[:2]
    max_w, max_h = min(max_size[0], w), min(max_size[1], h)
    if max_w < 1 or max_h < 1:
        raise InvalidParameterError(f"Glitch size must be positive, got {max_size}")

    out = image.copy()
    for _ in range(n_glitches):
        rw = int(rng.integers(1, max_w + 1))
        rh = int(rng.integers(1, max_h + 1))
        sx, dx = rng.integers(0, w - rw + 1, size=2)
        sy, dy = rng.integers(0, h - rh + 1, size=2)
        out[dy:dy + rh, dx:dx + rw] = image[sy:sy + rh, sx:sx + rw]
    return out


def pixel_sort(image: np.ndarray, rng: np.random.Generator = None,
               probability: float = 0.3, max_length: int = 60) -> np.ndarray:
    """Sort random horizontal runs of pixels by increasing luminance.

    Each row is cut into consecutive runs of random length in
    [1, max_length]; each run is sorted with the given probability.
    """
    validate_image(image)
    if max_length < 1:
        raise InvalidParameterError(f"max_length must be >= 1, got {max_length}")
    rng = _rng(rng)

    h, w = image.shape[:2]
    out = image.copy()
    luma = luminance(image)
    for y in range(h):
        x = 0
        while x < w:
            end = min(x + int(rng.integers(1, max_length + 1)), w)
            if rng.random() < probability:
                order = np.argsort(luma[y, x:end], kind='stable')
                out[y, x:end] = image[y, x:end][order]
            x = end
    return out
