"""Geometric remapping: mirrors, rotation, channel shift, mosaics.

Every filter here gathers from the untouched source into a new array, so no
output pixel ever reads an already-moved neighbor.
"""

from enum import Enum

import numpy as np

from utils.errors import InvalidParameterError
from utils.image_io import validate_image


class Mirror(Enum):
    HORIZONTAL = 'horizontal'
    VERTICAL = 'vertical'
    BOTH = 'both'


def mirror(image: np.ndarray, direction: Mirror = Mirror.HORIZONTAL) -> np.ndarray:
    """Flip left-right, top-bottom, or both (a half turn)."""
    validate_image(image)
    if direction is Mirror.HORIZONTAL:
        return image[:, ::-1].copy()
    if direction is Mirror.VERTICAL:
        return image[::-1, :].copy()
    if direction is Mirror.BOTH:
        return image[::-1, ::-1].copy()
    raise InvalidParameterError(f"Unknown mirror direction: {direction}")


def rotate90(image: np.ndarray) -> np.ndarray:
    """Quarter turn clockwise: (x, y) -> (height - 1 - y, x)."""
    validate_image(image)
    return np.rot90(image, k=-1).copy()


def split_rgb(image: np.ndarray, offset: int = 25) -> np.ndarray:
    """Red sampled `offset` pixels to the left, blue to the right."""
    validate_image(image)
    w = image.shape[1]
    xs = np.arange(w)
    out = image.copy()
    out[:, :, 0] = image[:, np.clip(xs - offset, 0, w - 1), 0]
    out[:, :, 2] = image[:, np.clip(xs + offset, 0, w - 1), 2]
    return out


def _check_tiles(tiles: int) -> None:
    if tiles < 1:
        raise InvalidParameterError(f"Need at least one tile, got {tiles}")


def mosaic(image: np.ndarray, tiles: int = 5) -> np.ndarray:
    """tiles x tiles reduced copies of the image, same output size."""
    validate_image(image)
    _check_tiles(tiles)
    h, w = image.shape[:2]
    ys = (np.arange(h) * tiles) % h
    xs = (np.arange(w) * tiles) % w
    return image[ys[:, None], xs[None, :]]


def mirror_mosaic(image: np.ndarray, tiles: int = 5) -> np.ndarray:
    """Mosaic with odd tile columns flipped left-right and odd rows top-bottom."""
    validate_image(image)
    _check_tiles(tiles)
    h, w = image.shape[:2]

    def indices(n):
        i = np.arange(n) * tiles
        local = i % n
        flipped = (i // n) % 2 == 1
        return np.where(flipped, n - 1 - local, local)

    return image[indices(h)[:, None], indices(w)[None, :]]
