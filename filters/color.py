"""Per-pixel color filters."""

from enum import Enum

import numpy as np

from utils.constants import LUMA_WEIGHTS
from utils.errors import InvalidParameterError
from utils.image_io import validate_image


class Brightness(Enum):
    DARKER = 'darker'
    BRIGHTER = 'brighter'


def luminance(image: np.ndarray) -> np.ndarray:
    """BT.601 luma, shape (H, W)."""
    return image @ LUMA_WEIGHTS.astype(image.dtype)


def keep_green_only(image: np.ndarray) -> np.ndarray:
    validate_image(image)
    out = np.zeros_like(image)
    out[:, :, 1] = image[:, :, 1]
    return out


def channels_swap(image: np.ndarray) -> np.ndarray:
    """Exchange red and blue."""
    validate_image(image)
    return image[:, :, ::-1].copy()


def black_and_white(image: np.ndarray) -> np.ndarray:
    """Replace every channel with luminance."""
    validate_image(image)
    gray = luminance(image)
    return np.repeat(gray[:, :, None], 3, axis=2)


def negative(image: np.ndarray) -> np.ndarray:
    validate_image(image)
    return 1.0 - image


def brightness(image: np.ndarray, mode: Brightness) -> np.ndarray:
    """Squaring darkens, square root brightens."""
    validate_image(image)
    src = np.clip(image, 0.0, 1.0)
    if mode is Brightness.DARKER:
        out = src * src
    elif mode is Brightness.BRIGHTER:
        out = np.sqrt(src)
    else:
        raise InvalidParameterError(f"Unknown brightness mode: {mode}")
    return np.clip(out, 0.0, 1.0).astype(image.dtype)
