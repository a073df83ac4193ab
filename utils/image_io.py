"""Image I/O using OpenCV."""

import logging
from pathlib import Path

import cv2
import numpy as np

from utils.errors import ImageDecodeError, ImageNotFoundError, InvalidParameterError

logger = logging.getLogger(__name__)


def validate_image(image: np.ndarray) -> None:
    """Raise unless image is a non-empty (H, W, 3) array."""
    if image.ndim != 3 or image.shape[2] != 3:
        raise InvalidParameterError(f"Expected image (H, W, 3), got shape {image.shape}")
    if image.shape[0] == 0 or image.shape[1] == 0:
        raise InvalidParameterError(f"Image has no pixels: shape {image.shape}")


def to_float(image_u8: np.ndarray) -> np.ndarray:
    """uint8 [0,255] -> float32 [0,1]."""
    return image_u8.astype(np.float32) / 255.0


def to_uint8(image: np.ndarray) -> np.ndarray:
    """float [0,1] -> uint8 [0,255], clipping out-of-range values."""
    clean = np.nan_to_num(image, nan=0.0, posinf=1.0, neginf=0.0)
    return np.round(np.clip(clean, 0.0, 1.0) * 255.0).astype(np.uint8)


def load_image(path) -> np.ndarray:
    """Load image as RGB float32 in [0,1]."""
    path = Path(path)
    if not path.is_file():
        raise ImageNotFoundError(f"No image at {path}")
    img = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if img is None:
        raise ImageDecodeError(f"Could not load image from {path}")
    logger.debug("Loaded %s (%dx%d)", path, img.shape[1], img.shape[0])
    return to_float(cv2.cvtColor(img, cv2.COLOR_BGR2RGB))


def save_image(image: np.ndarray, path) -> Path:
    """Save RGB float image. Format is inferred from the extension."""
    validate_image(image)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    bgr = cv2.cvtColor(to_uint8(image), cv2.COLOR_RGB2BGR)
    if not cv2.imwrite(str(path), bgr):
        raise ImageDecodeError(f"Could not encode image to {path}")
    logger.info("Saved %s", path)
    return path
