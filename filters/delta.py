"""Differential (delta) encoding of pixels in row-major scan order."""

import logging
from pathlib import Path

import numpy as np

from utils.errors import InvalidParameterError
from utils.image_io import validate_image

logger = logging.getLogger(__name__)

CSV_HEADER = 'R,G,B'


def delta_encode(image: np.ndarray) -> np.ndarray:
    """Each pixel minus the previous one in scan order; the first is kept as is.

    Values may be negative. Returned as float64 with the image's shape.
    """
    validate_image(image)
    flat = image.reshape(-1, 3).astype(np.float64)
    deltas = np.diff(flat, axis=0, prepend=np.zeros((1, 3)))
    return deltas.reshape(image.shape)


def delta_decode(deltas: np.ndarray) -> np.ndarray:
    """Cumulative sum in scan order, inverse of delta_encode."""
    if deltas.ndim != 3 or deltas.shape[2] != 3:
        raise InvalidParameterError(f"Expected deltas (H, W, 3), got shape {deltas.shape}")
    return np.cumsum(deltas.reshape(-1, 3), axis=0).reshape(deltas.shape)


def delta_roundtrip(image: np.ndarray) -> np.ndarray:
    return delta_decode(delta_encode(image)).astype(image.dtype)


def write_delta_csv(deltas: np.ndarray, path) -> bool:
    """Write one 'R,G,B' line per pixel, six decimals.

    An unopenable path is logged and skipped; returns whether the file was
    written.
    """
    path = Path(path)
    try:
        f = open(path, 'w', newline='')
    except OSError as e:
        logger.error("Could not open %s for writing: %s", path, e)
        return False

    with f:
        np.savetxt(f, deltas.reshape(-1, 3), fmt='%.6f', delimiter=',',
                   header=CSV_HEADER, comments='')
    logger.info("Wrote %d deltas to %s", deltas.size // 3, path)
    return True
