"""Procedural images: gradient, disks, circles, rosace, animation frames."""

import logging
from pathlib import Path
from typing import List, Sequence, Tuple

import numpy as np

from utils.errors import InvalidParameterError
from utils.image_io import save_image

logger = logging.getLogger(__name__)

WHITE = (1.0, 1.0, 1.0)


def _blank(width: int, height: int) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise InvalidParameterError(f"Image size must be positive, got {width}x{height}")
    return np.zeros((height, width, 3), dtype=np.float32)


def _distance(width: int, height: int, center: Tuple[float, float]) -> np.ndarray:
    """Distance of every pixel from `center` = (x, y)."""
    y, x = np.mgrid[0:height, 0:width]
    return np.hypot(x - center[0], y - center[1])


def gradient(width: int, height: int) -> np.ndarray:
    """Horizontal ramp, black on the left to nearly white on the right."""
    img = _blank(width, height)
    img[:, :, :] = (np.arange(width, dtype=np.float32) / width)[None, :, None]
    return img


def draw_disk(width: int, height: int, center=None, radius: float = 100.0,
              color=WHITE) -> np.ndarray:
    """Filled disk on black."""
    img = _blank(width, height)
    center = center if center is not None else (width / 2, height / 2)
    img[_distance(width, height, center) <= radius] = color
    return img


def draw_circle(width: int, height: int, center=None, radius: float = 100.0,
                thickness: float = 3.0, color=WHITE) -> np.ndarray:
    """Ring of the given thickness on black."""
    img = _blank(width, height)
    center = center if center is not None else (width / 2, height / 2)
    ring = np.abs(_distance(width, height, center) - radius) <= thickness / 2
    img[ring] = color
    return img


def draw_rosace(width: int, height: int, radius: float = 100.0,
                thickness: float = 3.0, petals: int = 6, color=WHITE) -> np.ndarray:
    """A central circle plus `petals` circles centered on it."""
    if petals < 0:
        raise InvalidParameterError(f"Petal count must be >= 0, got {petals}")
    img = _blank(width, height)
    cx, cy = width / 2, height / 2
    centers = [(cx, cy)] + [
        (cx + radius * np.cos(2 * np.pi * k / petals), cy + radius * np.sin(2 * np.pi * k / petals))
        for k in range(petals)
    ]
    for center in centers:
        ring = np.abs(_distance(width, height, center) - radius) <= thickness / 2
        img[ring] = color
    return img


def animated_disk_frames(width: int = 500, height: int = 500, n_frames: int = 30,
                         radius: float = 50.0) -> List[np.ndarray]:
    """A disk crossing the middle row from the left edge to the right edge."""
    if n_frames < 1:
        raise InvalidParameterError(f"Need at least one frame, got {n_frames}")
    step = width / max(n_frames - 1, 1)
    return [
        draw_disk(width, height, center=(i * step, height / 2), radius=radius)
        for i in range(n_frames)
    ]


def export_frames(frames: Sequence[np.ndarray], output_dir, prefix: str = 'frame') -> List[Path]:
    """Write frames as prefix_000.png, prefix_001.png, ..."""
    output_dir = Path(output_dir)
    paths = [
        save_image(frame, output_dir / f"{prefix}_{i:03d}.png")
        for i, frame in enumerate(frames)
    ]
    logger.info("Exported %d frames to %s", len(paths), output_dir)
    return paths
