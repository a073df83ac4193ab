"""Mandelbrot set renderer."""

import numpy as np

from utils.errors import InvalidParameterError


def mandelbrot(width: int = 500, height: int = 500, max_iterations: int = 50,
               center=(-0.5, 0.0), span: float = 4.0) -> np.ndarray:
    """Escape-time rendering; brightness is iterations / max_iterations.

    `span` is the width of the view on the real axis. Points that never
    escape |z| > 2 are white.
    """
    if width <= 0 or height <= 0:
        raise InvalidParameterError(f"Image size must be positive, got {width}x{height}")
    if max_iterations < 1:
        raise InvalidParameterError(f"max_iterations must be >= 1, got {max_iterations}")

    scale = span / width
    re = center[0] + (np.arange(width) - width / 2) * scale
    im = center[1] + (np.arange(height) - height / 2) * scale
    c = re[None, :] + 1j * im[:, None]

    z = np.zeros_like(c)
    counts = np.full(c.shape, max_iterations, dtype=np.int32)
    alive = np.ones(c.shape, dtype=bool)
    for i in range(max_iterations):
        z[alive] = z[alive] * z[alive] + c[alive]
        escaped = alive & (np.abs(z) > 2.0)
        counts[escaped] = i
        alive &= ~escaped
        if not alive.any():
            break

    level = (counts / max_iterations).astype(np.float32)
    return np.repeat(level[:, :, None], 3, axis=2)
