"""Synthetic sample images, used in place of the bundled logo and photo."""

import numpy as np


def generate_uniform(width: int, height: int, color=(0.5, 0.5, 0.5)) -> np.ndarray:
    """Constant-color image."""
    img = np.empty((height, width, 3), dtype=np.float32)
    img[:, :] = color
    return img


def generate_checkerboard(size: int = 256, square: int = 32) -> np.ndarray:
    """High-contrast checkerboard - every square edge is a hard edge."""
    y, x = np.mgrid[0:size, 0:size]
    dark = ((y // square + x // square) % 2) == 0
    img = np.full((size, size, 3), 0.86, dtype=np.float32)
    img[dark] = 0.12
    return img


def generate_logo(width: int = 300, height: int = 345) -> np.ndarray:
    """Saturated shapes on a flat background - stands in for images/logo.png."""
    img = generate_uniform(width, height, (0.95, 0.93, 0.88))
    y, x = np.mgrid[0:height, 0:width]

    cx, cy = width / 2, height / 2
    r = min(width, height) * 0.35
    ring = np.abs(np.hypot(x - cx, y - cy) - r) < r * 0.12
    img[ring] = (0.85, 0.15, 0.2)

    bar = (np.abs(y - cy) < height * 0.05) & (np.abs(x - cx) < width * 0.3)
    img[bar] = (0.1, 0.3, 0.8)

    tri = (y > cy) & (y - cy < (width * 0.2 - np.abs(x - cx)))
    img[tri] = (0.15, 0.7, 0.3)
    return img


def generate_photo(width: int = 512, height: int = 384, seed: int = 123) -> np.ndarray:
    """Natural-looking scene with sky, mountains and textured ground."""
    rng = np.random.default_rng(seed)
    img = np.zeros((height, width, 3), dtype=np.float32)
    rows = np.arange(height, dtype=np.float32)[:, None]
    cols = np.arange(width, dtype=np.float32)

    horizon = int(height * 0.45)
    ground = int(height * 0.6)

    # Sky gradient
    t = rows[:horizon] / max(horizon, 1)
    img[:horizon] = np.stack([0.7 - 0.25 * t, 0.82 - 0.3 * t, 0.94 - 0.15 * t], axis=-1)

    # Mountains: a few summed sines
    ridge = np.zeros(width, dtype=np.float32)
    for freq in (3, 7, 13):
        ridge += np.sin(cols / width * freq * np.pi + rng.uniform(0, 2 * np.pi)) / freq
    ridge = (ridge - ridge.min()) / max(float(np.ptp(ridge)), 1e-6)
    peak = (horizon - height * 0.25 + ridge * height * 0.2).astype(int)

    y = np.arange(height)[:, None]
    mountain = (y >= peak[None, :]) & (y < ground)
    img[mountain] = (0.32, 0.34, 0.38)

    # Ground with texture
    t = (rows[ground:] - ground) / max(height - ground, 1)
    noise = rng.uniform(-0.03, 0.03, size=(height - ground, width)).astype(np.float32)
    img[ground:] = np.stack([
        0.24 + 0.15 * t + noise,
        0.4 + 0.1 * t + noise,
        0.2 + 0.08 * t + noise,
    ], axis=-1)

    # Sun glow
    sun_x, sun_y, sun_r = width * 0.25, height * 0.15, min(width, height) * 0.12
    dist = np.hypot(np.arange(width)[None, :] - sun_x, np.arange(height)[:, None] - sun_y)
    glow = np.clip(1 - (dist / sun_r) ** 2, 0, 1)[..., None] * 0.7
    img = img * (1 - glow) + np.array([1.0, 0.94, 0.78], dtype=np.float32) * glow

    return np.clip(img, 0, 1).astype(np.float32)
