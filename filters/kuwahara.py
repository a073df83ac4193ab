"""Kuwahara edge-preserving smoothing."""

import numpy as np

from models.filter_params import KuwaharaParams
from utils.constants import LUMA_WEIGHTS
from utils.image_io import validate_image

# (row offset, column offset) of each quadrant in the padded image, in
# tie-break order: top-left, top-right, bottom-left, bottom-right.
_QUADRANTS = ((0, 0), (0, 1), (1, 0), (1, 1))

_TIE_EPSILON = 1e-9


def _summed_area_table(values: np.ndarray) -> np.ndarray:
    """Integral image with a leading row and column of zeros."""
    h, w = values.shape[:2]
    sat = np.zeros((h + 1, w + 1) + values.shape[2:], dtype=np.float64)
    sat[1:, 1:] = values.cumsum(axis=0).cumsum(axis=1)
    return sat


def _window_sums(sat: np.ndarray, top: int, left: int, n: int, h: int, w: int) -> np.ndarray:
    """Sum of every n x n window whose corner sits at (top + y, left + x)."""
    return (
        sat[top + n:top + n + h, left + n:left + n + w]
        - sat[top:top + h, left + n:left + n + w]
        - sat[top + n:top + n + h, left:left + w]
        + sat[top:top + h, left:left + w]
    )


def kuwahara(image: np.ndarray, params: KuwaharaParams = None) -> np.ndarray:
    """Replace each pixel by the mean color of its least varying quadrant.

    Each of the four quadrants is (radius+1) x (radius+1) pixels and shares
    the center pixel. Variance is measured on luminance. Lookups past the
    border are clamped to the edge.
    """
    validate_image(image)
    params = params or KuwaharaParams()
    r = params.radius
    if r == 0:
        return image.copy()

    h, w = image.shape[:2]
    src = image.astype(np.float64)
    padded = np.pad(src, ((r, r), (r, r), (0, 0)), mode='edge')
    luma = padded @ LUMA_WEIGHTS

    # R, G, B, L, L^2 summed in one pass
    features = np.concatenate([padded, luma[..., None], (luma * luma)[..., None]], axis=2)
    sat = _summed_area_table(features)

    n = r + 1
    count = float(n * n)
    means = np.stack([
        _window_sums(sat, dy * r, dx * r, n, h, w) / count
        for dy, dx in _QUADRANTS
    ])  # (4, H, W, 5)

    variance = np.maximum(means[..., 4] - means[..., 3] ** 2, 0.0)
    # Variances within rounding noise of the minimum count as ties; the
    # first such quadrant wins.
    is_min = variance <= variance.min(axis=0) + _TIE_EPSILON
    best = np.argmax(is_min, axis=0)

    colors = means[..., :3]
    out = np.take_along_axis(colors, best[None, :, :, None], axis=0)[0]
    return out.astype(image.dtype)
