"""Metrics: PSNR, SSIM, runtime."""

import time
import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity
from typing import Dict, Optional


def compute_psnr_ssim(original: np.ndarray, filtered: np.ndarray) -> Dict[str, Optional[float]]:
    """Compute PSNR and SSIM between two [0,1] RGB images of the same shape."""
    if original.shape != filtered.shape:
        raise ValueError(f"Shape mismatch: {original.shape} vs {filtered.shape}")

    a = np.clip(original, 0.0, 1.0).astype(np.float64)
    b = np.clip(filtered, 0.0, 1.0).astype(np.float64)

    if np.array_equal(a, b):
        psnr = float('inf')
    else:
        psnr = float(peak_signal_noise_ratio(a, b, data_range=1.0))

    # SSIM needs a 7x7 window at least
    if min(a.shape[:2]) >= 7:
        ssim = float(structural_similarity(a, b, channel_axis=2, data_range=1.0))
    else:
        ssim = None

    return {'psnr': psnr, 'ssim': ssim}


class Timer:
    """Simple timer for filter runtime."""

    def __init__(self):
        self.elapsed_ms = 0.0

    def measure(self, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.elapsed_ms = (time.perf_counter() - start) * 1000.0
        return result
