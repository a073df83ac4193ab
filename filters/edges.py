"""Difference of Gaussians edge highlighting."""

import logging

import numpy as np

from filters.convolution import box_blur
from models.filter_params import DogParams
from utils.image_io import validate_image

logger = logging.getLogger(__name__)


def difference_of_gaussians(image: np.ndarray, params: DogParams = None) -> np.ndarray:
    """Small blur minus large blur, per channel.

    Differences above the threshold saturate to 1.0; everything else is
    clamped to [0, 1]. The snap exaggerates edges instead of grading them.
    """
    validate_image(image)
    params = params or DogParams()

    small = box_blur(image, params.small_size).astype(np.float64)
    large = box_blur(image, params.large_size).astype(np.float64)
    diff = small - large

    out = np.where(diff > params.threshold, 1.0, np.clip(diff, 0.0, 1.0))
    logger.debug(
        "DoG %d/%d: %.1f%% of samples above threshold",
        params.small_size, params.large_size, 100.0 * np.mean(diff > params.threshold),
    )
    return out.astype(image.dtype)
