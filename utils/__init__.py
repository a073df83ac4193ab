"""Shared utilities."""

from .constants import LUMA_WEIGHTS
from .errors import FilterLabError, ImageNotFoundError, ImageDecodeError, InvalidParameterError
from .metrics import compute_psnr_ssim, Timer
from .test_images import generate_uniform, generate_checkerboard, generate_logo, generate_photo
from .image_io import load_image, save_image, validate_image

__all__ = [
    'LUMA_WEIGHTS',
    'FilterLabError',
    'ImageNotFoundError',
    'ImageDecodeError',
    'InvalidParameterError',
    'compute_psnr_ssim',
    'Timer',
    'generate_uniform',
    'generate_checkerboard',
    'generate_logo',
    'generate_photo',
    'load_image',
    'save_image',
    'validate_image',
]
