"""Image filters - pure functions from (image, parameters) to a new image."""

from .color import Brightness, luminance, keep_green_only, channels_swap, black_and_white, negative, brightness
from .convolution import convolve_3x3, box_blur, apply_kernel
from .edges import difference_of_gaussians
from .kuwahara import kuwahara
from .geometry import Mirror, mirror, rotate90, split_rgb, mosaic, mirror_mosaic
from .drawing import gradient, draw_disk, draw_circle, draw_rosace, animated_disk_frames, export_frames
from .noise import noisy, glitch, pixel_sort
from .fractal import mandelbrot
from .stylize import bayer_matrix, ordered_dither, pixelate
from .delta import delta_encode, delta_decode, delta_roundtrip, write_delta_csv
from .pipeline import run_all

__all__ = [
    'Brightness',
    'luminance',
    'keep_green_only',
    'channels_swap',
    'black_and_white',
    'negative',
    'brightness',
    'convolve_3x3',
    'box_blur',
    'apply_kernel',
    'difference_of_gaussians',
    'kuwahara',
    'Mirror',
    'mirror',
    'rotate90',
    'split_rgb',
    'mosaic',
    'mirror_mosaic',
    'gradient',
    'draw_disk',
    'draw_circle',
    'draw_rosace',
    'animated_disk_frames',
    'export_frames',
    'noisy',
    'glitch',
    'pixel_sort',
    'mandelbrot',
    'bayer_matrix',
    'ordered_dither',
    'pixelate',
    'delta_encode',
    'delta_decode',
    'delta_roundtrip',
    'write_delta_csv',
    'run_all',
]
