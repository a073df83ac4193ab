"""Run every filter once on the sample images and save the results."""

import logging
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from filters.color import Brightness, keep_green_only, channels_swap, black_and_white, negative, brightness
from filters.convolution import apply_kernel
from filters.delta import delta_encode, delta_roundtrip, write_delta_csv
from filters.drawing import gradient, draw_disk, draw_circle, draw_rosace, animated_disk_frames, export_frames
from filters.edges import difference_of_gaussians
from filters.fractal import mandelbrot
from filters.geometry import Mirror, mirror, rotate90, split_rgb, mosaic, mirror_mosaic
from filters.kuwahara import kuwahara
from filters.noise import noisy, glitch, pixel_sort
from filters.stylize import ordered_dither, pixelate
from models.filter_params import DogParams, KuwaharaParams, DitherParams
from models.filter_result import FilterResult
from models.kernel import IDENTITY, BLUR, SHARPEN, EDGE_DETECT, BoxBlurKernel
from models.run_config import RunConfig
from utils.image_io import load_image, save_image
from utils.metrics import compute_psnr_ssim, Timer
from utils.test_images import generate_logo, generate_photo

logger = logging.getLogger(__name__)

# (output name, sample image or None for generated, filter)
Step = Tuple[str, Optional[str], Callable[[Optional[np.ndarray]], np.ndarray]]


def load_samples(config: RunConfig) -> Dict[str, np.ndarray]:
    """Sample images by key. Filters never write to them."""
    if config.synthetic:
        return {'logo': generate_logo(), 'photo': generate_photo(seed=config.seed)}
    return {'logo': load_image(config.logo_path), 'photo': load_image(config.photo_path)}


def build_steps(rng: np.random.Generator) -> List[Step]:
    return [
        ('green_only', 'logo', keep_green_only),
        ('channels_swap', 'logo', channels_swap),
        ('black_and_white', 'logo', black_and_white),
        ('negative', 'logo', negative),
        ('gradient', None, lambda _: gradient(300, 200)),
        ('mirror', 'logo', lambda img: mirror(img, Mirror.HORIZONTAL)),
        ('mirror_vertical', 'logo', lambda img: mirror(img, Mirror.VERTICAL)),
        ('mirror_both', 'logo', lambda img: mirror(img, Mirror.BOTH)),
        ('noisy', 'logo', lambda img: noisy(img, rng)),
        ('rotate90', 'logo', rotate90),
        ('split_rgb', 'logo', split_rgb),
        ('darker', 'photo', lambda img: brightness(img, Brightness.DARKER)),
        ('brighter', 'photo', lambda img: brightness(img, Brightness.BRIGHTER)),
        ('disk', None, lambda _: draw_disk(500, 500, radius=100)),
        ('circle', None, lambda _: draw_circle(500, 500, radius=100, thickness=5)),
        ('rosace', None, lambda _: draw_rosace(500, 500, radius=100, thickness=3)),
        ('mosaic', 'logo', mosaic),
        ('mirror_mosaic', 'logo', mirror_mosaic),
        ('glitch', 'logo', lambda img: glitch(img, rng)),
        ('pixel_sort', 'photo', lambda img: pixel_sort(img, rng)),
        ('mandelbrot', None, lambda _: mandelbrot(500, 500)),
        ('convolution_identity', 'photo', lambda img: apply_kernel(img, IDENTITY)),
        ('convolution_blur', 'photo', lambda img: apply_kernel(img, BLUR)),
        ('convolution_sharpen', 'photo', lambda img: apply_kernel(img, SHARPEN)),
        ('convolution_edge_detect', 'photo', lambda img: apply_kernel(img, EDGE_DETECT)),
        ('box_blur', 'photo', lambda img: apply_kernel(img, BoxBlurKernel(9))),
        ('difference_of_gaussians', 'photo', lambda img: difference_of_gaussians(img, DogParams())),
        ('kuwahara', 'photo', lambda img: kuwahara(img, KuwaharaParams(radius=4))),
        ('dithering', 'photo', lambda img: ordered_dither(img, DitherParams())),
        ('pixelate', 'photo', lambda img: pixelate(img, 10)),
        ('delta_roundtrip', 'logo', delta_roundtrip),
    ]


def run_step(step: Step, samples: Dict[str, np.ndarray], config: RunConfig) -> FilterResult:
    """Apply one filter, save its output and measure it against the source."""
    name, source_key, func = step
    source = samples[source_key] if source_key is not None else None

    timer = Timer()
    output = timer.measure(func, source)
    path = save_image(output, config.output_dir / f"{name}.png")

    result = FilterResult(
        name=name,
        output_path=path,
        shape=output.shape,
        elapsed_ms=timer.elapsed_ms,
    )
    if source is not None and source.shape == output.shape:
        metrics = compute_psnr_ssim(source, output)
        result.psnr = metrics['psnr']
        result.ssim = metrics['ssim']

    logger.debug("%s: %.2f ms", name, result.elapsed_ms)
    return result


def run_all(config: RunConfig, steps: Optional[List[Step]] = None) -> List[FilterResult]:
    """Run every step, then export the animation frames and the delta CSV."""
    rng = np.random.default_rng(config.seed)
    samples = load_samples(config)
    steps = steps if steps is not None else build_steps(rng)

    results = [run_step(step, samples, config) for step in steps]

    frames = animated_disk_frames(200, 200, n_frames=10, radius=20)
    export_frames(frames, config.output_dir / 'animation', prefix='disk')

    write_delta_csv(delta_encode(samples['logo']), config.output_dir / 'delta.csv')

    logger.info("Ran %d filters into %s", len(results), config.output_dir)
    return results
