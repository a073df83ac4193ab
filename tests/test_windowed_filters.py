"""Tests for difference of Gaussians and the Kuwahara filter."""

import numpy as np
import pytest
from filters.edges import difference_of_gaussians
from filters.kuwahara import kuwahara
from models.filter_params import DogParams, KuwaharaParams
from utils.errors import InvalidParameterError
from utils.test_images import generate_checkerboard, generate_uniform


def test_dog_uniform_image_is_black():
    """No edges, no output."""
    image = generate_uniform(20, 15, (0.3, 0.6, 0.8))
    assert np.allclose(difference_of_gaussians(image), 0.0, atol=1e-6)


def test_dog_snaps_above_threshold():
    """Differences above the threshold saturate to exactly 1."""
    image = generate_checkerboard(64, square=8)
    out = difference_of_gaussians(image, DogParams(small_size=3, large_size=9))
    assert out.max() == 1.0
    values = np.unique(out)
    # Nothing strictly between the threshold and 1
    assert not np.any((values > 0.03) & (values < 1.0))


def test_dog_output_in_range():
    image = np.random.default_rng(0).random((30, 30, 3)).astype(np.float32)
    out = difference_of_gaussians(image)
    assert out.min() >= 0.0 and out.max() <= 1.0
    assert np.all(np.isfinite(out))


def test_dog_small_differences_pass_through():
    """A difference of 0.02 is below the threshold and kept as is."""
    image = np.zeros((1, 40, 3))
    image[:, 20:] = 0.1
    out = difference_of_gaussians(image, DogParams(small_size=1, large_size=5, threshold=0.03))
    # x=20: large window spans x=18..22, mean 0.06; small is 0.1 -> 0.04, snapped
    assert np.allclose(out[0, 20], 1.0)
    # x=22: large window 20..24 is all 0.1 -> difference 0
    assert np.allclose(out[0, 22], 0.0)
    # x=21: large window 19..23 has one dark sample -> 0.1 - 0.08 = 0.02
    assert np.allclose(out[0, 21], 0.02)


def test_dog_params_validation():
    with pytest.raises(InvalidParameterError):
        DogParams(small_size=9, large_size=3)
    with pytest.raises(InvalidParameterError):
        DogParams(threshold=-0.1)


def test_kuwahara_uniform_image_unchanged():
    """Every quadrant has the same mean, so the color is kept."""
    image = generate_uniform(16, 12, (0.25, 0.5, 0.75))
    out = kuwahara(image, KuwaharaParams(radius=3))
    assert np.allclose(out, image, atol=1e-6)


def test_kuwahara_radius_zero_is_copy():
    image = np.random.default_rng(1).random((5, 5, 3))
    assert np.array_equal(kuwahara(image, KuwaharaParams(radius=0)), image)


def test_kuwahara_negative_radius_rejected():
    with pytest.raises(InvalidParameterError):
        KuwaharaParams(radius=-1)


def test_kuwahara_preserves_hard_edge():
    """A vertical step edge stays sharp; pixels take a flat quadrant's color."""
    image = np.zeros((10, 10, 3))
    image[:, 5:] = 1.0
    out = kuwahara(image, KuwaharaParams(radius=2))
    assert np.allclose(out, image)


def test_kuwahara_picks_lowest_variance_quadrant():
    """Noise in the top-left quadrant is avoided by picking a flat one."""
    image = np.full((5, 5, 3), 0.5)
    image[0, 0] = 1.0
    image[1, 0] = 0.0
    out = kuwahara(image, KuwaharaParams(radius=2))
    # center (2,2): top-left quadrant holds the noise, the others are flat
    assert np.allclose(out[2, 2], 0.5)


def test_kuwahara_tie_takes_top_left():
    """Equal variances resolve to the first quadrant in enumeration order."""
    # Column gradient, constant along rows: every quadrant has the same
    # luminance variance, but left and right means differ.
    image = np.zeros((3, 3, 3))
    image[:, 0] = 0.0
    image[:, 1] = 0.5
    image[:, 2] = 1.0
    out = kuwahara(image, KuwaharaParams(radius=1))
    # center (1,1): top-left covers columns 0..1 -> mean 0.25
    assert np.allclose(out[1, 1], 0.25)


def test_kuwahara_does_not_touch_source():
    image = np.random.default_rng(2).random((8, 8, 3))
    before = image.copy()
    kuwahara(image)
    assert np.array_equal(image, before)
