"""Tests for the full filter pipeline."""

import numpy as np
import pytest
from filters.pipeline import build_steps, run_all, run_step
from models.run_config import RunConfig
from utils.errors import ImageNotFoundError
from utils.image_io import load_image


@pytest.fixture(scope='module')
def synthetic_run(tmp_path_factory):
    out = tmp_path_factory.mktemp('output')
    config = RunConfig(output_dir=out, synthetic=True, seed=1)
    return config, run_all(config)


def test_every_step_writes_a_file(synthetic_run):
    config, results = synthetic_run
    names = [name for name, _, _ in build_steps(np.random.default_rng(0))]
    assert [r.name for r in results] == names
    for r in results:
        assert r.output_path.is_file()
        assert r.output_path.parent == config.output_dir


def test_animation_and_csv_exported(synthetic_run):
    config, _ = synthetic_run
    frames = sorted((config.output_dir / 'animation').glob('disk_*.png'))
    assert len(frames) == 10
    csv = (config.output_dir / 'delta.csv').read_text().splitlines()
    assert csv[0] == 'R,G,B'


def test_identity_and_roundtrip_are_lossless(synthetic_run):
    """Identity convolution and delta round trip reproduce the source."""
    _, results = synthetic_run
    by_name = {r.name: r for r in results}
    assert by_name['convolution_identity'].psnr == float('inf')
    assert by_name['delta_roundtrip'].psnr > 60


def test_rotation_swaps_shape(synthetic_run):
    _, results = synthetic_run
    by_name = {r.name: r for r in results}
    h, w = by_name['negative'].shape[:2]
    assert by_name['rotate90'].shape[:2] == (w, h)
    assert by_name['rotate90'].psnr is None


def test_saved_output_matches_filter(tmp_path):
    """What lands on disk is the filter output, quantized to 8 bits."""
    config = RunConfig(output_dir=tmp_path, synthetic=True)
    samples = {'logo': np.full((12, 12, 3), 0.4, dtype=np.float32)}
    step = ('negative', 'logo', lambda img: 1.0 - img)
    result = run_step(step, samples, config)
    saved = load_image(result.output_path)
    assert np.allclose(saved, 0.6, atol=1 / 255)


def test_missing_images_fail_fast(tmp_path):
    config = RunConfig(logo_path=tmp_path / 'nope.png', photo_path=tmp_path / 'nope.jpg',
                       output_dir=tmp_path / 'out')
    with pytest.raises(ImageNotFoundError):
        run_all(config)
