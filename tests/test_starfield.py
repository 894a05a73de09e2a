import numpy as np
import pytest

from orrery import generate_starfield


def test_default_count_and_bounds():
    stars = generate_starfield(seed=7)
    assert stars.positions.shape == (5000, 3)
    assert stars.positions.dtype == np.float32
    assert stars.positions.min() >= -1000.0
    assert stars.positions.max() <= 1000.0


def test_roughly_uniform():
    stars = generate_starfield(seed=7)
    # Each octant should get about an eighth of the stars
    octant = (stars.positions > 0).astype(int) @ [1, 2, 4]
    counts = np.bincount(octant, minlength=8)
    assert counts.min() > 5000 / 8 * 0.8
    assert abs(stars.positions.mean()) < 50.0


def test_read_only():
    stars = generate_starfield(count=10, seed=1)
    with pytest.raises(ValueError):
        stars.positions[0, 0] = 1.0


def test_seed_reproducible():
    a = generate_starfield(count=100, seed=3)
    b = generate_starfield(count=100, seed=3)
    np.testing.assert_array_equal(a.positions, b.positions)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        generate_starfield(count=-1)
