import numpy as np
import pytest

from diagram_engine.noise import PerlinNoise, SeededRandom, perlin2d


def test_perlin_is_zero_on_lattice_points():
    values = perlin2d(np.array([0.0, 1.0, 5.0]), np.array([0.0, 2.0, -3.0]), seed=7)
    assert np.allclose(values, 0.0)


def test_noise_is_bounded_and_deterministic():
    noise = PerlinNoise(seed=42)
    samples = [noise.noise2d(x * 0.37, y * 0.91) for x in range(20) for y in range(20)]
    assert all(0.0 <= s <= 1.0 for s in samples)
    assert samples == [PerlinNoise(seed=42).noise2d(x * 0.37, y * 0.91) for x in range(20) for y in range(20)]
    assert len(set(samples)) > 1


def test_seed_changes_the_field():
    a = [PerlinNoise(seed=1).noise2d(i * 0.3, 0.7) for i in range(10)]
    b = [PerlinNoise(seed=2).noise2d(i * 0.3, 0.7) for i in range(10)]
    assert a != b


def test_noise1d_samples_the_x_axis():
    noise = PerlinNoise(seed=3)
    assert noise.noise1d(1.3) == noise.noise2d(1.3, 0.0)


def test_negative_coordinates_supported():
    assert 0.0 <= PerlinNoise().noise2d(-12.4, -0.3) <= 1.0


def test_octaves_must_be_positive():
    with pytest.raises(ValueError):
        PerlinNoise(octaves=0)


def test_seeded_random_is_reproducible():
    a, b = SeededRandom(10), SeededRandom(10)
    assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]

    a.reseed(3)
    b.reseed(3)
    assert a.uniform(-2, 2) == b.uniform(-2, 2)


def test_uniform_range():
    rng = SeededRandom(0)
    assert all(-5 <= rng.uniform(-5, 5) < 5 for _ in range(200))
