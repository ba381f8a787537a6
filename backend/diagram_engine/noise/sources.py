"""
Injected noise and randomness capabilities.

Generators never touch module-level randomness; they receive a
NoiseSource and a RandomSource so identical seeds give identical diagrams.
"""

import random
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


class NoiseSource(ABC):
    """Deterministic coordinates -> bounded scalar field."""

    @abstractmethod
    def noise2d(self, x: float, y: float) -> float:
        pass

    def noise1d(self, x: float) -> float:
        return self.noise2d(x, 0.0)


class RandomSource(ABC):
    """Uniform sampling over [0, 1) or [low, high)."""

    @abstractmethod
    def random(self) -> float:
        pass

    def uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self.random()


# ---------------------------------------------------------------------------
# Perlin gradient noise (numpy), hash-based lattice gradients
# ---------------------------------------------------------------------------

_U32_MASK = 0xFFFFFFFF


def _hash_wang(key):
    """Wang hash, vectorised uint32."""
    k = np.asarray(key, dtype=np.uint32)
    k = (k ^ np.uint32(61)) ^ (k >> np.uint32(16))
    k = k * np.uint32(9)
    k = k ^ (k >> np.uint32(4))
    k = k * np.uint32(0x27D4EB2D)
    k = k ^ (k >> np.uint32(15))
    return k


def _hash3d(x, y, z):
    return _hash_wang(x ^ _hash_wang(y ^ _hash_wang(z)))


def _fade(t):
    """Quintic fade curve."""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _grad2d(hash_val, dx, dy):
    h = hash_val & np.uint32(3)
    gx = np.where(h & np.uint32(1), -1.0, 1.0)
    gy = np.where(h & np.uint32(2), -1.0, 1.0)
    return gx * dx + gy * dy


def perlin2d(x, y, seed: int = 0):
    """Signed 2D Perlin noise, roughly in [-1, 1]. Accepts scalars or arrays."""
    x = np.atleast_1d(np.asarray(x, dtype=np.float64))
    y = np.atleast_1d(np.asarray(y, dtype=np.float64))

    ix = np.floor(x)
    iy = np.floor(y)
    fx = x - ix
    fy = y - iy
    u = _fade(fx)
    v = _fade(fy)

    uix = ix.astype(np.int64).astype(np.uint32)
    uiy = iy.astype(np.int64).astype(np.uint32)
    s = np.full_like(uix, seed & _U32_MASK)
    one = np.uint32(1)

    g00 = _grad2d(_hash3d(uix, uiy, s), fx, fy)
    g10 = _grad2d(_hash3d(uix + one, uiy, s), fx - 1.0, fy)
    g01 = _grad2d(_hash3d(uix, uiy + one, s), fx, fy - 1.0)
    g11 = _grad2d(_hash3d(uix + one, uiy + one, s), fx - 1.0, fy - 1.0)

    x0 = g00 + u * (g10 - g00)
    x1 = g01 + u * (g11 - g01)
    return x0 + v * (x1 - x0)


class PerlinNoise(NoiseSource):
    """
    Fractal Perlin noise mapped into [0, 1].

    Matches the usual creative-coding convention (several octaves, each at
    double frequency and half amplitude), so 0.5 is the field's mean.
    """

    def __init__(self, seed: int = 0, octaves: int = 4, persistence: float = 0.5):
        if octaves < 1:
            raise ValueError("octaves must be >= 1")
        self.seed = seed
        self.octaves = octaves
        self.persistence = persistence

    def sample(self, x, y):
        total = 0.0
        amplitude = 1.0
        frequency = 1.0
        max_amp = 0.0
        for i in range(self.octaves):
            total = total + amplitude * perlin2d(x * frequency, y * frequency, self.seed + i)
            max_amp += amplitude
            frequency *= 2.0
            amplitude *= self.persistence
        return np.clip(0.5 + 0.5 * (total / max_amp), 0.0, 1.0)

    def noise2d(self, x: float, y: float) -> float:
        return float(self.sample(x, y)[0])


class SeededRandom(RandomSource):
    """RandomSource backed by its own `random.Random` instance."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def random(self) -> float:
        return self._rng.random()

    def uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self._rng.random()

    def reseed(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng.seed(seed)
