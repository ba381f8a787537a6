from diagram_engine.noise.sources import (
    NoiseSource,
    PerlinNoise,
    RandomSource,
    SeededRandom,
    perlin2d,
)

__all__ = [
    "NoiseSource",
    "PerlinNoise",
    "RandomSource",
    "SeededRandom",
    "perlin2d",
]
