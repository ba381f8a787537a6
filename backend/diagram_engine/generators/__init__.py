# Generators populate a Diagram from parameters plus injected noise/random sources

from diagram_engine.generators.base import Generator
from diagram_engine.generators.hybrid import HybridGenerator
from diagram_engine.generators.noise_grid import NoiseGridGenerator
from diagram_engine.generators.params import (
    GeneratorParams,
    HybridParams,
    NoiseGridParams,
    PathParams,
    RadialParams,
)
from diagram_engine.generators.path import PathGenerator
from diagram_engine.generators.radial import RadialGenerator
from diagram_engine.generators.registry import (
    GeneratorRegistry,
    create_generator,
    get_generator_registry,
)

__all__ = [
    "Generator",
    "GeneratorParams",
    "GeneratorRegistry",
    "HybridGenerator",
    "HybridParams",
    "NoiseGridGenerator",
    "NoiseGridParams",
    "PathGenerator",
    "PathParams",
    "RadialGenerator",
    "RadialParams",
    "create_generator",
    "get_generator_registry",
]
