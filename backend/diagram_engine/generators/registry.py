"""
Generator Registry - the closed set of generator variants, keyed by name
"""

import logging
from typing import Dict, List, Optional, Type

from diagram_engine.core.errors import InvalidParameterError
from diagram_engine.generators.base import Generator
from diagram_engine.generators.hybrid import HybridGenerator
from diagram_engine.generators.noise_grid import NoiseGridGenerator
from diagram_engine.generators.path import PathGenerator
from diagram_engine.generators.radial import RadialGenerator
from diagram_engine.noise import NoiseSource, RandomSource

logger = logging.getLogger(__name__)

GENERATOR_CLASSES: List[Type[Generator]] = [
    RadialGenerator,
    PathGenerator,
    HybridGenerator,
    NoiseGridGenerator,
]


class GeneratorRegistry:
    """Lookup of generator classes by key (`radial`, `path`, ...)."""

    def __init__(self, classes: Optional[List[Type[Generator]]] = None):
        self.generators: Dict[str, Type[Generator]] = {}
        for cls in classes if classes is not None else GENERATOR_CLASSES:
            self.register(cls)

    def register(self, cls: Type[Generator]) -> None:
        if not cls.key:
            raise ValueError(f"{cls.__name__} has no registry key")
        self.generators[cls.key] = cls

    def get(self, key: str) -> Optional[Type[Generator]]:
        return self.generators.get(key)

    def create(
        self,
        key: str,
        noise: Optional[NoiseSource] = None,
        rng: Optional[RandomSource] = None,
    ) -> Generator:
        cls = self.get(key)
        if cls is None:
            logger.warning("Unknown generator '%s'", key)
            raise InvalidParameterError(
                "generator", key, f"expected one of {sorted(self.generators)}"
            )
        return cls(noise=noise, rng=rng)

    def keys(self) -> List[str]:
        return list(self.generators)

    def default_params(self) -> Dict[str, dict]:
        return {key: cls.params_model.defaults() for key, cls in self.generators.items()}


# Global registry instance
_global_registry: Optional[GeneratorRegistry] = None


def get_generator_registry() -> GeneratorRegistry:
    """Get or create the global generator registry"""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
    return _global_registry


def create_generator(
    key: str,
    noise: Optional[NoiseSource] = None,
    rng: Optional[RandomSource] = None,
) -> Generator:
    return get_generator_registry().create(key, noise=noise, rng=rng)
