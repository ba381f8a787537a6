import logging
from typing import Optional, Union

from diagram_engine.core.diagram import Diagram
from diagram_engine.curves import apply_curves
from diagram_engine.generators.base import Generator
from diagram_engine.generators.registry import get_generator_registry
from diagram_engine.noise import NoiseSource, RandomSource
from diagram_engine.serialization import diagram_to_dict
from diagram_engine.style import DEFAULT_STYLE, StyleConfig

logger = logging.getLogger(__name__)


class DiagramController:
    """
    Owns the diagram, the current style and the last generator run.

    Every regeneration is a full rebuild: the generator replaces the
    diagram contents, then the curve pass materializes control points for
    the current style.
    """

    def __init__(
        self,
        style: Optional[StyleConfig] = None,
        noise: Optional[NoiseSource] = None,
        rng: Optional[RandomSource] = None,
    ):
        self.diagram = Diagram()
        self._style = style or DEFAULT_STYLE
        self._noise = noise
        self._rng = rng
        self._generator: Optional[Generator] = None
        self._last_params: dict = {}

    @property
    def style(self) -> StyleConfig:
        return self._style

    @property
    def generator(self) -> Optional[Generator]:
        return self._generator

    @property
    def last_params(self) -> dict:
        return dict(self._last_params)

    def generate(self, generator: Union[Generator, str], overrides: Optional[dict] = None) -> Diagram:
        if isinstance(generator, str):
            generator = get_generator_registry().create(generator, noise=self._noise, rng=self._rng)

        generator.generate(self.diagram, overrides)
        self._generator = generator
        self._last_params = dict(overrides or {})

        curved = apply_curves(self.diagram.connections, self._style)
        logger.info(
            "Generated %s: %d nodes, %d connections (%s)",
            generator.name, len(self.diagram.nodes), curved, self._style.type,
        )
        return self.diagram

    def regenerate(self) -> Diagram:
        if self._generator is None:
            raise RuntimeError("regenerate() called before any generate()")
        return self.generate(self._generator, self._last_params)

    def apply_style(self, style: Optional[StyleConfig] = None, **updates) -> StyleConfig:
        """Swap in a new style and recompute curves without regenerating."""
        new_style = style or self._style
        if updates:
            new_style = new_style.with_updates(**updates)
        self._style = new_style
        apply_curves(self.diagram.connections, self._style)
        return self._style

    def export(self) -> dict:
        return diagram_to_dict(self.diagram)
