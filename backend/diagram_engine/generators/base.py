import logging
from typing import Optional, Type

from pydantic import ValidationError

from diagram_engine.config import NOISE_SEED, RANDOM_SEED
from diagram_engine.core.diagram import Diagram
from diagram_engine.core.errors import invalid_parameter_from
from diagram_engine.generators.params import GeneratorParams
from diagram_engine.noise import NoiseSource, PerlinNoise, RandomSource, SeededRandom

logger = logging.getLogger(__name__)


class Generator:
    """
    Base for diagram generators.

    `generate` merges overrides over the defaults, validates them, builds
    into a detached Diagram and only then swaps the result into the target.
    A rejected parameter set leaves the target diagram as it was.

    Concrete generators set `params_model` and implement `build`.
    """

    name: str = "Generator"
    key: str = ""
    params_model: Optional[Type[GeneratorParams]] = None

    def __init__(
        self,
        noise: Optional[NoiseSource] = None,
        rng: Optional[RandomSource] = None,
    ):
        self.noise = noise if noise is not None else PerlinNoise(seed=NOISE_SEED)
        self.rng = rng if rng is not None else SeededRandom(RANDOM_SEED)
        self._params: Optional[GeneratorParams] = None

    @property
    def params(self) -> Optional[GeneratorParams]:
        """Effective parameters of the last successful `generate` call."""
        return self._params

    def get_default_params(self) -> dict:
        return self._require_model().defaults()

    def resolve_params(self, overrides: Optional[dict] = None) -> GeneratorParams:
        model = self._require_model()
        merged = model.defaults()
        for key, value in (overrides or {}).items():
            merged[model.canonical_key(key)] = value
        try:
            return model.model_validate(merged)
        except ValidationError as e:
            error = invalid_parameter_from(e, merged)
            logger.warning("%s rejected parameters: %s", self.name, error)
            raise error from e

    def generate(self, diagram: Diagram, overrides: Optional[dict] = None) -> None:
        params = self.resolve_params(overrides)
        logger.debug("%s effective params: %s", self.name, params.to_dict())

        staging = Diagram()
        self.build(staging, params)

        diagram.replace_contents(staging.nodes, staging.connections)
        self._params = params
        logger.debug(
            "%s built %d nodes, %d connections",
            self.name, len(diagram.nodes), len(diagram.connections),
        )

    def build(self, diagram: Diagram, params: GeneratorParams) -> None:
        raise NotImplementedError(f"{type(self).__name__}.build() must be implemented by a concrete generator")

    def _require_model(self) -> Type[GeneratorParams]:
        if self.params_model is None:
            raise NotImplementedError(f"{type(self).__name__} does not define generator parameters")
        return self.params_model

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"
