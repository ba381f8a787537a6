"""
Parameter models for the generators.

Keys are exposed in camelCase (`nodeCount`) to match the slider/override
maps; snake_case names are accepted too. Unknown keys are ignored.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class GeneratorParams(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    @classmethod
    def defaults(cls) -> dict:
        return cls().model_dump(by_alias=True)

    @classmethod
    def canonical_key(cls, key: str) -> str:
        """Map a snake_case field name onto its camelCase alias."""
        field = cls.model_fields.get(key)
        if field is not None and field.alias:
            return field.alias
        return key

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class RadialParams(GeneratorParams):
    node_count: int = Field(12, ge=1)
    inner_radius: float = Field(0.0, ge=0)
    outer_radius: float = Field(200.0, ge=0)
    rotation: float = 0.0
    jitter: float = Field(0.0, ge=0)
    connect_adjacent: bool = True
    # outer: every node on outer_radius; alternate: odd nodes on inner_radius;
    # blend: radius steps linearly from inner to outer by index
    ring_mode: Literal["outer", "alternate", "blend"] = "outer"


class PathParams(GeneratorParams):
    path_count: int = Field(5, ge=1)
    nodes_per_path: int = Field(10, ge=2)
    wave_amplitude: float = Field(100.0, ge=0)
    wave_frequency: float = 0.02
    horizontal_spacing: float = Field(150.0, ge=0)
    connect_sequential: bool = True


class HybridParams(GeneratorParams):
    # Radial hub
    hub_node_count: int = Field(8, ge=1)
    hub_radius: float = Field(100.0, ge=0)
    hub_rotation: float = 0.0

    # Paths
    paths_per_node: int = Field(1, ge=0)
    nodes_per_path: int = Field(6, ge=1)
    path_length: float = Field(250.0, ge=0)
    path_curve: float = 50.0

    # Connections
    connect_hub: bool = True
    connect_paths: bool = True
    connect_hub_to_paths: bool = True


class NoiseGridParams(GeneratorParams):
    grid_size: int = Field(8, ge=1)
    spacing: float = Field(80.0, gt=0)
    noise_scale: float = 0.15
    noise_threshold: float = 0.3
    displacement_amount: float = Field(30.0, ge=0)
    displacement_scale: float = 0.1
    connection_radius: float = Field(150.0, ge=0)
    connection_probability: float = Field(0.7, ge=0, le=1)
    noise_seed: float = 0.0
    # Connection requires the organic gate sample to exceed this value
    connection_noise_gate: float = 0.0
