"""
Presentation settings shared by the curve pass and the renderer.

StyleConfig is immutable; a UI change produces a new instance via
`with_updates` and the controller swaps it in.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from diagram_engine.core.errors import invalid_parameter_from


class StyleConfig(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    # Connections
    type: Literal["straight", "curved", "bezier"] = "straight"
    curve_amount: Optional[float] = None  # None -> 50
    stroke: str = "#ffffff"
    stroke_weight: float = Field(1.5, ge=0)
    fill: Optional[str] = None
    alpha: int = Field(180, ge=0, le=255)

    # Nodes
    size: float = Field(8, ge=0)
    node_fill: str = "#ffffff"
    node_stroke: Optional[str] = "#ffffff"
    node_stroke_weight: float = Field(2, ge=0)

    @classmethod
    def from_mapping(cls, data: Optional[dict] = None) -> "StyleConfig":
        try:
            return cls.model_validate(data or {})
        except ValidationError as e:
            raise invalid_parameter_from(e, data or {}) from e

    def with_updates(self, **updates) -> "StyleConfig":
        merged = self.model_dump(by_alias=True)
        for key, value in updates.items():
            field = StyleConfig.model_fields.get(key)
            merged[field.alias if field is not None and field.alias else key] = value
        return StyleConfig.from_mapping(merged)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


DEFAULT_STYLE = StyleConfig()

