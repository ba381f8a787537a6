from pydantic import BaseModel, Field
from typing import Any, Dict, Optional

from diagram_engine.config import DEFAULT_GENERATOR
from diagram_engine.serialization import DiagramPayload


class GenerateRequest(BaseModel):
    generator: str = DEFAULT_GENERATOR  # radial | path | hybrid | noisegrid
    params: Dict[str, Any] = Field(default_factory=dict)  # overrides merged over defaults
    style: Dict[str, Any] = Field(default_factory=dict)
    noiseSeed: Optional[int] = None
    randomSeed: Optional[int] = None


class GenerateResponse(BaseModel):
    status: str
    generator: str
    params: Dict[str, Any]
    style: Dict[str, Any]
    diagram: DiagramPayload
