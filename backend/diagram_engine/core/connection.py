from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from diagram_engine.core.node import Node
from diagram_engine.geometry import Vec2


class ConnectionType(Enum):
    STRAIGHT = "straight"
    ARC = "arc"          # quadratic, one control point
    BEZIER = "bezier"    # cubic, two control points

    @property
    def control_point_count(self) -> int:
        return _CONTROL_POINT_COUNTS[self]


_CONTROL_POINT_COUNTS = {
    ConnectionType.STRAIGHT: 0,
    ConnectionType.ARC: 1,
    ConnectionType.BEZIER: 2,
}


@dataclass(eq=False)
class Connection:
    node_a: Node
    node_b: Node
    type: ConnectionType = ConnectionType.STRAIGHT
    control_points: List[Vec2] = field(default_factory=list)
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_render_ready(self) -> bool:
        return len(self.control_points) == self.type.control_point_count

    def endpoints(self) -> tuple:
        return self.node_a, self.node_b
