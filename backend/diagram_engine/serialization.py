"""
Diagram export/import.

Connections reference nodes by `id` in the exported form; importing
resolves the ids back into live Node objects and rebuilds adjacency.
"""

import json
from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from diagram_engine.core.connection import ConnectionType
from diagram_engine.core.diagram import Diagram
from diagram_engine.core.errors import DanglingConnectionError
from diagram_engine.core.node import Node
from diagram_engine.geometry import Vec2

PRIMITIVE_TYPES = (str, int, float, bool, type(None))


class PointPayload(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    x: float
    y: float


class NodePayload(BaseModel):
    id: str
    position: PointPayload
    data: Dict[str, Any] = Field(default_factory=dict)


class ConnectionPayload(BaseModel):
    nodeA: str
    nodeB: str
    type: Literal["straight", "arc", "bezier"] = "straight"
    controlPoints: List[PointPayload] = Field(default_factory=list)
    data: Dict[str, Any] = Field(default_factory=dict)


class DiagramPayload(BaseModel):
    nodes: List[NodePayload] = Field(default_factory=list)
    connections: List[ConnectionPayload] = Field(default_factory=list)


def to_jsonable(obj: Any):
    """
    Convert metadata values into JSON-compatible structures.
    Deterministic; primitives pass through.
    """
    if isinstance(obj, PRIMITIVE_TYPES):
        return obj

    if isinstance(obj, Vec2):
        return obj.to_dict()

    if isinstance(obj, Enum):
        return obj.value

    if isinstance(obj, (list, tuple)):
        return [to_jsonable(item) for item in obj]

    if isinstance(obj, dict):
        return {str(k): to_jsonable(v) for k, v in obj.items()}

    if hasattr(obj, "__dict__"):
        return {
            key: to_jsonable(value)
            for key, value in obj.__dict__.items()
            if not key.startswith("_")
        }

    return str(obj)


def diagram_to_dict(diagram: Diagram) -> dict:
    return {
        "nodes": [
            {
                "id": node.id,
                "position": node.position.to_dict(),
                "data": to_jsonable(node.data),
            }
            for node in diagram.nodes
        ],
        "connections": [
            {
                "nodeA": connection.node_a.id,
                "nodeB": connection.node_b.id,
                "type": connection.type.value,
                "controlPoints": [cp.to_dict() for cp in connection.control_points],
                "data": to_jsonable(connection.data),
            }
            for connection in diagram.connections
        ],
    }


def diagram_from_dict(data: dict) -> Diagram:
    payload = DiagramPayload.model_validate(data)
    diagram = Diagram()
    by_id: Dict[str, Node] = {}

    for node_payload in payload.nodes:
        node = diagram.add_node(
            Vec2(node_payload.position.x, node_payload.position.y),
            node_payload.id,
        )
        node.data.update(node_payload.data)
        by_id[node.id] = node

    for conn_payload in payload.connections:
        node_a = by_id.get(conn_payload.nodeA)
        node_b = by_id.get(conn_payload.nodeB)
        if node_a is None:
            raise DanglingConnectionError(conn_payload.nodeA)
        if node_b is None:
            raise DanglingConnectionError(conn_payload.nodeB)

        connection = diagram.connect(node_a, node_b, ConnectionType(conn_payload.type))
        connection.control_points = [Vec2(cp.x, cp.y) for cp in conn_payload.controlPoints]
        connection.data = dict(conn_payload.data)

    return diagram


def dumps_diagram(diagram: Diagram, indent: Optional[int] = None) -> str:
    return json.dumps(diagram_to_dict(diagram), indent=indent)


def loads_diagram(text: str) -> Diagram:
    return diagram_from_dict(json.loads(text))
