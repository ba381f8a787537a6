# Data model: nodes, connections and the owning diagram

from diagram_engine.core.connection import Connection, ConnectionType
from diagram_engine.core.diagram import Diagram
from diagram_engine.core.errors import (
    DanglingConnectionError,
    DiagramError,
    InvalidParameterError,
    invalid_parameter_from,
)
from diagram_engine.core.node import Node

__all__ = [
    "Connection",
    "ConnectionType",
    "DanglingConnectionError",
    "Diagram",
    "DiagramError",
    "InvalidParameterError",
    "Node",
    "invalid_parameter_from",
]
