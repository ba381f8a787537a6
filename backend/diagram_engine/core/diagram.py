from typing import Iterable, List, Optional

from diagram_engine.core.connection import Connection, ConnectionType
from diagram_engine.core.errors import DanglingConnectionError
from diagram_engine.core.node import Node
from diagram_engine.geometry import Vec2


class Diagram:
    """
    Owning container for one generation pass.

    Both collections keep creation order. They are replaced as a whole,
    never merged, so the contents always come from a single generator run.
    """

    def __init__(self):
        self.nodes: List[Node] = []
        self.connections: List[Connection] = []

    def clear(self) -> None:
        self.nodes, self.connections = [], []

    def add_node(self, position: Vec2, node_id: str = "", **data) -> Node:
        node = Node(position, node_id or f"node_{len(self.nodes)}", dict(data))
        self.nodes.append(node)
        return node

    def connect(
        self,
        node_a: Node,
        node_b: Node,
        connection_type: ConnectionType = ConnectionType.STRAIGHT,
    ) -> Connection:
        """Create a connection and record adjacency on both endpoints."""
        connection = Connection(node_a, node_b, connection_type)
        self.connections.append(connection)
        node_a.connect(node_b)
        node_b.connect(node_a)
        return connection

    def replace_contents(self, nodes: Iterable[Node], connections: Iterable[Connection]) -> None:
        """Swap in a freshly built node/connection set in one step."""
        nodes, connections = list(nodes), list(connections)
        self._check_membership(nodes, connections)
        self.clear()
        self.nodes.extend(nodes)
        self.connections.extend(connections)

    def get_node(self, node_id: str) -> Optional[Node]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def validate(self) -> None:
        self._check_membership(self.nodes, self.connections)

    @staticmethod
    def _check_membership(nodes: List[Node], connections: List[Connection]) -> None:
        members = {id(n) for n in nodes}
        for connection in connections:
            for endpoint in connection.endpoints():
                if id(endpoint) not in members:
                    raise DanglingConnectionError(endpoint.id)

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return f"Diagram(nodes={len(self.nodes)}, connections={len(self.connections)})"
