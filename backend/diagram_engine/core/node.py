from dataclasses import dataclass, field
from typing import Any, Dict, List

from diagram_engine.geometry import Vec2


@dataclass(eq=False)
class Node:
    """
    A positioned point in a diagram.

    Identity is object identity; `id` is only unique within one
    generation pass. `original_position` is a snapshot taken at
    construction and is never mutated afterwards.
    """
    position: Vec2
    id: str = ""
    data: Dict[str, Any] = field(default_factory=dict)
    original_position: Vec2 = field(init=False)
    adjacency: List["Node"] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        self.original_position = self.position.copy()

    def connect(self, other: "Node") -> None:
        # Idempotent: a neighbour is recorded once
        if not any(n is other for n in self.adjacency):
            self.adjacency.append(other)

    def is_connected_to(self, other: "Node") -> bool:
        return any(n is other for n in self.adjacency)

    @property
    def degree(self) -> int:
        return len(self.adjacency)
