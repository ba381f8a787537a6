import math

from diagram_engine.core.diagram import Diagram
from diagram_engine.generators.base import Generator
from diagram_engine.generators.params import RadialParams
from diagram_engine.geometry import Vec2


class RadialGenerator(Generator):
    """Nodes evenly spaced around the origin, optionally joined in a cycle."""

    name = "RadialGenerator"
    key = "radial"
    params_model = RadialParams

    def build(self, diagram: Diagram, params: RadialParams) -> None:
        angle_step = 2 * math.pi / params.node_count
        nodes = []

        for i in range(params.node_count):
            angle = i * angle_step + params.rotation
            position = Vec2.from_angle(angle, self._radius_for(i, params))

            if params.jitter > 0:
                position = Vec2(
                    position.x + self.rng.uniform(-params.jitter, params.jitter),
                    position.y + self.rng.uniform(-params.jitter, params.jitter),
                )

            node = diagram.add_node(position, f"node_{i}")
            node.data["angle"] = angle
            nodes.append(node)

        if params.connect_adjacent:
            for i, node in enumerate(nodes):
                diagram.connect(node, nodes[(i + 1) % len(nodes)])

    @staticmethod
    def _radius_for(index: int, params: RadialParams) -> float:
        if params.inner_radius == 0 or params.ring_mode == "outer":
            return params.outer_radius

        if params.ring_mode == "alternate":
            return params.outer_radius if index % 2 == 0 else params.inner_radius

        # blend
        if params.node_count == 1:
            return params.outer_radius
        t = index / (params.node_count - 1)
        return params.inner_radius + (params.outer_radius - params.inner_radius) * t
