import math
from typing import List

from diagram_engine.core.diagram import Diagram
from diagram_engine.core.node import Node
from diagram_engine.generators.base import Generator
from diagram_engine.generators.params import HybridParams
from diagram_engine.geometry import Vec2

FAN_OUT_STEP = 0.3
CURVE_TO_ANGLE = 0.01


class HybridGenerator(Generator):
    """
    A radial hub with paths radiating outward from every hub node.

    Path curvature comes from a 2D noise sample and grows with distance
    from the hub. Optionally, the tip of each hub's first path is joined to
    the tip of the next hub's last path.
    """

    name = "HybridGenerator"
    key = "hybrid"
    params_model = HybridParams

    def build(self, diagram: Diagram, params: HybridParams) -> None:
        angle_step = 2 * math.pi / params.hub_node_count
        hub_nodes: List[Node] = []

        for i in range(params.hub_node_count):
            angle = i * angle_step + params.hub_rotation
            node = diagram.add_node(Vec2.from_angle(angle, params.hub_radius), f"hub_{i}")
            node.data["role"] = "hub"
            hub_nodes.append(node)

        if params.connect_hub:
            for i, node in enumerate(hub_nodes):
                diagram.connect(node, hub_nodes[(i + 1) % len(hub_nodes)])

        paths_by_hub: List[List[List[Node]]] = []
        for hub_index, hub_node in enumerate(hub_nodes):
            hub_angle = hub_index * angle_step + params.hub_rotation
            paths = []

            for path_index in range(params.paths_per_node):
                path_nodes = self._build_path(diagram, params, hub_node, hub_index, hub_angle, path_index)
                paths.append(path_nodes)

                if params.connect_paths:
                    for current, following in zip(path_nodes, path_nodes[1:]):
                        diagram.connect(current, following)

            paths_by_hub.append(paths)

        if params.connect_hub_to_paths and params.paths_per_node > 0:
            self._link_adjacent_spokes(diagram, paths_by_hub)

    def _build_path(
        self,
        diagram: Diagram,
        params: HybridParams,
        hub_node: Node,
        hub_index: int,
        hub_angle: float,
        path_index: int,
    ) -> List[Node]:
        # Paths start at their hub node
        path_nodes = [hub_node]

        fan_offset = 0.0
        if params.paths_per_node > 1:
            fan_offset = (path_index - (params.paths_per_node - 1) / 2) * FAN_OUT_STEP
        direction = hub_angle + fan_offset

        for node_index in range(1, params.nodes_per_path + 1):
            t = node_index / params.nodes_per_path
            distance = params.hub_radius + params.path_length * t

            noise_offset = hub_index * 100 + path_index * 50 + node_index * 10
            noise_value = self.noise.noise2d(noise_offset * 0.02, (hub_index * 7 + path_index) * 0.5)

            curve_offset = (noise_value - 0.5) * params.path_curve * t
            angle = direction + curve_offset * CURVE_TO_ANGLE

            node = diagram.add_node(
                Vec2.from_angle(angle, distance),
                f"hub_{hub_index}_path_{path_index}_node_{node_index}",
            )
            node.data["role"] = "path"
            path_nodes.append(node)

        return path_nodes

    @staticmethod
    def _link_adjacent_spokes(diagram: Diagram, paths_by_hub: List[List[List[Node]]]) -> None:
        hub_count = len(paths_by_hub)
        for hub_index, paths in enumerate(paths_by_hub):
            next_paths = paths_by_hub[(hub_index + 1) % hub_count]
            if not paths or not next_paths:
                continue

            tip = paths[0][-1]
            next_tip = next_paths[-1][-1]
            if tip is next_tip:
                continue
            diagram.connect(tip, next_tip)
