import math

from diagram_engine.core.diagram import Diagram
from diagram_engine.generators.base import Generator
from diagram_engine.generators.params import PathParams
from diagram_engine.geometry import Vec2

WAVE_WEIGHT = 0.3
NOISE_WEIGHT = 0.7


class PathGenerator(Generator):
    """
    Parallel horizontal paths, stacked around the origin.

    Each node's height mixes a sine wave of its index with a 1D noise
    sample; the noise offset encodes path and node index so paths do not
    move in lockstep.
    """

    name = "PathGenerator"
    key = "path"
    params_model = PathParams

    def build(self, diagram: Diagram, params: PathParams) -> None:
        for path_index in range(params.path_count):
            path_y = (path_index - (params.path_count - 1) / 2) * (params.wave_amplitude * 0.8)
            path_nodes = []

            for node_index in range(params.nodes_per_path):
                t = node_index / (params.nodes_per_path - 1)
                x = (t - 0.5) * params.horizontal_spacing * (params.nodes_per_path / 2)

                noise_offset = path_index * 100 + node_index * 10
                noise_value = self.noise.noise1d(noise_offset * params.wave_frequency)

                wave = math.sin(node_index * params.wave_frequency * 2 * math.pi * 2) * params.wave_amplitude * 0.5
                noise_wave = (noise_value - 0.5) * params.wave_amplitude
                y = path_y + wave * WAVE_WEIGHT + noise_wave * NOISE_WEIGHT

                node = diagram.add_node(Vec2(x, y), f"path_{path_index}_node_{node_index}")
                node.data["path"] = path_index
                path_nodes.append(node)

            if params.connect_sequential:
                for current, following in zip(path_nodes, path_nodes[1:]):
                    diagram.connect(current, following)
