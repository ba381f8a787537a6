"""
Organic grid generator.

Phase 1 masks a square lattice with a 2D noise field and displaces the
surviving cells with two further, decorrelated noise samples. Phase 2
scans every pair of kept nodes in ascending index order and connects
nearby pairs with a probability that falls off linearly with distance,
gated by one more noise sample.
"""

from itertools import combinations

from diagram_engine.core.diagram import Diagram
from diagram_engine.generators.base import Generator
from diagram_engine.generators.params import NoiseGridParams
from diagram_engine.geometry import Vec2, distance

DISPLACE_X_OFFSET = 1000
DISPLACE_Y_OFFSET = 2000
GATE_SCALE = 0.01


class NoiseGridGenerator(Generator):
    name = "NoiseGrid"
    key = "noisegrid"
    params_model = NoiseGridParams

    def build(self, diagram: Diagram, params: NoiseGridParams) -> None:
        self._place_nodes(diagram, params)
        self._connect_nodes(diagram, params)

    def _place_nodes(self, diagram: Diagram, params: NoiseGridParams) -> None:
        half_size = (params.grid_size - 1) * params.spacing / 2
        seed = params.noise_seed

        for row in range(params.grid_size):
            for col in range(params.grid_size):
                noise_value = self.noise.noise2d(
                    col * params.noise_scale + seed,
                    row * params.noise_scale + seed,
                )
                if noise_value <= params.noise_threshold:
                    continue

                displace_x = self.noise.noise2d(
                    col * params.displacement_scale + DISPLACE_X_OFFSET + seed,
                    row * params.displacement_scale + DISPLACE_X_OFFSET + seed,
                ) * params.displacement_amount
                displace_y = self.noise.noise2d(
                    col * params.displacement_scale + DISPLACE_Y_OFFSET + seed,
                    row * params.displacement_scale + DISPLACE_Y_OFFSET + seed,
                ) * params.displacement_amount

                position = Vec2(
                    col * params.spacing - half_size + displace_x,
                    row * params.spacing - half_size + displace_y,
                )
                diagram.add_node(
                    position,
                    f"grid_{row}_{col}",
                    gridPosition={"row": row, "col": col},
                    noiseValue=noise_value,
                )

    def _connect_nodes(self, diagram: Diagram, params: NoiseGridParams) -> None:
        seed = params.noise_seed
        radius = params.connection_radius

        for node_a, node_b in combinations(list(diagram.nodes), 2):
            gap = distance(node_a.position, node_b.position)
            if gap >= radius:
                continue

            probability = params.connection_probability * (1 - gap / radius)

            a, b = node_a.position, node_b.position
            gate = self.noise.noise2d(
                a.x * GATE_SCALE + b.x * GATE_SCALE + seed,
                a.y * GATE_SCALE + b.y * GATE_SCALE + seed,
            )
            # Always draw, so the random stream does not depend on the gate
            draw = self.rng.random()

            if draw < probability and gate > params.connection_noise_gate:
                diagram.connect(node_a, node_b)
