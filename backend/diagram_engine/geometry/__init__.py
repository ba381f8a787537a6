# Vector math shared by generators and curve derivation

from diagram_engine.geometry.vector import (
    ORIGIN,
    Vec2,
    distance,
    lerp,
    midpoint,
    normalize,
    perpendicular,
)

__all__ = [
    "ORIGIN",
    "Vec2",
    "distance",
    "lerp",
    "midpoint",
    "normalize",
    "perpendicular",
]
