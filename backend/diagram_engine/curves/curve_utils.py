"""
Curve geometry for connections.

Pure functions of two endpoint positions and a curve intensity. Coincident
endpoints have no direction to bend away from, so the perpendicular offset
collapses to zero and the result is a straight-equivalent control point.
No NaN or infinity can leave this module.
"""

import logging
from typing import List, Optional

from diagram_engine.core.connection import Connection, ConnectionType
from diagram_engine.geometry import Vec2, lerp, midpoint, normalize, perpendicular
from diagram_engine.style import StyleConfig

logger = logging.getLogger(__name__)

DEFAULT_CURVE_AMOUNT = 50.0
OFFSET_SCALE = 0.5
BEZIER_FRACTIONS = (0.33, 0.67)

STYLE_TO_CONNECTION_TYPE = {
    "straight": ConnectionType.STRAIGHT,
    "curved": ConnectionType.ARC,
    "bezier": ConnectionType.BEZIER,
}


def _unit_normal(a: Vec2, b: Vec2) -> Vec2:
    direction = b - a
    if direction.length() == 0.0:
        logger.debug("Coincident endpoints at (%s, %s), using zero offset", a.x, a.y)
    return normalize(perpendicular(direction))


def arc_control_point(a: Vec2, b: Vec2, amount: float) -> Vec2:
    """Single quadratic control point: the midpoint pushed along the normal."""
    return midpoint(a, b) + _unit_normal(a, b) * (amount * OFFSET_SCALE)


def bezier_control_points(a: Vec2, b: Vec2, amount: float) -> List[Vec2]:
    """Two cubic control points offset to opposite sides, giving an S-curve."""
    offset = _unit_normal(a, b) * (amount * OFFSET_SCALE)
    first, second = BEZIER_FRACTIONS
    return [
        lerp(a, b, first) + offset,
        lerp(a, b, second) - offset,
    ]


def resolve_connection_type(style_type: Optional[str]) -> ConnectionType:
    return STYLE_TO_CONNECTION_TYPE.get(style_type or "straight", ConnectionType.STRAIGHT)


def apply_curve_to_connection(connection: Connection, style) -> None:
    """
    Recompute control points for `connection` from its current endpoints.

    `style` is a StyleConfig or a mapping validated into one. The control
    points are rebuilt from scratch every call.
    """
    if isinstance(style, dict):
        style = StyleConfig.from_mapping(style)
    style_type = style.type
    amount = style.curve_amount
    if amount is None:
        amount = DEFAULT_CURVE_AMOUNT

    connection.type = resolve_connection_type(style_type)
    a, b = connection.node_a.position, connection.node_b.position

    if connection.type is ConnectionType.ARC:
        connection.control_points = [arc_control_point(a, b, amount)]
    elif connection.type is ConnectionType.BEZIER:
        connection.control_points = bezier_control_points(a, b, amount)
    else:
        connection.control_points = []


def apply_curves(connections, style) -> int:
    for connection in connections:
        apply_curve_to_connection(connection, style)
    return len(connections)
