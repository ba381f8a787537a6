from diagram_engine.curves.curve_utils import (
    DEFAULT_CURVE_AMOUNT,
    apply_curve_to_connection,
    apply_curves,
    arc_control_point,
    bezier_control_points,
    resolve_connection_type,
)

__all__ = [
    "DEFAULT_CURVE_AMOUNT",
    "apply_curve_to_connection",
    "apply_curves",
    "arc_control_point",
    "bezier_control_points",
    "resolve_connection_type",
]
