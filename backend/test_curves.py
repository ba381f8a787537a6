import math

import pytest

from diagram_engine.core import Connection, ConnectionType, Diagram, InvalidParameterError, Node
from diagram_engine.curves import (
    apply_curve_to_connection,
    arc_control_point,
    bezier_control_points,
)
from diagram_engine.generators import create_generator
from diagram_engine.geometry import Vec2, midpoint
from diagram_engine.noise import PerlinNoise, SeededRandom
from diagram_engine.style import StyleConfig


def _reflect(point: Vec2, a: Vec2, b: Vec2) -> Vec2:
    """Mirror `point` across the line through a and b."""
    dx, dy = b.x - a.x, b.y - a.y
    t = ((point.x - a.x) * dx + (point.y - a.y) * dy) / (dx * dx + dy * dy)
    foot = Vec2(a.x + dx * t, a.y + dy * t)
    return Vec2(2 * foot.x - point.x, 2 * foot.y - point.y)


def _close(p: Vec2, q: Vec2) -> bool:
    return math.isclose(p.x, q.x, abs_tol=1e-9) and math.isclose(p.y, q.y, abs_tol=1e-9)


def test_arc_zero_amount_is_midpoint():
    a, b = Vec2(1.5, -2.0), Vec2(7.0, 3.25)
    assert arc_control_point(a, b, 0) == midpoint(a, b)


def test_arc_offsets_along_normal():
    cp = arc_control_point(Vec2(0, 0), Vec2(10, 0), 20)
    assert _close(cp, Vec2(5, 10))


def test_bezier_points_sit_on_opposite_sides():
    cp1, cp2 = bezier_control_points(Vec2(0, 0), Vec2(10, 0), 20)
    assert _close(cp1, Vec2(3.3, 10))
    assert _close(cp2, Vec2(6.7, -10))


def test_bezier_negated_amount_mirrors_across_segment():
    a, b = Vec2(1, 2), Vec2(7, -3)
    positive = bezier_control_points(a, b, 40)
    negative = bezier_control_points(a, b, -40)
    for p, n in zip(positive, negative):
        assert _close(_reflect(p, a, b), n)


@pytest.mark.parametrize("amount", [0, 50, -80])
def test_coincident_endpoints_fall_back_to_straight(amount):
    a = Vec2(3, 4)
    assert arc_control_point(a, a, amount) == a
    for cp in bezier_control_points(a, a, amount):
        assert cp == a
        assert math.isfinite(cp.x) and math.isfinite(cp.y)


def _connection(a=Vec2(0, 0), b=Vec2(10, 0)) -> Connection:
    return Connection(Node(a, "a"), Node(b, "b"))


def test_apply_curve_maps_style_types():
    connection = _connection()

    apply_curve_to_connection(connection, StyleConfig(type="curved"))
    assert connection.type is ConnectionType.ARC
    assert len(connection.control_points) == 1

    apply_curve_to_connection(connection, StyleConfig(type="bezier"))
    assert connection.type is ConnectionType.BEZIER
    assert len(connection.control_points) == 2

    apply_curve_to_connection(connection, StyleConfig(type="straight"))
    assert connection.type is ConnectionType.STRAIGHT
    assert connection.control_points == []
    assert connection.is_render_ready


def test_apply_curve_defaults_amount_to_50():
    connection = _connection()
    apply_curve_to_connection(connection, {"type": "curved"})
    assert _close(connection.control_points[0], Vec2(5, 25))


def test_apply_curve_honours_zero_amount():
    connection = _connection()
    apply_curve_to_connection(connection, StyleConfig(type="curved", curveAmount=0))
    assert connection.control_points == [Vec2(5, 0)]


def test_apply_curve_is_idempotent():
    connection = _connection(Vec2(-12.3, 45.6), Vec2(78.9, -0.12))
    style = StyleConfig(type="bezier", curveAmount=73.5)

    apply_curve_to_connection(connection, style)
    first = list(connection.control_points)
    apply_curve_to_connection(connection, style)

    assert connection.control_points == first


def test_apply_curve_tracks_moved_endpoints():
    connection = _connection()
    style = StyleConfig(type="curved", curveAmount=0)
    apply_curve_to_connection(connection, style)

    connection.node_b.position = Vec2(20, 0)
    apply_curve_to_connection(connection, style)

    assert connection.control_points == [Vec2(10, 0)]


@pytest.mark.parametrize("amount", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_curve_amount_is_rejected(amount):
    connection = _connection()
    with pytest.raises(InvalidParameterError) as exc:
        apply_curve_to_connection(connection, {"type": "bezier", "curveAmount": amount})
    assert exc.value.field == "curveAmount"
    assert connection.control_points == []


@pytest.mark.parametrize("generator", ["radial", "path", "hybrid", "noisegrid"])
@pytest.mark.parametrize("style_type", ["curved", "bezier"])
def test_generated_control_points_are_finite(generator, style_type):
    diagram = Diagram()
    create_generator(generator, noise=PerlinNoise(seed=6), rng=SeededRandom(6)).generate(diagram, {})
    style = StyleConfig(type=style_type, curveAmount=120)

    for connection in diagram.connections:
        apply_curve_to_connection(connection, style)
        for cp in connection.control_points:
            assert math.isfinite(cp.x) and math.isfinite(cp.y)
