import pytest

from diagram_engine.core import (
    Connection,
    ConnectionType,
    DanglingConnectionError,
    Diagram,
    Node,
)
from diagram_engine.geometry import Vec2


def test_connect_is_idempotent():
    a, b = Node(Vec2(0, 0), "a"), Node(Vec2(1, 0), "b")
    a.connect(b)
    a.connect(b)
    assert a.adjacency == [b]
    assert a.is_connected_to(b)
    assert not b.is_connected_to(a)


def test_original_position_is_a_snapshot():
    node = Node(Vec2(3, 4), "n")
    node.position = Vec2(10, 10)
    assert node.original_position == Vec2(3, 4)


def test_diagram_connect_records_both_directions():
    diagram = Diagram()
    a = diagram.add_node(Vec2(0, 0), "a")
    b = diagram.add_node(Vec2(5, 0), "b")
    diagram.connect(a, b)
    diagram.connect(b, a)

    assert a.adjacency == [b]
    assert b.adjacency == [a]
    assert len(diagram.connections) == 2


def test_add_node_assigns_sequential_ids():
    diagram = Diagram()
    ids = [diagram.add_node(Vec2(i, i)).id for i in range(3)]
    assert ids == ["node_0", "node_1", "node_2"]
    assert diagram.get_node("node_1").position == Vec2(1, 1)
    assert diagram.get_node("missing") is None


def test_clear_empties_both_collections():
    diagram = Diagram()
    a = diagram.add_node(Vec2(0, 0))
    diagram.connect(a, diagram.add_node(Vec2(1, 1)))
    diagram.clear()
    assert diagram.nodes == [] and diagram.connections == []


def test_replace_contents_rejects_dangling_connections():
    diagram = Diagram()
    kept = diagram.add_node(Vec2(0, 0), "kept")
    outsider = Node(Vec2(1, 1), "outsider")

    with pytest.raises(DanglingConnectionError):
        diagram.replace_contents([kept], [Connection(kept, outsider)])
    assert diagram.nodes == [kept]


def test_control_point_count_by_type():
    assert ConnectionType.STRAIGHT.control_point_count == 0
    assert ConnectionType.ARC.control_point_count == 1
    assert ConnectionType.BEZIER.control_point_count == 2

    connection = Connection(Node(Vec2(0, 0)), Node(Vec2(1, 0)), ConnectionType.ARC)
    assert not connection.is_render_ready
