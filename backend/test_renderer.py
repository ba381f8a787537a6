import pytest

from diagram_engine.controller import DiagramController
from diagram_engine.renderer import NodeRenderer, Renderer, render_svg
from diagram_engine.style import StyleConfig


def _controller(style_type: str) -> DiagramController:
    controller = DiagramController(style=StyleConfig(type=style_type))
    controller.generate("radial", {"nodeCount": 6})
    return controller


def test_base_renderer_is_abstract():
    with pytest.raises(NotImplementedError):
        Renderer().render(_controller("straight").diagram)


@pytest.mark.parametrize(
    "style_type, marker",
    [("straight", "<line "), ("curved", " Q "), ("bezier", " C ")],
)
def test_connection_shapes_follow_type(style_type, marker):
    controller = _controller(style_type)
    svg = render_svg(controller.diagram, controller.style, width=400, height=300)

    assert svg.startswith('<svg width="400" height="300"')
    assert svg.count(marker) == 6
    assert svg.count("<circle ") == 6
    assert 'transform="translate(200 150)"' in svg


def test_connections_drawn_before_nodes():
    controller = _controller("straight")
    svg = render_svg(controller.diagram, controller.style)
    assert svg.rindex("<line ") < svg.index("<circle ")


def test_per_element_overrides_win():
    controller = _controller("straight")
    controller.diagram.nodes[0].data.update(color="#ff0000", size=20)
    controller.diagram.connections[0].data.update(color="#00ff00", weight=4)

    svg = render_svg(controller.diagram, controller.style)

    assert 'fill="#ff0000"' in svg and 'r="10"' in svg
    assert 'stroke="#00ff00" stroke-width="4"' in svg


def test_node_renderer_emits_one_circle_per_node():
    controller = _controller("straight")
    assert len(NodeRenderer().render(controller.diagram)) == 6


def test_zero_overrides_are_kept():
    controller = _controller("straight")
    controller.diagram.nodes[0].data["size"] = 0
    controller.diagram.connections[0].data["weight"] = 0

    svg = render_svg(controller.diagram, controller.style)

    assert svg.count('r="0"') == 1
    assert svg.count('stroke-width="0"') == 1


def test_colour_values_are_escaped():
    controller = DiagramController(style=StyleConfig(stroke="#fff\" onload='alert(1)"))
    controller.generate("radial", {"nodeCount": 3})
    controller.diagram.nodes[0].data["color"] = "<red>&"

    svg = render_svg(controller.diagram, controller.style, background="#000'/><script>")

    assert 'stroke="#fff&quot; onload=' in svg
    assert '#fff" onload' not in svg
    assert "<red>" not in svg and "&lt;red&gt;&amp;" in svg
    assert "<script>" not in svg
