from typing import List, Optional
from xml.sax.saxutils import quoteattr

from diagram_engine.config import BACKGROUND_COLOR, CANVAS_HEIGHT, CANVAS_WIDTH
from diagram_engine.core.connection import Connection, ConnectionType
from diagram_engine.core.diagram import Diagram
from diagram_engine.style import DEFAULT_STYLE, StyleConfig


def _fmt(value: float) -> str:
    return f"{value:.3f}".rstrip("0").rstrip(".")


def _attr(name: str, value) -> str:
    return f"{name}={quoteattr(str(value))}"


def _override(data: dict, key: str, default):
    value = data.get(key)
    return default if value is None else value


class Renderer:
    """Turns part of a diagram into SVG elements."""

    def __init__(self, style: Optional[StyleConfig] = None):
        self.style = style or DEFAULT_STYLE

    def render(self, diagram: Diagram) -> List[str]:
        raise NotImplementedError("render() must be implemented by subclass")


class ConnectionRenderer(Renderer):
    def render(self, diagram: Diagram) -> List[str]:
        style = self.style
        opacity = _fmt(style.alpha / 255)
        fill = style.fill or "none"
        elements = []

        for connection in diagram.connections:
            weight = _override(connection.data, "weight", style.stroke_weight)
            color = _override(connection.data, "color", style.stroke)
            attrs = " ".join([
                _attr("stroke", color),
                _attr("stroke-width", _fmt(weight)),
                _attr("stroke-opacity", opacity),
                _attr("fill", fill),
            ])
            elements.append(f"<{self._shape(connection)} {attrs}/>")

        return elements

    @staticmethod
    def _shape(connection: Connection) -> str:
        a = connection.node_a.position
        b = connection.node_b.position
        cps = connection.control_points

        if connection.type is ConnectionType.BEZIER and len(cps) >= 2:
            return (
                f'path d="M {_fmt(a.x)} {_fmt(a.y)} '
                f'C {_fmt(cps[0].x)} {_fmt(cps[0].y)} {_fmt(cps[1].x)} {_fmt(cps[1].y)} '
                f'{_fmt(b.x)} {_fmt(b.y)}"'
            )
        if connection.type is ConnectionType.ARC and len(cps) >= 1:
            return (
                f'path d="M {_fmt(a.x)} {_fmt(a.y)} '
                f'Q {_fmt(cps[0].x)} {_fmt(cps[0].y)} {_fmt(b.x)} {_fmt(b.y)}"'
            )
        return f'line x1="{_fmt(a.x)}" y1="{_fmt(a.y)}" x2="{_fmt(b.x)}" y2="{_fmt(b.y)}"'


class NodeRenderer(Renderer):
    def render(self, diagram: Diagram) -> List[str]:
        style = self.style
        elements = []

        for node in diagram.nodes:
            size = _override(node.data, "size", style.size)
            color = _override(node.data, "color", style.node_fill)
            stroke = style.node_stroke or "none"
            elements.append(
                f'<circle cx="{_fmt(node.position.x)}" cy="{_fmt(node.position.y)}" '
                f'r="{_fmt(size / 2)}" {_attr("fill", color)} {_attr("stroke", stroke)} '
                f'stroke-width="{_fmt(style.node_stroke_weight)}"/>'
            )

        return elements


def render_svg(
    diagram: Diagram,
    style: Optional[StyleConfig] = None,
    width: int = CANVAS_WIDTH,
    height: int = CANVAS_HEIGHT,
    background: str = BACKGROUND_COLOR,
) -> str:
    """Render a diagram with its origin at the canvas centre."""
    style = style or DEFAULT_STYLE

    svg = [
        f'<svg width="{width}" height="{height}" xmlns="http://www.w3.org/2000/svg">',
        f'<rect width="100%" height="100%" {_attr("fill", background)}/>',
        f'<g transform="translate({_fmt(width / 2)} {_fmt(height / 2)})">',
    ]

    # Draw connections first so nodes sit on top
    svg.extend(ConnectionRenderer(style).render(diagram))
    svg.extend(NodeRenderer(style).render(diagram))

    svg.append("</g>")
    svg.append("</svg>")
    return "\n".join(svg)
