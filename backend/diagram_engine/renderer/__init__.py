# SVG output for generated diagrams

from diagram_engine.renderer.svg_renderer import (
    ConnectionRenderer,
    NodeRenderer,
    Renderer,
    render_svg,
)

__all__ = [
    "ConnectionRenderer",
    "NodeRenderer",
    "Renderer",
    "render_svg",
]
