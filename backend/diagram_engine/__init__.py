"""
Procedural diagram generation engine.

Generators lay out nodes and connections in 2D space; the curve pass
derives control points for arc and bezier connections.
"""

__version__ = "0.1.0"
