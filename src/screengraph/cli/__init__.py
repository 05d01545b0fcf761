"""screengraph Command Line Interface.

Provides CLI commands for inspecting a screen graph defined in Python:
- Describing scenes and transitions
- Showing the route between two scenes
- Exporting the graph as JSON or Graphviz DOT

Usage:
    python -m screengraph.cli --help
    screengraph describe myapp.graphs:build_graph
    screengraph route myapp.graphs:GRAPH Home Settings
"""

from .main import main

__all__ = ["main"]
