"""Export a built screen graph for documentation and review."""

from .graph_snapshot import EdgeSnapshot, GraphSnapshot, SceneSnapshot

__all__ = [
    "GraphSnapshot",
    "SceneSnapshot",
    "EdgeSnapshot",
]
