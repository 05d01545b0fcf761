"""Graph data model: scenes and the transitions between them."""

from .node import NodeVisitor, SceneBuilder, ScreenGraphNode
from .transition import Action, Transition

__all__ = [
    "Action",
    "Transition",
    "ScreenGraphNode",
    "SceneBuilder",
    "NodeVisitor",
]
