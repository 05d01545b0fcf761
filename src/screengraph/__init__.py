"""screengraph: shortest-path navigation through an application's UI scenes.

Describe the app's scenes and the gestures between them once, as a shared
graph, and let a Navigator get each test to the scene it needs.
"""

from .base_exceptions import ScreenGraphException
from .exceptions import (
    DuplicateNodeError,
    ElementWaitTimeoutError,
    GraphAlreadyBuiltError,
    GraphConstructionError,
    InternalInconsistencyError,
    NavigationError,
    NoInitialStateError,
    NoRouteError,
    UnknownDestinationError,
    UnknownSceneError,
    UnresolvedEdgeError,
)
from .implementations import (
    LoggingFailureReporter,
    PollingElementWaiter,
    RaisingFailureReporter,
    RecordingFailureReporter,
)
from .interfaces import IElementWaiter, IFailureReporter, IUIElement, SourceLocation
from .model import ScreenGraphNode, Transition
from .navigation import Navigator, PathFinder
from .screen_graph import GraphPhase, ScreenGraph

__version__ = "0.1.0"

__all__ = [
    "ScreenGraph",
    "GraphPhase",
    "ScreenGraphNode",
    "Transition",
    "Navigator",
    "PathFinder",
    "IUIElement",
    "IElementWaiter",
    "IFailureReporter",
    "SourceLocation",
    "PollingElementWaiter",
    "RaisingFailureReporter",
    "RecordingFailureReporter",
    "LoggingFailureReporter",
    "ScreenGraphException",
    "GraphConstructionError",
    "DuplicateNodeError",
    "UnknownDestinationError",
    "UnresolvedEdgeError",
    "GraphAlreadyBuiltError",
    "InternalInconsistencyError",
    "NavigationError",
    "UnknownSceneError",
    "NoRouteError",
    "ElementWaitTimeoutError",
    "NoInitialStateError",
]
