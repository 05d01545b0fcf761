"""Exceptions package.

Graph construction errors are raised immediately. Navigation errors are
routed through the navigator's failure reporter.
"""

from ..base_exceptions import ScreenGraphException
from .graph_exceptions import (
    DuplicateNodeError,
    GraphAlreadyBuiltError,
    GraphConstructionError,
    InternalInconsistencyError,
    UnknownDestinationError,
    UnresolvedEdgeError,
)
from .navigation_exceptions import (
    ElementWaitTimeoutError,
    NavigationError,
    NoInitialStateError,
    NoRouteError,
    UnknownSceneError,
)

__all__ = [
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
