"""Graph construction exceptions.

These indicate an authoring defect in the graph definition and abort
construction. They are never retried.
"""

from ..base_exceptions import ScreenGraphException


class GraphConstructionError(ScreenGraphException):
    """Base class for errors raised while registering or building a graph."""

    pass


class DuplicateNodeError(GraphConstructionError):
    """Thrown when a scene name is registered twice."""

    def __init__(self, scene_name: str):
        """Construct a new duplicate node error.

        Args:
            scene_name: The name that was already registered
        """
        super().__init__(
            f"Scene '{scene_name}' has already been registered",
            error_code="DUPLICATE_NODE",
            context={"scene": scene_name},
        )
        self.scene_name = scene_name


class UnknownDestinationError(GraphConstructionError):
    """Thrown by build() when a declared transition points at an unregistered scene."""

    def __init__(self, source_name: str, destination_name: str):
        """Construct a new unknown destination error.

        Args:
            source_name: Scene declaring the transition
            destination_name: Destination that could not be resolved
        """
        super().__init__(
            f"Destination scene '{destination_name}' (from '{source_name}') "
            "has not been created anywhere",
            error_code="UNKNOWN_DESTINATION",
            context={"source": source_name, "destination": destination_name},
        )
        self.source_name = source_name
        self.destination_name = destination_name


UnresolvedEdgeError = UnknownDestinationError


class GraphAlreadyBuiltError(GraphConstructionError):
    """Thrown when the graph structure is changed after build()."""

    def __init__(self, operation: str):
        super().__init__(
            f"Cannot {operation}: the screen graph has already been built",
            error_code="GRAPH_ALREADY_BUILT",
            context={"operation": operation},
        )
        self.operation = operation


class InternalInconsistencyError(ScreenGraphException):
    """Thrown when a computed path uses an edge that does not exist, or a
    back-transition is bound on a scene without a back action.

    This signals a bug in path finding or back-edge bookkeeping, never a
    problem with the graph definition or the application under test.
    """

    def __init__(self, source_name: str, destination_name: str):
        super().__init__(
            f"Path step '{source_name}' -> '{destination_name}' has no transition",
            error_code="INTERNAL_INCONSISTENCY",
            context={"source": source_name, "destination": destination_name},
        )
        self.source_name = source_name
        self.destination_name = destination_name
