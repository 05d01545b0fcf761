"""Navigation exceptions.

Reported through the failure reporter with the caller's source location so
they surface as ordinary test failures.
"""

from typing import Any

from ..base_exceptions import ScreenGraphException


class NavigationError(ScreenGraphException):
    """Base class for routing failures detected while navigating."""

    pass


class UnknownSceneError(NavigationError):
    """Thrown when a navigation target was never registered."""

    def __init__(self, scene_name: str, current_name: str | None = None):
        """Construct a new unknown scene error.

        Args:
            scene_name: The requested scene
            current_name: Where the navigator was at the time
        """
        message = f"Cannot route to {scene_name}, because it doesn't exist"
        if current_name is not None:
            message += f". Currently at {current_name}"
        super().__init__(
            message,
            error_code="UNKNOWN_SCENE",
            context={"scene": scene_name, "current": current_name},
        )
        self.scene_name = scene_name
        self.current_name = current_name


class NoRouteError(NavigationError):
    """Thrown when no directed path exists between the current scene and the target."""

    def __init__(self, source_name: str, destination_name: str):
        super().__init__(
            f"Cannot route to {destination_name} from {source_name}",
            error_code="NO_ROUTE",
            context={"source": source_name, "destination": destination_name},
        )
        self.source_name = source_name
        self.destination_name = destination_name


class ElementWaitTimeoutError(NavigationError):
    """Thrown when an element does not appear within the timeout."""

    def __init__(self, element: Any, timeout: float, hop: tuple[str, str] | None = None):
        """Construct a new element wait timeout error.

        Args:
            element: The element that never appeared
            timeout: Seconds waited
            hop: Optional (source, destination) of the hop being executed
        """
        description = getattr(element, "description", None) or repr(element)
        message = f"Element {description} did not exist after {timeout:g}s"
        if hop is not None:
            message += f" while moving from {hop[0]} to {hop[1]}"
        super().__init__(
            message,
            error_code="ELEMENT_WAIT_TIMEOUT",
            context={"element": description, "timeout": timeout, "hop": hop},
        )
        self.element = element
        self.timeout = timeout
        self.hop = hop

    def at_hop(self, source_name: str, destination_name: str) -> "ElementWaitTimeoutError":
        """Return a copy of this error annotated with the hop it occurred on."""
        return ElementWaitTimeoutError(self.element, self.timeout, (source_name, destination_name))


class NoInitialStateError(NavigationError):
    """Thrown when a navigator has neither an explicit nor a configured starting scene."""

    def __init__(self, requested: str | None = None):
        if requested is None:
            message = "The app's initial state couldn't be established"
        else:
            message = f"The app's initial state couldn't be established: unknown scene {requested}"
        super().__init__(
            message,
            error_code="NO_INITIAL_STATE",
            context={"requested": requested},
        )
        self.requested = requested
