"""ScreenGraph - the shared map of an application's scenes.

Create one graph of UI scenes for the app, pass it to every test, and use a
Navigator to get from place to place instead of maintaining duplicated
navigation code in each test.

Construction is two-phase:

1. ``register_node(name, builder)`` records each scene and defers its builder.
2. ``build()`` runs every builder once and resolves every declared
   destination. It is called implicitly by ``create_navigator()``.

Example:
    >>> graph = ScreenGraph(initial_scene_name="Home")
    >>> graph.register_node("Home", lambda scene: scene.tap(login_button, to="Login"))
    >>> graph.register_node("Login")
    >>> navigator = graph.create_navigator()
    >>> navigator.goto("Login")
    True
"""

from collections.abc import Iterator
from enum import Enum

from .config import get_settings
from .exceptions import (
    DuplicateNodeError,
    GraphAlreadyBuiltError,
    GraphConstructionError,
    NoInitialStateError,
    UnknownDestinationError,
)
from .implementations import PollingElementWaiter, RaisingFailureReporter
from .interfaces import IElementWaiter, IFailureReporter
from .logging import get_logger
from .model import SceneBuilder, ScreenGraphNode
from .model.transition import Action
from .navigation.navigator import Navigator
from .navigation.source_location import caller_location

logger = get_logger(__name__)


class GraphPhase(Enum):
    """Construction phase of a ScreenGraph."""

    REGISTERING = "registering"
    BUILT = "built"


class ScreenGraph:
    """Registry of named scenes and owner of one-time graph construction.

    Attributes:
        initial_scene_name: Default starting scene for new navigators
        waiter: Element waiter used for ``wait_for`` and ``exists_when``
        element_timeout: Seconds allowed for each element wait
    """

    def __init__(
        self,
        initial_scene_name: str | None = None,
        waiter: IElementWaiter | None = None,
        element_timeout: float | None = None,
    ) -> None:
        self.initial_scene_name = initial_scene_name
        self.waiter = waiter or PollingElementWaiter()
        self.element_timeout = (
            element_timeout if element_timeout is not None else get_settings().element_timeout
        )
        self._nodes: dict[str, ScreenGraphNode] = {}
        self._phase = GraphPhase.REGISTERING

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[ScreenGraphNode]:
        return iter(self._nodes.values())

    @property
    def phase(self) -> GraphPhase:
        return self._phase

    @property
    def is_built(self) -> bool:
        return self._phase is GraphPhase.BUILT

    @property
    def scene_names(self) -> list[str]:
        """Registered scene names in registration order."""
        return list(self._nodes)

    def register_node(
        self,
        name: str,
        builder: SceneBuilder | None = None,
        back_action: Action | None = None,
    ) -> None:
        """Register a scene, deferring its builder until build().

        Args:
            name: Unique scene name
            builder: Callback documenting the exits out of this scene
            back_action: Optional gesture returning to the previous scene

        Raises:
            DuplicateNodeError: If the name is already registered
            GraphAlreadyBuiltError: If the graph has already been built
        """
        if self.is_built:
            raise GraphAlreadyBuiltError(f"register scene '{name}'")
        if name in self._nodes:
            raise DuplicateNodeError(name)
        self._nodes[name] = ScreenGraphNode(name, builder=builder, back_action=back_action)

    create_scene = register_node

    def lookup(self, name: str) -> ScreenGraphNode | None:
        return self._nodes.get(name)

    def build(self) -> None:
        """Run every scene builder once and resolve all declared destinations.

        Subsequent calls are no-ops. If a builder fails or a destination does
        not resolve, the declared transitions are discarded, the graph stays
        in the registering phase and the error propagates.

        Raises:
            UnknownDestinationError: If a transition names an unregistered scene
        """
        if self.is_built:
            return

        nodes = list(self._nodes.values())
        try:
            for node in nodes:
                node._run_builder()

            for node in nodes:
                for destination_name in node.transitions:
                    if destination_name not in self._nodes:
                        raise UnknownDestinationError(node.name, destination_name)
        except Exception as e:
            for node in nodes:
                node._reset()
            if isinstance(e, GraphConstructionError):
                logger.error("graph_build_failed", error=str(e), error_code=e.error_code)
            raise

        for node in nodes:
            node._freeze()
        self._phase = GraphPhase.BUILT

        logger.info(
            "graph_built",
            scenes=len(nodes),
            transitions=sum(len(node.transitions) for node in nodes),
        )

    def create_navigator(
        self,
        starting_at: str | None = None,
        reporter: IFailureReporter | None = None,
    ) -> Navigator:
        """Create a navigator, the main way of getting around the app.

        Typically called in a test's setup. Builds the graph on first use.

        Args:
            starting_at: Scene the app is in now, defaults to initial_scene_name
            reporter: Where navigation failures go, defaults to raising them

        Returns:
            A navigator positioned at the starting scene

        Raises:
            NoInitialStateError: If no starting scene could be established. It
                is reported first, then raised, since a navigator cannot exist
                without a position.
        """
        location = caller_location()
        self.build()
        reporter = reporter or RaisingFailureReporter()

        name = starting_at if starting_at is not None else self.initial_scene_name
        current = self.lookup(name) if name is not None else None
        if current is None:
            error = NoInitialStateError(name)
            reporter.record_failure(error, location)
            raise error

        return Navigator(self, reporter=reporter, initial_scene=current)
