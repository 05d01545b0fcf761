"""Navigator - moves the test agent around the screen graph.

The navigator tracks which scene the app is in, asks the PathFinder for a
route to the requested scene and executes the transitions along it one hop
at a time. It also maintains back-transitions: arriving at a back-capable
scene binds its back action to the most recent scene that is not
dismiss-on-use, and taking that back-transition consumes it.

Routing failures go to the failure reporter with the caller's file and
line. After a failure the navigator's position is best effort; resync with
``force_current`` before navigating further.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..exceptions import (
    ElementWaitTimeoutError,
    InternalInconsistencyError,
    NavigationError,
    NoRouteError,
    UnknownSceneError,
)
from ..interfaces import IFailureReporter, SourceLocation
from ..logging import NavigationLogger
from ..model import NodeVisitor, ScreenGraphNode
from .path_finder import PathFinder
from .source_location import caller_location

if TYPE_CHECKING:
    from ..screen_graph import ScreenGraph


class Navigator:
    """Stateful driver that walks routes through a ScreenGraph.

    Created with ``ScreenGraph.create_navigator()``. At most one navigator
    should navigate a given graph at a time: back-transition state lives on
    the shared nodes.

    Attributes:
        graph: The shared screen graph
        current: Scene the agent currently occupies
        last_returnable: Most recent scene eligible as a back-transition target
    """

    def __init__(
        self,
        graph: "ScreenGraph",
        reporter: IFailureReporter,
        initial_scene: ScreenGraphNode,
    ) -> None:
        self.graph = graph
        self.reporter = reporter
        self.current = initial_scene
        self.last_returnable: ScreenGraphNode | None = (
            None if initial_scene.dismiss_on_use else initial_scene
        )
        self.path_finder = PathFinder(graph)
        self._log = NavigationLogger()

    def __repr__(self) -> str:
        return f"Navigator(current={self.current.name!r})"

    @property
    def current_name(self) -> str:
        return self.current.name

    def goto(self, scene_name: str) -> bool:
        """Use the graph to move the app to the named scene.

        Args:
            scene_name: Target scene

        Returns:
            True on arrival, False if a failure was reported and the reporter
            did not raise
        """
        location = caller_location()

        destination = self.graph.lookup(scene_name)
        if destination is None:
            return self._fail(UnknownSceneError(scene_name, self.current.name), location)

        path = self.path_finder.shortest_path(self.current, destination)
        if not path:
            return self._fail(NoRouteError(self.current.name, scene_name), location)

        self._log.log_route(self.current.name, scene_name, [node.name for node in path])

        for next_scene in path[1:]:
            if not self._step(next_scene, location):
                return False
        return True

    def _step(self, next_scene: ScreenGraphNode, location: SourceLocation) -> bool:
        """Execute the single hop from the current scene to next_scene."""
        current = self.current

        if not current.dismiss_on_use:
            self.last_returnable = current

        transition = current.transition_to(next_scene.name)
        if transition is None:
            raise InternalInconsistencyError(current.name, next_scene.name)

        waiter = self.graph.waiter
        timeout = self.graph.element_timeout
        try:
            if transition.wait_for is not None:
                waiter.wait_for(transition.wait_for, timeout)
            transition.action()
            if next_scene.exists_when is not None:
                waiter.wait_for(next_scene.exists_when, timeout)
        except ElementWaitTimeoutError as e:
            return self._fail(e.at_hop(current.name, next_scene.name), location)

        self._log.log_transition(current.name, next_scene.name, back=transition.is_back)

        returnable = self.last_returnable
        if (
            next_scene.has_back
            and next_scene.return_node_name is None
            and returnable is not None
            and returnable.name != next_scene.name
        ):
            next_scene._bind_return(returnable.name)
            self._log.log_back_edge(next_scene.name, returnable.name, bound=True)

        if current.has_back and current.return_node_name == next_scene.name:
            current._consume_return()
            self._log.log_back_edge(current.name, next_scene.name, bound=False)

        self.current = next_scene
        return True

    def force_current(self, scene_name: str) -> bool:
        """Reposition the navigator without performing any actions.

        For when the navigator gets out of sync with the actual app. Needing
        this often suggests the graph is missing a scene or a transition.
        """
        location = caller_location()
        scene = self.graph.lookup(scene_name)
        if scene is None:
            return self._fail(UnknownSceneError(scene_name, self.current.name), location)
        self.current = scene
        return True

    def visit(self, *scene_names: str, visitor: NodeVisitor) -> bool:
        """Go to each scene in turn and call ``visitor`` with its name."""
        return self.visit_nodes(scene_names, visitor)

    def visit_nodes(self, scene_names: Iterable[str], visitor: NodeVisitor) -> bool:
        """Go to each scene in turn and call ``visitor`` with its name.

        Stops at the first scene that could not be reached.

        Returns:
            True if every scene was visited
        """
        for name in scene_names:
            if not self.goto(name):
                return False
            visitor(name)
        return True

    def visit_all(self, visitor: NodeVisitor) -> bool:
        """Visit every registered scene once, in registration order."""
        return self.visit_nodes(self.graph.scene_names, visitor)

    def return_to_start(self) -> bool:
        """Go back to the graph's initial scene, if one is configured."""
        initial = self.graph.initial_scene_name
        if initial is None:
            return True
        return self.goto(initial)

    def plan(self, scene_name: str) -> list[str]:
        """Scene names the next ``goto(scene_name)`` would pass through.

        Performs no actions. Returns an empty list for unknown or unreachable
        scenes.
        """
        destination = self.graph.lookup(scene_name)
        if destination is None:
            return []
        return [node.name for node in self.path_finder.shortest_path(self.current, destination)]

    def can_reach(self, scene_name: str) -> bool:
        return bool(self.plan(scene_name))

    def _fail(self, error: NavigationError, location: SourceLocation) -> bool:
        self._log.log_failure(error, current=self.current.name, location=str(location))
        self.reporter.record_failure(error, location)
        return False
