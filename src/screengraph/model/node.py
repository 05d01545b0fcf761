"""ScreenGraphNode - a named scene and the exits out of it.

Nodes are not created directly: register a scene on a ScreenGraph with a
builder callback, and the graph hands the node to that builder during
build(). The builder documents the exits with the gesture helpers:

    def home(scene: ScreenGraphNode) -> None:
        scene.tap(app.buttons["Login"], to="Login")
        scene.swipe_left(app.tables["Feed"], to="Discover")

    graph.register_node("Home", home)
"""

from collections.abc import Callable

from ..exceptions import GraphAlreadyBuiltError, InternalInconsistencyError
from ..interfaces import IUIElement
from .transition import Action, Transition

SceneBuilder = Callable[["ScreenGraphNode"], None]
NodeVisitor = Callable[[str], None]


class ScreenGraphNode:
    """A scene in the screen graph.

    Attributes:
        name: Unique scene name
        transitions: Outgoing transitions keyed by destination name, in
            registration order
        back_action: Gesture that returns to whichever scene led here. Setting
            it makes the node back-capable.
        dismiss_on_use: Once left, this node is never a back-transition target.
            Useful for menus and dialogs.
        exists_when: Element the navigator waits for after arriving here
        return_node_name: Scene the back-transition currently leads to. Set
            only while that transient transition exists.
    """

    def __init__(
        self,
        name: str,
        builder: SceneBuilder | None = None,
        back_action: Action | None = None,
    ) -> None:
        self.name = name
        self.transitions: dict[str, Transition] = {}
        self.back_action = back_action
        self.dismiss_on_use = False
        self.exists_when: IUIElement | None = None
        self.return_node_name: str | None = None
        self._builder = builder
        self._shadowed: Transition | None = None
        self._frozen = False

    def __repr__(self) -> str:
        return f"ScreenGraphNode({self.name!r}, exits={list(self.transitions)})"

    @property
    def has_back(self) -> bool:
        return self.back_action is not None

    @property
    def destinations(self) -> list[str]:
        return list(self.transitions)

    def transition_to(self, destination_name: str) -> Transition | None:
        return self.transitions.get(destination_name)

    def add_transition(
        self, to: str, action: Action, wait_for: IUIElement | None = None
    ) -> Transition:
        """Declare an exit from this scene.

        A later declaration for the same destination replaces the earlier one
        but keeps its position for path tie-breaking.

        Args:
            to: Destination scene name, resolved when the graph is built
            action: Procedure performing the transition
            wait_for: Element to wait for before running the action

        Returns:
            The registered transition

        Raises:
            GraphAlreadyBuiltError: If the graph has already been built
        """
        if self._frozen:
            raise GraphAlreadyBuiltError(f"add a transition from '{self.name}' to '{to}'")
        transition = Transition(destination_name=to, action=action, wait_for=wait_for)
        self.transitions[to] = transition
        return transition

    def gesture(
        self,
        to: str,
        action: Action | None = None,
        wait_for: IUIElement | None = None,
    ) -> Transition | Callable[[Action], Action]:
        """A gesture that takes the navigator from this scene to the named one.

        Can also be used as a decorator:

            @scene.gesture(to="Settings")
            def open_settings():
                app.buttons["Settings"].tap()
        """
        if action is None:

            def decorator(func: Action) -> Action:
                self.add_transition(to, func, wait_for)
                return func

            return decorator
        return self.add_transition(to, action, wait_for)

    def noop(self, to: str) -> Transition:
        return self.add_transition(to, lambda: None)

    def tap(self, element: IUIElement, to: str) -> Transition:
        return self.add_transition(to, element.tap, wait_for=element)

    def double_tap(self, element: IUIElement, to: str) -> Transition:
        return self.add_transition(to, element.double_tap, wait_for=element)

    def type_text(self, text: str, into: IUIElement, to: str) -> Transition:
        return self.add_transition(to, lambda: into.type_text(text), wait_for=into)

    def swipe_left(self, element: IUIElement, to: str) -> Transition:
        return self.add_transition(to, element.swipe_left, wait_for=element)

    def swipe_right(self, element: IUIElement, to: str) -> Transition:
        return self.add_transition(to, element.swipe_right, wait_for=element)

    def swipe_up(self, element: IUIElement, to: str) -> Transition:
        return self.add_transition(to, element.swipe_up, wait_for=element)

    def swipe_down(self, element: IUIElement, to: str) -> Transition:
        return self.add_transition(to, element.swipe_down, wait_for=element)

    # Graph lifecycle, driven by ScreenGraph

    def _run_builder(self) -> None:
        if self._builder is not None:
            self._builder(self)

    def _reset(self) -> None:
        self.transitions.clear()
        self.return_node_name = None
        self._shadowed = None

    def _freeze(self) -> None:
        self._frozen = True

    # Back-transition bookkeeping, driven by Navigator

    def _bind_return(self, return_name: str) -> None:
        """Add the transient back-transition to ``return_name``.

        A declared transition to the same scene is set aside and restored
        when the back-transition is consumed.
        """
        if self.back_action is None:
            raise InternalInconsistencyError(self.name, return_name)
        self._shadowed = self.transitions.get(return_name)
        self.transitions[return_name] = Transition(
            destination_name=return_name, action=self.back_action, is_back=True
        )
        self.return_node_name = return_name

    def _consume_return(self) -> str | None:
        """Remove the back-transition and return the name it led to."""
        return_name = self.return_node_name
        if return_name is None:
            return None
        if self._shadowed is not None:
            self.transitions[return_name] = self._shadowed
        else:
            self.transitions.pop(return_name, None)
        self._shadowed = None
        self.return_node_name = None
        return return_name
