"""Example: navigating a small app with a screen graph.

The "app" here is a dictionary of fake elements that print what happens to
them, so the example runs without a device.

Run it:
    python login_flow.py

Inspect the graph:
    screengraph describe login_flow:build_graph
    screengraph route login_flow:build_graph Home Settings
"""

from screengraph import IUIElement, RecordingFailureReporter, ScreenGraph
from screengraph.logging import setup_logging


class PrintingElement(IUIElement):
    """Element that is always present and prints each gesture."""

    def __init__(self, description: str) -> None:
        self.description = description

    @property
    def exists(self) -> bool:
        return True

    def tap(self) -> None:
        print(f"tap {self.description}")

    def double_tap(self) -> None:
        print(f"double tap {self.description}")

    def type_text(self, text: str) -> None:
        print(f"type {text!r} into {self.description}")

    def swipe_left(self) -> None:
        print(f"swipe left on {self.description}")

    def swipe_right(self) -> None:
        print(f"swipe right on {self.description}")

    def swipe_up(self) -> None:
        print(f"swipe up on {self.description}")

    def swipe_down(self) -> None:
        print(f"swipe down on {self.description}")


class App:
    def __init__(self) -> None:
        self._elements: dict[str, PrintingElement] = {}

    def __getitem__(self, name: str) -> PrintingElement:
        return self._elements.setdefault(name, PrintingElement(name))


def build_graph(app: App | None = None) -> ScreenGraph:
    app = app or App()
    graph = ScreenGraph(initial_scene_name="Home")

    def home(scene):
        scene.tap(app["Login button"], to="Login")
        scene.tap(app["Menu button"], to="Menu")

    def login(scene):
        @scene.gesture(to="Dashboard", wait_for=app["Username field"])
        def sign_in():
            app["Username field"].type_text("alice")
            app["Password field"].type_text("secret")
            app["Submit button"].tap()

    def dashboard(scene):
        scene.exists_when = app["Welcome banner"]
        scene.back_action = app["Back button"].tap
        scene.tap(app["Menu button"], to="Menu")

    def menu(scene):
        scene.dismiss_on_use = True
        scene.tap(app["Settings item"], to="Settings")
        scene.tap(app["Close menu"], to="Home")

    def settings(scene):
        scene.back_action = app["Done button"].tap

    graph.register_node("Home", home)
    graph.register_node("Login", login)
    graph.register_node("Dashboard", dashboard)
    graph.register_node("Menu", menu)
    graph.register_node("Settings", settings)
    return graph


def main() -> None:
    setup_logging(level="INFO", structured=False)

    graph = build_graph()
    reporter = RecordingFailureReporter()
    navigator = graph.create_navigator(reporter=reporter)

    print("== Home -> Dashboard")
    navigator.goto("Dashboard")

    print("== Dashboard -> Settings (through the menu)")
    navigator.goto("Settings")

    print("== back from Settings: returns to Dashboard, not the dismissed menu")
    navigator.goto("Dashboard")

    print("== visit every scene")
    navigator.visit_all(lambda name: print(f"   at {name}"))

    navigator.goto("Nowhere")
    for failure in reporter.failures:
        print(f"recorded failure: {failure}")


if __name__ == "__main__":
    main()
