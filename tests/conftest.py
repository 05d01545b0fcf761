"""Pytest configuration and fixtures."""

import os

import pytest

os.environ.setdefault("SCREENGRAPH_ENV", "test")

from screengraph import (  # noqa: E402
    IUIElement,
    PollingElementWaiter,
    RecordingFailureReporter,
    ScreenGraph,
)
from screengraph.config import reset_settings  # noqa: E402


class FakeElement(IUIElement):
    """In-memory UI element recording the gestures performed on it."""

    def __init__(self, description: str, log: list[str], present: bool = True) -> None:
        self.description = description
        self.present = present
        self._log = log

    def __repr__(self) -> str:
        return f"FakeElement({self.description!r})"

    @property
    def exists(self) -> bool:
        return self.present

    def _record(self, gesture: str) -> None:
        self._log.append(f"{gesture}:{self.description}")

    def tap(self) -> None:
        self._record("tap")

    def double_tap(self) -> None:
        self._record("double_tap")

    def type_text(self, text: str) -> None:
        self._record(f"type[{text}]")

    def swipe_left(self) -> None:
        self._record("swipe_left")

    def swipe_right(self) -> None:
        self._record("swipe_right")

    def swipe_up(self) -> None:
        self._record("swipe_up")

    def swipe_down(self) -> None:
        self._record("swipe_down")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Give each test fresh test settings."""
    monkeypatch.setenv("SCREENGRAPH_ENV", "test")
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def action_log() -> list[str]:
    """Ordered record of every gesture performed during a test."""
    return []


@pytest.fixture
def element(action_log):
    """Factory for fake elements sharing the test's action log."""

    def make(description: str, present: bool = True) -> FakeElement:
        return FakeElement(description, action_log, present=present)

    return make


@pytest.fixture
def fast_waiter() -> PollingElementWaiter:
    return PollingElementWaiter(poll_interval=0.001)


@pytest.fixture
def make_graph(fast_waiter):
    """Factory for graphs with short element timeouts."""

    def make(initial_scene_name: str | None = None, element_timeout: float = 0.02) -> ScreenGraph:
        return ScreenGraph(
            initial_scene_name=initial_scene_name,
            waiter=fast_waiter,
            element_timeout=element_timeout,
        )

    return make


@pytest.fixture
def recorder() -> RecordingFailureReporter:
    return RecordingFailureReporter()


@pytest.fixture
def login_graph(make_graph, element):
    """Home -> Login -> Dashboard, with a back button on Dashboard.

    Home also reaches a dismiss-on-use Menu leading to a back-capable Settings.
    """
    graph = make_graph(initial_scene_name="Home")
    username = element("username")
    submit = element("Submit")

    def home(scene):
        scene.tap(element("Login"), to="Login")
        scene.tap(element("Menu"), to="Menu")

    def login(scene):
        @scene.gesture(to="Dashboard", wait_for=username)
        def sign_in():
            username.type_text("alice")
            submit.tap()

    def dashboard(scene):
        scene.back_action = element("Back").tap

    def menu(scene):
        scene.dismiss_on_use = True
        scene.tap(element("Settings"), to="Settings")

    def settings(scene):
        scene.back_action = element("Done").tap

    graph.register_node("Home", home)
    graph.register_node("Login", login)
    graph.register_node("Dashboard", dashboard)
    graph.register_node("Menu", menu)
    graph.register_node("Settings", settings)
    return graph
