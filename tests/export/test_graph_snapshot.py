"""Tests for GraphSnapshot export."""

import json

from screengraph.export import GraphSnapshot


class TestGraphSnapshot:
    """Test capturing and rendering graph structure."""

    def test_captures_scenes_and_edges(self, login_graph):
        snapshot = GraphSnapshot.from_graph(login_graph)

        assert login_graph.is_built
        assert snapshot.initial_scene == "Home"
        assert [scene.name for scene in snapshot.scenes] == [
            "Home",
            "Login",
            "Dashboard",
            "Menu",
            "Settings",
        ]
        assert snapshot.adjacency() == {
            "Home": ["Login", "Menu"],
            "Login": ["Dashboard"],
            "Dashboard": [],
            "Menu": ["Settings"],
            "Settings": [],
        }

        scenes = {scene.name: scene for scene in snapshot.scenes}
        assert scenes["Home"].initial
        assert scenes["Dashboard"].back_capable
        assert scenes["Menu"].dismiss_on_use

        login_edge = next(edge for edge in snapshot.edges if edge.source == "Login")
        assert login_edge.waits_for == "username"

    def test_includes_live_back_edges(self, login_graph):
        navigator = login_graph.create_navigator()
        navigator.goto("Dashboard")

        snapshot = GraphSnapshot.from_graph(login_graph)

        back_edges = [edge for edge in snapshot.edges if edge.back]
        assert [(edge.source, edge.destination) for edge in back_edges] == [("Dashboard", "Login")]
        dashboard = next(scene for scene in snapshot.scenes if scene.name == "Dashboard")
        assert dashboard.return_scene == "Login"

    def test_json_round_trip(self, login_graph):
        snapshot = GraphSnapshot.from_graph(login_graph)

        data = json.loads(snapshot.to_json())

        assert data["initial_scene"] == "Home"
        assert len(data["edges"]) == 4
        assert GraphSnapshot.model_validate(data) == snapshot

    def test_dot(self, login_graph):
        navigator = login_graph.create_navigator()
        navigator.goto("Dashboard")

        dot = GraphSnapshot.from_graph(login_graph).to_dot(name="app")

        assert dot.startswith('digraph "app" {\n')
        assert '  "Home" [shape=doublecircle];' in dot
        assert '  "Menu" [style=dashed];' in dot
        assert '  "Home" -> "Login";' in dot
        assert '  "Dashboard" -> "Login" [style=dotted, label="back"];' in dot
        assert dot.endswith("}\n")
