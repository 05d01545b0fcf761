"""Tests for PathFinder shortest-path routing."""

import networkx as nx
import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from screengraph import PathFinder, ScreenGraph


def graph_from_edges(scene_count: int, edges: list[tuple[int, int]]) -> ScreenGraph:
    """Graph of scenes S0..Sn whose transitions are declared in ``edges`` order."""
    graph = ScreenGraph(element_timeout=0.01)
    exits: dict[int, list[int]] = {i: [] for i in range(scene_count)}
    for source, destination in edges:
        exits[source].append(destination)

    for i in range(scene_count):

        def builder(scene, destinations=exits[i]):
            for destination in destinations:
                scene.noop(to=f"S{destination}")

        graph.register_node(f"S{i}", builder)
    graph.build()
    return graph


def names(path) -> list[str]:
    return [node.name for node in path]


@pytest.fixture
def diamond():
    """S0 -> S1 -> S3 and S0 -> S2 -> S3, plus S3 -> S4."""
    return graph_from_edges(5, [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4)])


class TestShortestPath:
    """Test path computation on fixed graphs."""

    def test_path_includes_both_ends(self, diamond):
        finder = PathFinder(diamond)

        path = finder.shortest_path(diamond.lookup("S0"), diamond.lookup("S4"))

        assert names(path) == ["S0", "S1", "S3", "S4"]

    def test_same_scene_is_single_element(self, diamond):
        finder = PathFinder(diamond)
        scene = diamond.lookup("S3")

        assert finder.shortest_path(scene, scene) == [scene]
        assert finder.hop_count(scene, scene) == 0

    def test_edges_are_directed(self, diamond):
        finder = PathFinder(diamond)

        assert finder.shortest_path(diamond.lookup("S4"), diamond.lookup("S0")) == []
        assert finder.hop_count(diamond.lookup("S4"), diamond.lookup("S0")) is None

    def test_tie_broken_by_registration_order(self):
        first = graph_from_edges(4, [(0, 2), (0, 1), (1, 3), (2, 3)])
        finder = PathFinder(first)

        path = finder.shortest_path(first.lookup("S0"), first.lookup("S3"))

        assert names(path) == ["S0", "S2", "S3"]

    def test_prefers_fewer_hops_over_order(self):
        graph = graph_from_edges(4, [(0, 1), (1, 2), (2, 3), (0, 3)])
        finder = PathFinder(graph)

        assert names(finder.shortest_path(graph.lookup("S0"), graph.lookup("S3"))) == ["S0", "S3"]

    def test_sees_live_transition_changes(self, diamond):
        finder = PathFinder(diamond)
        s4 = diamond.lookup("S4")
        s4.back_action = lambda: None

        assert finder.shortest_path(s4, diamond.lookup("S0")) == []

        s4._bind_return("S0")
        assert names(finder.shortest_path(s4, diamond.lookup("S0"))) == ["S4", "S0"]

        s4._consume_return()
        assert finder.shortest_path(s4, diamond.lookup("S0")) == []


edge_lists = st.integers(min_value=1, max_value=8).flatmap(
    lambda n: st.tuples(
        st.just(n),
        st.lists(
            st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)),
            max_size=n * 3,
        ),
        st.integers(0, n - 1),
        st.integers(0, n - 1),
    )
)


class TestShortestPathProperties:
    """Property tests against networkx as an independent reference."""

    @settings(
        max_examples=200,
        deadline=None,
        suppress_health_check=[HealthCheck.function_scoped_fixture],
    )
    @given(edge_lists)
    def test_hop_count_matches_reference_bfs(self, case):
        scene_count, edges, source, destination = case
        graph = graph_from_edges(scene_count, edges)
        reference = nx.DiGraph()
        reference.add_nodes_from(range(scene_count))
        reference.add_edges_from(edges)

        path = PathFinder(graph).shortest_path(
            graph.lookup(f"S{source}"), graph.lookup(f"S{destination}")
        )

        if nx.has_path(reference, source, destination):
            assert len(path) - 1 == nx.shortest_path_length(reference, source, destination)
            assert path[0].name == f"S{source}"
            assert path[-1].name == f"S{destination}"
            for a, b in zip(path, path[1:]):
                assert a.transition_to(b.name) is not None
        else:
            assert path == []

    @settings(
        max_examples=100,
        deadline=None,
        suppress_health_check=[HealthCheck.function_scoped_fixture],
    )
    @given(edge_lists)
    def test_repeated_calls_are_identical(self, case):
        scene_count, edges, source, destination = case
        graph = graph_from_edges(scene_count, edges)
        finder = PathFinder(graph)
        start, end = graph.lookup(f"S{source}"), graph.lookup(f"S{destination}")

        first = names(finder.shortest_path(start, end))

        for _ in range(3):
            assert names(finder.shortest_path(start, end)) == first
