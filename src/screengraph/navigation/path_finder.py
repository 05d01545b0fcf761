"""Shortest-path routing over the live transition graph."""

from collections import deque
from typing import TYPE_CHECKING

from ..model import ScreenGraphNode

if TYPE_CHECKING:
    from ..screen_graph import ScreenGraph


class PathFinder:
    """Find fewest-hop directed paths between scenes.

    Breadth-first search over each node's ``transitions`` map. Among equally
    short paths the one using earlier-registered transitions wins, so routes
    are deterministic for a given graph. Nothing is cached: back-transitions
    change the edge set between calls.
    """

    def __init__(self, graph: "ScreenGraph") -> None:
        self.graph = graph

    def shortest_path(
        self, source: ScreenGraphNode, destination: ScreenGraphNode
    ) -> list[ScreenGraphNode]:
        """Compute the shortest path from source to destination.

        Args:
            source: Starting scene
            destination: Target scene

        Returns:
            Scenes along the path including both ends, ``[source]`` when they
            are the same scene, or an empty list when unreachable
        """
        if source.name == destination.name:
            return [source]

        parents: dict[str, ScreenGraphNode | None] = {source.name: None}
        queue = deque([source])

        while queue:
            node = queue.popleft()
            for destination_name in node.transitions:
                if destination_name in parents:
                    continue
                next_node = self.graph.lookup(destination_name)
                if next_node is None:
                    continue
                parents[destination_name] = node
                if destination_name == destination.name:
                    return self._trace(parents, next_node)
                queue.append(next_node)

        return []

    def hop_count(self, source: ScreenGraphNode, destination: ScreenGraphNode) -> int | None:
        """Number of transitions on the shortest path, or None if unreachable."""
        path = self.shortest_path(source, destination)
        return len(path) - 1 if path else None

    @staticmethod
    def _trace(
        parents: dict[str, ScreenGraphNode | None], end: ScreenGraphNode
    ) -> list[ScreenGraphNode]:
        path = [end]
        parent = parents[end.name]
        while parent is not None:
            path.append(parent)
            parent = parents[parent.name]
        path.reverse()
        return path
