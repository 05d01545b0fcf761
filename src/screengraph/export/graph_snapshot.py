"""Pydantic snapshot of a screen graph's structure.

The snapshot captures scenes and transitions as currently declared, including
any live back-transitions. It can be rendered as JSON or as Graphviz DOT.
"""

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from ..screen_graph import ScreenGraph


class EdgeSnapshot(BaseModel):
    """A transition between two scenes."""

    source: str
    destination: str
    waits_for: str | None = None
    back: bool = False


class SceneSnapshot(BaseModel):
    """A scene and its flags."""

    name: str
    initial: bool = False
    back_capable: bool = False
    dismiss_on_use: bool = False
    return_scene: str | None = None
    exists_when: str | None = None


class GraphSnapshot(BaseModel):
    """Structure of a built screen graph."""

    initial_scene: str | None = None
    scenes: list[SceneSnapshot] = Field(default_factory=list)
    edges: list[EdgeSnapshot] = Field(default_factory=list)

    @classmethod
    def from_graph(cls, graph: "ScreenGraph") -> "GraphSnapshot":
        """Build the graph if needed and capture its structure."""
        graph.build()

        scenes = []
        edges = []
        for node in graph:
            scenes.append(
                SceneSnapshot(
                    name=node.name,
                    initial=node.name == graph.initial_scene_name,
                    back_capable=node.has_back,
                    dismiss_on_use=node.dismiss_on_use,
                    return_scene=node.return_node_name,
                    exists_when=_describe(node.exists_when),
                )
            )
            for transition in node.transitions.values():
                edges.append(
                    EdgeSnapshot(
                        source=node.name,
                        destination=transition.destination_name,
                        waits_for=_describe(transition.wait_for),
                        back=transition.is_back,
                    )
                )

        return cls(initial_scene=graph.initial_scene_name, scenes=scenes, edges=edges)

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(indent=indent)

    def to_dot(self, name: str = "screengraph") -> str:
        """Render as a Graphviz digraph."""
        lines = [f"digraph {_quote(name)} {{"]
        for scene in self.scenes:
            attrs = []
            if scene.initial:
                attrs.append("shape=doublecircle")
            if scene.dismiss_on_use:
                attrs.append("style=dashed")
            suffix = f" [{', '.join(attrs)}]" if attrs else ""
            lines.append(f"  {_quote(scene.name)}{suffix};")
        for edge in self.edges:
            suffix = " [style=dotted, label=\"back\"]" if edge.back else ""
            lines.append(f"  {_quote(edge.source)} -> {_quote(edge.destination)}{suffix};")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def adjacency(self) -> dict[str, list[str]]:
        """Destination names per scene, in transition registration order."""
        result: dict[str, list[str]] = {scene.name: [] for scene in self.scenes}
        for edge in self.edges:
            result[edge.source].append(edge.destination)
        return result


def _describe(element: object | None) -> str | None:
    if element is None:
        return None
    return getattr(element, "description", None) or repr(element)


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
