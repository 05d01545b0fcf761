"""screengraph CLI - Main entry point.

Loads a screen graph from ``package.module:attribute`` and inspects it
without driving any application.

Exit codes:
    0: Success
    1: No route between the requested scenes
    2: Graph could not be loaded or built
"""

import importlib
import sys
from pathlib import Path

import click

from .. import __version__
from ..base_exceptions import ScreenGraphException
from ..export import GraphSnapshot
from ..navigation import PathFinder
from ..screen_graph import ScreenGraph

# Exit codes
EXIT_SUCCESS = 0
EXIT_NO_ROUTE = 1
EXIT_GRAPH_ERROR = 2


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for CLI.

    Args:
        verbose: Enable debug logging
    """
    from ..logging import setup_logging as setup_structured_logging

    setup_structured_logging(
        level="DEBUG" if verbose else "WARNING",
        structured=False,
        add_caller_info=verbose,
    )


def load_graph(target: str) -> ScreenGraph:
    """Import a ScreenGraph, or a zero-argument factory returning one, and build it.

    Args:
        target: ``package.module:attribute``

    Returns:
        The built graph

    Raises:
        ScreenGraphException: If the graph's declarations are invalid
        click.ClickException: If the target cannot be imported, is not a graph,
            or fails while being created or built
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise click.ClickException(f"Target must look like 'package.module:attribute', got {target!r}")

    if str(Path.cwd()) not in sys.path:
        sys.path.insert(0, str(Path.cwd()))

    try:
        module = importlib.import_module(module_name)
    except Exception as e:
        raise click.ClickException(f"Cannot import {module_name}: {type(e).__name__}: {e}") from e

    try:
        obj = getattr(module, attribute)
    except AttributeError as e:
        raise click.ClickException(f"{module_name} has no attribute {attribute!r}") from e

    graph = obj
    if not isinstance(obj, ScreenGraph) and callable(obj):
        try:
            graph = obj()
        except Exception as e:
            raise click.ClickException(f"Calling {target} failed: {type(e).__name__}: {e}") from e
    if not isinstance(graph, ScreenGraph):
        raise click.ClickException(f"{target} is not a ScreenGraph or a factory returning one")

    try:
        graph.build()
    except ScreenGraphException:
        raise
    except Exception as e:
        raise click.ClickException(f"Building {target} failed: {type(e).__name__}: {e}") from e
    return graph


class GraphCommandError(click.ClickException):
    exit_code = EXIT_GRAPH_ERROR


def _load_or_exit(target: str) -> ScreenGraph:
    try:
        return load_graph(target)
    except ScreenGraphException as e:
        raise GraphCommandError(str(e)) from e
    except click.ClickException as e:
        raise GraphCommandError(e.message) from e


@click.group()
@click.version_option(version=__version__, prog_name="screengraph")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """screengraph CLI - Inspect UI navigation graphs.

    TARGET arguments name a ScreenGraph as package.module:attribute.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging(verbose)


@main.command()
@click.argument("target")
def describe(target: str) -> None:
    """List scenes and their exits.

    TARGET: package.module:attribute naming the graph
    """
    graph = _load_or_exit(target)
    snapshot = GraphSnapshot.from_graph(graph)

    click.echo(f"Scenes: {len(snapshot.scenes)}")
    click.echo(f"Transitions: {len(snapshot.edges)}")
    click.echo(f"Initial scene: {snapshot.initial_scene or 'N/A'}")

    adjacency = snapshot.adjacency()
    for scene in snapshot.scenes:
        flags = []
        if scene.initial:
            flags.append("initial")
        if scene.back_capable:
            flags.append("back")
        if scene.dismiss_on_use:
            flags.append("dismiss-on-use")
        suffix = f" ({', '.join(flags)})" if flags else ""
        click.echo(f"\n{scene.name}{suffix}")
        for destination in adjacency[scene.name]:
            click.echo(f"  -> {destination}")


@main.command()
@click.argument("target")
@click.argument("source")
@click.argument("destination")
def route(target: str, source: str, destination: str) -> None:
    """Show the shortest route between two scenes.

    TARGET: package.module:attribute naming the graph
    """
    graph = _load_or_exit(target)

    for name in (source, destination):
        if graph.lookup(name) is None:
            raise GraphCommandError(f"Unknown scene: {name}")

    path = PathFinder(graph).shortest_path(graph.lookup(source), graph.lookup(destination))
    if not path:
        click.echo(f"No route from {source} to {destination}", err=True)
        sys.exit(EXIT_NO_ROUTE)

    click.echo(" -> ".join(node.name for node in path))
    click.echo(f"Hops: {len(path) - 1}")


@main.command()
@click.argument("target")
@click.option(
    "--format",
    "-f",
    "format_type",
    type=click.Choice(["json", "dot"]),
    default="json",
    help="Output format",
)
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write to file instead of stdout")
def export(target: str, format_type: str, output: str | None) -> None:
    """Export the graph structure.

    TARGET: package.module:attribute naming the graph
    """
    graph = _load_or_exit(target)
    snapshot = GraphSnapshot.from_graph(graph)
    text = snapshot.to_json() if format_type == "json" else snapshot.to_dot()

    if output:
        Path(output).write_text(text, encoding="utf-8")
        click.echo(f"Wrote {format_type} to {output}")
    else:
        click.echo(text)


if __name__ == "__main__":
    main()
