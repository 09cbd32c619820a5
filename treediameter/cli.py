"""CLI entry point for treediameter."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from treediameter.config import settings
from treediameter.core.exceptions import TreeDiameterError
from treediameter.core.graph.loader import TreeFileFormat, load_tree
from treediameter.core.graph.validation import check_tree
from treediameter.core.scenario import Scenario

app = typer.Typer(
    name="treediameter",
    help="Find the diameter of a weighted tree.",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show debug logging")] = False,
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def resolve_path(path: Path | None, fmt: TreeFileFormat) -> Path:
    """Use the given path, or look up the format's default file name."""
    if path is not None:
        return path
    return settings.resolve_input(settings.default_file(fmt))


def print_scenario(scenario: Scenario) -> None:
    """Print diameter summary and the edge list with diameter edges marked."""
    diameter = scenario.diameter
    model = scenario.model

    if scenario.used_fallback:
        console.print(f"[yellow]Using the sample tree instead: {scenario.fallback_reason}[/]")

    console.print(f"\n[bold]Tree[/] [dim]({scenario.source.value})[/]")
    console.print(f"  Vertices: {model.num_vertices}")
    console.print(f"  Diameter (edges): [cyan]{diameter.length}[/]")
    console.print(f"  Path weight: [cyan]{diameter.weight}[/]")
    path_str = " -> ".join(str(v) for v in diameter.path)
    console.print(f"  Path: [bold green]{path_str}[/]\n")

    on_path = {frozenset(pair) for pair in diameter.path.edge_pairs()}
    console.print("[dim]Edges:[/]")
    for edge in model.edges:
        label = f"{edge.u} - {edge.v} [dim](weight {edge.weight})[/]"
        if frozenset((edge.u, edge.v)) in on_path:
            console.print(f"  [red]{label}[/] [yellow]◀ diameter[/]")
        else:
            console.print(f"  {label}")


def emit(scenario: Scenario, output_json: bool) -> None:
    if output_json:
        print(json.dumps(scenario.to_dict()))
    else:
        print_scenario(scenario)


@app.command()
def sample(
    output_json: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Show the diameter of the built-in 10-vertex sample tree."""
    emit(Scenario.from_sample(), output_json)


@app.command()
def random(
    vertices: Annotated[
        int | None, typer.Option("--vertices", "-n", help="Number of vertices")
    ] = None,
    min_weight: Annotated[
        int | None, typer.Option("--min-weight", help="Smallest edge weight")
    ] = None,
    max_weight: Annotated[
        int | None, typer.Option("--max-weight", help="Largest edge weight")
    ] = None,
    seed: Annotated[int | None, typer.Option("--seed", "-s", help="Random seed")] = None,
    output_json: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Generate a random weighted tree and show its diameter."""
    weight_range = (
        settings.min_weight if min_weight is None else min_weight,
        settings.max_weight if max_weight is None else max_weight,
    )
    try:
        scenario = Scenario.from_random(
            vertex_count=vertices,
            weight_range=weight_range,
            seed=seed,
            vertex_range=(settings.random_min_vertices, settings.random_max_vertices),
        )
    except TreeDiameterError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    emit(scenario, output_json)


@app.command()
def load(
    path: Annotated[Path | None, typer.Argument(help="Tree file to load")] = None,
    fmt: Annotated[
        TreeFileFormat, typer.Option("--format", "-f", help="File format")
    ] = TreeFileFormat.EDGE_LIST,
    strict: Annotated[
        bool, typer.Option("--strict", help="Fail instead of falling back to the sample tree")
    ] = False,
    output_json: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Load a tree from an edge list or adjacency matrix and show its diameter."""
    try:
        scenario = Scenario.from_file(resolve_path(path, fmt), fmt, strict=strict)
    except TreeDiameterError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    emit(scenario, output_json)


@app.command()
def check(
    path: Annotated[Path | None, typer.Argument(help="Tree file to validate")] = None,
    fmt: Annotated[
        TreeFileFormat, typer.Option("--format", "-f", help="File format")
    ] = TreeFileFormat.EDGE_LIST,
) -> None:
    """Check whether a file describes a tree."""
    path = resolve_path(path, fmt)
    try:
        model = load_tree(path, fmt)
    except TreeDiameterError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    result = check_tree(model)
    if result:
        console.print(
            f"[green]{path.name} is a tree[/] "
            f"[dim]({model.num_vertices} vertices, {model.num_edges} edges)[/]"
        )
    else:
        console.print(f"[red]{path.name} is not a tree:[/red] {result.reason}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
