"""Integration tests for scenarios, the CLI and the MCP server."""

import asyncio
import dataclasses
import json
import tempfile
from pathlib import Path

import pytest
from typer.testing import CliRunner

from treediameter.cli import app
from treediameter.core.exceptions import LoadError, NotATreeError
from treediameter.core.graph.loader import TreeFileFormat
from treediameter.core.graph.pathfinding import path_between
from treediameter.core.graph.validation import is_tree
from treediameter.core.models import TreeSource
from treediameter.core.scenario import Scenario
from treediameter.mcp.server import call_tool, list_tools

runner = CliRunner()

WEIGHTED_EDGES = """10
0 1
1 2
1 3
2 4 10
2 5
3 6
6 7
7 8
8 9
"""

CYCLE_EDGES = """3
0 1
1 2
2 0
"""

MATRIX = """4
0 2 0 0
2 0 3 5
0 3 0 0
0 5 0 0
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as td:
        yield Path(td)


@pytest.fixture
def edge_file(temp_dir: Path) -> Path:
    path = temp_dir / "tree_edges.txt"
    path.write_text(WEIGHTED_EDGES)
    return path


@pytest.fixture
def cycle_file(temp_dir: Path) -> Path:
    path = temp_dir / "cycle.txt"
    path.write_text(CYCLE_EDGES)
    return path


@pytest.fixture
def matrix_file(temp_dir: Path) -> Path:
    path = temp_dir / "tree_adjacency.txt"
    path.write_text(MATRIX)
    return path


class TestScenario:
    """Tests for building scenarios from each source."""

    def test_sample(self) -> None:
        scenario = Scenario.from_sample()
        assert scenario.source is TreeSource.SAMPLE
        assert scenario.diameter.length == 7
        assert not scenario.used_fallback

    def test_random_is_valid(self) -> None:
        for seed in range(30):
            scenario = Scenario.from_random(seed=seed)
            assert is_tree(scenario.model)
            assert 6 <= scenario.model.num_vertices <= 11
            assert all(1 <= e.weight <= 10 for e in scenario.model.edges)

    def test_random_explicit_size(self) -> None:
        scenario = Scenario.from_random(vertex_count=1, seed=1)
        assert scenario.diameter.length == 0
        assert scenario.diameter.path.vertices == [0]

    def test_random_reproducible(self) -> None:
        assert Scenario.from_random(seed=9).to_dict() == Scenario.from_random(seed=9).to_dict()

    def test_diameter_path_matches_reconstruction(self) -> None:
        for seed in range(30):
            scenario = Scenario.from_random(vertex_count=20, seed=seed)
            diameter = scenario.diameter
            path = path_between(scenario.model, diameter.endpoint_a, diameter.endpoint_b)
            assert path.length == diameter.length
            assert path.weight == diameter.weight
            reverse = path_between(scenario.model, diameter.endpoint_b, diameter.endpoint_a)
            assert reverse == path.reversed()

    def test_from_file(self, edge_file: Path) -> None:
        scenario = Scenario.from_file(edge_file)
        assert scenario.source is TreeSource.EDGE_LIST
        assert scenario.diameter.weight == 16

    def test_from_matrix_file(self, matrix_file: Path) -> None:
        scenario = Scenario.from_file(matrix_file, TreeFileFormat.ADJACENCY_MATRIX)
        assert scenario.source is TreeSource.ADJACENCY_MATRIX
        assert scenario.diameter.weight == 5

    def test_not_a_tree_falls_back(self, cycle_file: Path) -> None:
        scenario = Scenario.from_file(cycle_file)
        assert scenario.source is TreeSource.SAMPLE
        assert scenario.used_fallback
        assert "edge count" in (scenario.fallback_reason or "")
        assert scenario.diameter.length == 7

    def test_scenario_is_frozen(self, cycle_file: Path) -> None:
        scenario = Scenario.from_file(cycle_file)
        with pytest.raises(dataclasses.FrozenInstanceError):
            scenario.fallback_reason = None  # type: ignore[misc]

    def test_random_defaults_when_none(self) -> None:
        scenario = Scenario.from_random(weight_range=None, seed=4, vertex_range=None)
        assert 6 <= scenario.model.num_vertices <= 11
        assert all(1 <= e.weight <= 10 for e in scenario.model.edges)

    def test_unreadable_falls_back(self, temp_dir: Path) -> None:
        scenario = Scenario.from_file(temp_dir / "missing.txt")
        assert scenario.source is TreeSource.SAMPLE
        assert "Cannot read" in (scenario.fallback_reason or "")

    def test_strict_not_a_tree(self, cycle_file: Path) -> None:
        with pytest.raises(NotATreeError):
            Scenario.from_file(cycle_file, strict=True)

    def test_strict_unreadable(self, temp_dir: Path) -> None:
        with pytest.raises(LoadError):
            Scenario.from_file(temp_dir / "missing.txt", strict=True)

    def test_to_dict(self) -> None:
        data = Scenario.from_sample().to_dict()
        assert data["source"] == "sample"
        assert data["vertices"] == list(range(10))
        assert data["edges"][0] == {"u": 0, "v": 1, "weight": 1}
        assert data["diameter"] == {
            "endpoints": [9, 4],
            "length": 7,
            "weight": 7,
            "path": [9, 8, 7, 6, 3, 1, 2, 4],
        }


class TestCli:
    """Tests for the typer CLI."""

    def test_sample_json(self) -> None:
        result = runner.invoke(app, ["sample", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["diameter"]["length"] == 7

    def test_sample_text(self) -> None:
        result = runner.invoke(app, ["sample"])
        assert result.exit_code == 0
        assert "Diameter (edges): 7" in result.stdout
        assert "9 -> 8 -> 7 -> 6 -> 3 -> 1 -> 2 -> 4" in result.stdout
        assert "diameter" in result.stdout

    def test_verbose_flag(self) -> None:
        result = runner.invoke(app, ["-v", "sample", "--json"])
        assert result.exit_code == 0

    def test_random_json(self) -> None:
        result = runner.invoke(app, ["random", "--vertices", "8", "--seed", "3", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data["vertices"]) == 8
        assert len(data["edges"]) == 7
        assert data["diameter"]["length"] == len(data["diameter"]["path"]) - 1

    def test_random_weight_options(self) -> None:
        result = runner.invoke(
            app,
            ["random", "-n", "15", "--min-weight", "4", "--max-weight", "4", "--json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert {e["weight"] for e in data["edges"]} == {4}
        assert data["diameter"]["weight"] == 4 * data["diameter"]["length"]

    def test_random_invalid_size(self) -> None:
        result = runner.invoke(app, ["random", "--vertices", "0"])
        assert result.exit_code == 1
        assert "Error" in result.stdout

    def test_load_edge_list(self, edge_file: Path) -> None:
        result = runner.invoke(app, ["load", str(edge_file), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["source"] == "edge_list"
        assert data["diameter"]["weight"] == 16

    def test_load_matrix(self, matrix_file: Path) -> None:
        result = runner.invoke(app, ["load", str(matrix_file), "--format", "matrix", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["diameter"]["path"] == [2, 1, 0]

    def test_load_fallback(self, cycle_file: Path) -> None:
        result = runner.invoke(app, ["load", str(cycle_file)])
        assert result.exit_code == 0
        assert "Using the sample tree" in result.stdout

    def test_load_strict(self, cycle_file: Path) -> None:
        result = runner.invoke(app, ["load", str(cycle_file), "--strict"])
        assert result.exit_code == 1
        assert "not a tree" in result.stdout

    def test_check_tree(self, edge_file: Path) -> None:
        result = runner.invoke(app, ["check", str(edge_file)])
        assert result.exit_code == 0
        assert "is a tree" in result.stdout

    def test_check_not_tree(self, cycle_file: Path) -> None:
        result = runner.invoke(app, ["check", str(cycle_file)])
        assert result.exit_code == 1
        assert "is not a tree" in result.stdout


class TestMcpServer:
    """Tests for the MCP tool handlers."""

    def test_list_tools(self) -> None:
        tools = asyncio.run(list_tools())
        names = {tool.name for tool in tools}
        assert names == {
            "tree_diameter_sample",
            "tree_diameter_random",
            "tree_diameter_load",
            "tree_path_between",
        }

    def test_sample_tool(self) -> None:
        content = asyncio.run(call_tool("tree_diameter_sample", {}))
        data = json.loads(content[0].text)
        assert data["diameter"]["length"] == 7

    def test_random_tool(self) -> None:
        content = asyncio.run(call_tool("tree_diameter_random", {"vertices": 5, "seed": 2}))
        data = json.loads(content[0].text)
        assert len(data["vertices"]) == 5

    def test_load_tool(self, matrix_file: Path) -> None:
        content = asyncio.run(
            call_tool("tree_diameter_load", {"path": str(matrix_file), "format": "matrix"})
        )
        data = json.loads(content[0].text)
        assert data["source"] == "adjacency_matrix"

    def test_path_between_tool(self, edge_file: Path) -> None:
        content = asyncio.run(
            call_tool("tree_path_between", {"path": str(edge_file), "start": 4, "end": 5})
        )
        data = json.loads(content[0].text)
        assert data["path"] == [4, 2, 5]
        assert data["weight"] == 11

    def test_strict_error_payload(self, cycle_file: Path) -> None:
        content = asyncio.run(
            call_tool("tree_diameter_load", {"path": str(cycle_file), "strict": True})
        )
        assert "error" in json.loads(content[0].text)

    def test_unknown_tool(self) -> None:
        content = asyncio.run(call_tool("nope", {}))
        assert "Unknown tool" in json.loads(content[0].text)["error"]
