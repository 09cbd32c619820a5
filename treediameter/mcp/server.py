"""MCP server implementation for treediameter."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from treediameter.config import settings
from treediameter.core.exceptions import TreeDiameterError
from treediameter.core.graph.loader import TreeFileFormat
from treediameter.core.graph.pathfinding import path_between
from treediameter.core.scenario import Scenario

logger = logging.getLogger(__name__)

server = Server("treediameter")

_FORMAT_SCHEMA = {
    "type": "string",
    "enum": [f.value for f in TreeFileFormat],
    "description": "File format (default: edge-list)",
    "default": TreeFileFormat.EDGE_LIST.value,
}


@server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="tree_diameter_sample",
            description=(
                "Compute the diameter of the built-in 10-vertex sample tree. "
                "Returns vertices, edges, diametric endpoints, hop length, weight and path."
            ),
            inputSchema={"type": "object", "properties": {}},
        ),
        Tool(
            name="tree_diameter_random",
            description=(
                "Generate a random weighted tree and compute its diameter. "
                "Pass a seed for a reproducible tree."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "vertices": {
                        "type": "integer",
                        "description": "Number of vertices (default: random in 6..11)",
                    },
                    "min_weight": {"type": "integer", "description": "Smallest edge weight"},
                    "max_weight": {"type": "integer", "description": "Largest edge weight"},
                    "seed": {"type": "integer", "description": "Random seed"},
                },
            },
        ),
        Tool(
            name="tree_diameter_load",
            description=(
                "Load a tree from an edge-list or adjacency-matrix file and compute its "
                "diameter. Invalid files fall back to the sample tree unless strict is set."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {"type": "string", "description": "Path to the tree file"},
                    "format": _FORMAT_SCHEMA,
                    "strict": {
                        "type": "boolean",
                        "description": "Report an error instead of falling back",
                        "default": False,
                    },
                },
                "required": ["path"],
            },
        ),
        Tool(
            name="tree_path_between",
            description="Find the path and its weight between two vertices of a tree file.",
            inputSchema={
                "type": "object",
                "properties": {
                    "path": {"type": "string", "description": "Path to the tree file"},
                    "format": _FORMAT_SCHEMA,
                    "start": {"type": "integer", "description": "Start vertex id"},
                    "end": {"type": "integer", "description": "End vertex id"},
                },
                "required": ["path", "start", "end"],
            },
        ),
    ]


@server.call_tool()  # type: ignore[untyped-decorator]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "tree_diameter_sample":
            result = Scenario.from_sample().to_dict()
        elif name == "tree_diameter_random":
            result = _handle_random(arguments)
        elif name == "tree_diameter_load":
            result = _handle_load(
                arguments["path"],
                arguments.get("format", TreeFileFormat.EDGE_LIST.value),
                arguments.get("strict", False),
            )
        elif name == "tree_path_between":
            result = _handle_path_between(
                arguments["path"],
                arguments.get("format", TreeFileFormat.EDGE_LIST.value),
                arguments["start"],
                arguments["end"],
            )
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except (TreeDiameterError, KeyError, ValueError) as e:
        logger.warning("Tool %s failed: %s", name, e)
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]


def _handle_random(arguments: dict[str, Any]) -> dict[str, Any]:
    """Handle tree_diameter_random tool."""
    scenario = Scenario.from_random(
        vertex_count=arguments.get("vertices"),
        weight_range=(
            arguments.get("min_weight", settings.min_weight),
            arguments.get("max_weight", settings.max_weight),
        ),
        seed=arguments.get("seed"),
        vertex_range=(settings.random_min_vertices, settings.random_max_vertices),
    )
    return scenario.to_dict()


def _handle_load(path: str, fmt: str, strict: bool) -> dict[str, Any]:
    """Handle tree_diameter_load tool."""
    return Scenario.from_file(Path(path), TreeFileFormat(fmt), strict=strict).to_dict()


def _handle_path_between(path: str, fmt: str, start: int, end: int) -> dict[str, Any]:
    """Handle tree_path_between tool."""
    scenario = Scenario.from_file(Path(path), TreeFileFormat(fmt), strict=True)
    found = path_between(scenario.model, start, end)
    return {
        "start": start,
        "end": end,
        "path": list(found.vertices),
        "length": found.length,
        "weight": found.weight,
    }


async def serve() -> None:
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
