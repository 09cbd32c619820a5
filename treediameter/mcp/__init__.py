"""
MCP server for treediameter.

Exposes tree diameter tools to LLMs via the Model Context Protocol.

Tools:
    - tree_diameter_sample: Diameter of the built-in sample tree
    - tree_diameter_random: Diameter of a freshly generated random tree
    - tree_diameter_load: Diameter of a tree read from a file
    - tree_path_between: Path and weight between two vertices

Usage:
    Install: pip install treediameter
    Run: mcp-server-treediameter
"""

import asyncio

from treediameter.mcp.server import serve as _serve


def serve() -> None:
    """Entry point for the MCP server."""
    asyncio.run(_serve())


__all__ = ["serve"]
