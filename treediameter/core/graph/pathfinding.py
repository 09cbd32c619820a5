"""Path reconstruction between two vertices of a tree."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from treediameter.core.exceptions import InvalidEdgeError, VertexNotFoundError
from treediameter.core.graph.models import Path

if TYPE_CHECKING:
    from treediameter.core.graph.base import TreeModel

logger = logging.getLogger(__name__)


def path_between(model: TreeModel, start: int, end: int) -> Path:
    """Find the path from start to end using DFS. O(V + E).

    Returns an empty Path when end cannot be reached, which only happens
    if the model was never validated as a tree.
    """
    for vertex_id in (start, end):
        if not model.has_vertex(vertex_id):
            raise VertexNotFoundError(f"Vertex {vertex_id} not found")
    if start == end:
        return Path(vertices=[start], weight=0)

    stack: list[int] = [start]
    parent: dict[int, tuple[int, int]] = {}
    visited: set[int] = {start}

    while stack:
        current = stack.pop()
        if current == end:
            return _reconstruct(start, end, parent)
        for neighbor, weight in model.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                parent[neighbor] = (current, weight)
                stack.append(neighbor)

    logger.error("No path found: %s -> %s", start, end)
    return Path()


def path_weight(model: TreeModel, vertices: Sequence[int]) -> int:
    """Sum the edge weights between consecutive vertices.

    Raises InvalidEdgeError when a consecutive pair is not adjacent.
    """
    total = 0
    for u, v in zip(vertices, vertices[1:]):
        weight = model.edge_weight(u, v)
        if weight is None:
            raise InvalidEdgeError(f"Vertices {u} and {v} are not adjacent")
        total += weight
    return total


def _reconstruct(start: int, end: int, parent: dict[int, tuple[int, int]]) -> Path:
    """Reconstruct path from DFS parent map."""
    vertices = []
    total = 0
    current = end

    while current != start:
        vertices.append(current)
        prev, weight = parent[current]
        total += weight
        current = prev

    vertices.append(start)
    vertices.reverse()
    return Path(vertices=vertices, weight=total)
