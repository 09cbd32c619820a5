"""Tree invariant checks: edge count, acyclicity, connectivity."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from treediameter.core.graph.models import TreeCheck

if TYPE_CHECKING:
    from treediameter.core.graph.base import TreeModel

logger = logging.getLogger(__name__)


def check_tree(model: TreeModel) -> TreeCheck:
    """Validate the tree invariant and report why it fails. O(V + E).

    Checks, in order: non-empty, |E| == |V| - 1, no cycle reachable from
    the first vertex, every vertex reached.
    """
    root = model.first_vertex
    if root is None:
        logger.warning("Graph has no vertices")
        return TreeCheck(is_tree=False, reason="graph has no vertices")

    vertex_count = model.num_vertices
    edge_count = model.num_edges
    if edge_count != vertex_count - 1:
        reason = f"edge count ({edge_count}) != vertex count - 1 ({vertex_count - 1})"
        logger.warning("Not a tree: %s", reason)
        return TreeCheck(is_tree=False, reason=reason)

    visited: set[int] = {root}
    stack: list[tuple[int, int | None]] = [(root, None)]

    while stack:
        current, parent = stack.pop()
        for neighbor, _ in model.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                stack.append((neighbor, current))
            elif neighbor != parent:
                reason = f"cycle through edge ({current}, {neighbor})"
                logger.warning("Not a tree: %s", reason)
                return TreeCheck(is_tree=False, reason=reason, visited=len(visited))

    if len(visited) < vertex_count:
        reason = f"graph is disconnected, visited {len(visited)} of {vertex_count} vertices"
        logger.warning("Not a tree: %s", reason)
        return TreeCheck(is_tree=False, reason=reason, visited=len(visited))

    return TreeCheck(is_tree=True, visited=len(visited))


def is_tree(model: TreeModel) -> bool:
    """True if the model is connected, acyclic and has |V| - 1 edges."""
    return check_tree(model).is_tree
