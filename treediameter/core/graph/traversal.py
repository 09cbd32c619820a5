"""Depth-first walks over a tree using an explicit stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from treediameter.core.exceptions import NotATreeError, VertexNotFoundError

if TYPE_CHECKING:
    from treediameter.core.graph.base import TreeModel


def walk_preorder(model: TreeModel, root: int) -> Iterator[tuple[int, int, int]]:
    """Yield (vertex, depth, weight) in pre-order from root.

    Children are visited in adjacency insertion order. Depth counts edges
    from root; weight sums edge weights along the same route. Raises
    NotATreeError if a cycle is reachable from root.
    """
    if not model.has_vertex(root):
        raise VertexNotFoundError(f"Vertex {root} not found")

    visited: set[int] = {root}
    stack: list[tuple[int, int | None, int, int]] = [(root, None, 0, 0)]
    while stack:
        vertex, parent, depth, weight = stack.pop()
        yield vertex, depth, weight

        children = []
        for neighbor, edge_weight in model.neighbors(vertex):
            if neighbor == parent:
                continue
            if neighbor in visited:
                raise NotATreeError(f"Cycle through edge ({vertex}, {neighbor})")
            visited.add(neighbor)
            children.append((neighbor, vertex, depth + 1, weight + edge_weight))
        # Reversed so the first neighbour is popped first
        stack.extend(reversed(children))


def farthest_vertex(model: TreeModel, root: int) -> tuple[int, int, int]:
    """Find the vertex farthest from root by hop count. O(V).

    Returns (vertex, depth, weight). Among equally deep vertices the first
    reached in pre-order wins; weight is accumulated along the hop-longest
    route, not maximized on its own.
    """
    best = (root, 0, 0)
    for vertex, depth, weight in walk_preorder(model, root):
        if depth > best[1]:
            best = (vertex, depth, weight)
    return best
