"""Tree diameter by double sweep."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from treediameter.core.exceptions import EmptyTreeError, NotATreeError, TreeDiameterError
from treediameter.core.graph.models import DiameterResult
from treediameter.core.graph.pathfinding import path_between
from treediameter.core.graph.traversal import farthest_vertex
from treediameter.core.graph.validation import check_tree

if TYPE_CHECKING:
    from treediameter.core.graph.base import TreeModel

logger = logging.getLogger(__name__)


def find_diameter(model: TreeModel) -> DiameterResult:
    """Find the longest path (by edge count) in a tree. O(V).

    The vertex farthest from any root is an endpoint of some diameter, so a
    second sweep from it reaches the other endpoint. The weight reported is
    the sum along that path. Raises NotATreeError for cyclic or
    disconnected models.
    """
    root = model.first_vertex
    if root is None:
        raise EmptyTreeError("Cannot compute the diameter of an empty tree")

    check = check_tree(model)
    if not check:
        raise NotATreeError(f"Graph is not a tree: {check.reason}")

    v1, _, _ = farthest_vertex(model, root)
    v2, length, weight = farthest_vertex(model, v1)
    path = path_between(model, v1, v2)

    if path.length != length or path.weight != weight:
        raise TreeDiameterError(
            f"Diameter sweep ({length} edges, weight {weight}) disagrees with {path!r}"
        )

    logger.debug("Diameter %s -> %s: length=%d weight=%d", v1, v2, path.length, path.weight)
    return DiameterResult(
        endpoint_a=v1,
        endpoint_b=v2,
        length=path.length,
        weight=path.weight,
        path=path,
    )
