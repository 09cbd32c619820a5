"""Built-in trees: the fixed sample and random trees."""

from __future__ import annotations

import logging
import random

from treediameter.core.exceptions import GeneratorError
from treediameter.core.graph.base import TreeModel

logger = logging.getLogger(__name__)

SAMPLE_VERTEX_COUNT = 10
SAMPLE_EDGES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 1),
    (1, 2, 1),
    (1, 3, 1),
    (2, 4, 1),
    (2, 5, 1),
    (3, 6, 1),
    (6, 7, 1),
    (7, 8, 1),
    (8, 9, 1),
)


def sample_tree() -> TreeModel:
    """Build the 10-vertex demo tree: a fork at 1-2 and a chain 3-6-7-8-9."""
    model = TreeModel()
    for i in range(SAMPLE_VERTEX_COUNT):
        model.add_vertex(i)
    for u, v, weight in SAMPLE_EDGES:
        model.add_edge(u, v, weight)
    logger.debug("Sample tree: %d vertices, %d edges", model.num_vertices, model.num_edges)
    return model


def generate_random_tree(
    vertex_count: int,
    weight_range: tuple[int, int] = (1, 1),
    rng: random.Random | None = None,
) -> TreeModel:
    """Grow a random tree by attaching each new vertex to a connected one.

    Vertex i (for i >= 1) is joined to a uniformly chosen vertex among
    0..i-1 with a weight drawn uniformly from the inclusive weight_range,
    so the result always has n - 1 edges and is connected.
    """
    if vertex_count < 1:
        raise GeneratorError(f"vertex_count must be at least 1, got {vertex_count}")
    low, high = weight_range
    if low < 0 or high < low:
        raise GeneratorError(f"Invalid weight range {weight_range}")

    rng = rng or random.Random()
    model = TreeModel()
    model.add_vertex(0)
    connected = [0]

    for i in range(1, vertex_count):
        model.add_vertex(i)
        connect_to = rng.choice(connected)
        weight = rng.randint(low, high)
        model.add_edge(connect_to, i, weight)
        connected.append(i)
        logger.debug("Added edge %d - %d (weight %d)", connect_to, i, weight)

    return model


def random_vertex_count(
    rng: random.Random | None = None, min_count: int = 6, max_count: int = 11
) -> int:
    """Pick a vertex count uniformly from the inclusive range."""
    if min_count < 1 or max_count < min_count:
        raise GeneratorError(f"Invalid vertex count range ({min_count}, {max_count})")
    return (rng or random.Random()).randint(min_count, max_count)
