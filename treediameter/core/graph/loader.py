"""Load a TreeModel from edge-list or adjacency-matrix text files."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from treediameter.core.exceptions import LoadError, TreeDiameterError
from treediameter.core.graph.base import TreeModel

logger = logging.getLogger(__name__)


class TreeFileFormat(Enum):
    """Supported textual tree formats."""

    EDGE_LIST = "edge-list"
    ADJACENCY_MATRIX = "matrix"


def parse_edge_list(text: str) -> TreeModel:
    """Parse an edge list.

    Format::

        <vertex count>
        <u> <v> [weight]
        ...

    Blank lines and lines with fewer than two fields are skipped; the
    weight defaults to 1.
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise LoadError("Edge list is empty")

    model = _model_with_vertices(_parse_count(lines[0]))
    edge_count = 0
    for line_no, line in enumerate(lines[1:], start=2):
        parts = line.split()
        if len(parts) < 2:
            continue
        try:
            u, v = int(parts[0]), int(parts[1])
            weight = int(parts[2]) if len(parts) >= 3 else 1
            model.add_edge(u, v, weight)
        except (ValueError, TreeDiameterError) as e:
            raise LoadError(f"Line {line_no}: {e}") from e
        edge_count += 1

    logger.info("Loaded %d edges for %d vertices", edge_count, model.num_vertices)
    return model


def parse_adjacency_matrix(text: str) -> TreeModel:
    """Parse an adjacency matrix.

    Format: the vertex count n, then n rows of n integers. A positive
    entry above the diagonal at (i, j) is the weight of edge (i, j); the
    lower triangle is ignored.
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise LoadError("Adjacency matrix is empty")

    vertex_count = _parse_count(lines[0])
    rows = lines[1:]
    if len(rows) < vertex_count:
        raise LoadError(f"Expected {vertex_count} matrix rows, found {len(rows)}")

    model = _model_with_vertices(vertex_count)
    edge_count = 0
    for i in range(vertex_count):
        parts = rows[i].split()
        if len(parts) < vertex_count:
            raise LoadError(f"Row {i} has {len(parts)} entries, expected {vertex_count}")
        for j in range(i + 1, vertex_count):
            try:
                weight = int(parts[j])
            except ValueError as e:
                raise LoadError(f"Row {i}, column {j}: {e}") from e
            if weight > 0:
                model.add_edge(i, j, weight)
                edge_count += 1

    logger.info("Loaded %d edges for %d vertices", edge_count, model.num_vertices)
    return model


def load_tree(path: Path, fmt: TreeFileFormat = TreeFileFormat.EDGE_LIST) -> TreeModel:
    """Read and parse a tree file. Raises LoadError on any failure."""
    logger.info("Loading %s from %s", fmt.value, path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Cannot read {path}: {e}") from e

    if fmt is TreeFileFormat.ADJACENCY_MATRIX:
        return parse_adjacency_matrix(text)
    return parse_edge_list(text)


def _parse_count(token: str) -> int:
    try:
        count = int(token)
    except ValueError as e:
        raise LoadError(f"Invalid vertex count {token!r}") from e
    if count < 0:
        raise LoadError(f"Negative vertex count {count}")
    return count


def _model_with_vertices(count: int) -> TreeModel:
    model = TreeModel()
    for i in range(count):
        model.add_vertex(i)
    return model
