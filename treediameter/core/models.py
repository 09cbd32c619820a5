"""Data models for treediameter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TreeSource(Enum):
    """Where a scenario's tree came from."""

    SAMPLE = "sample"
    RANDOM = "random"
    EDGE_LIST = "edge_list"
    ADJACENCY_MATRIX = "adjacency_matrix"


@dataclass
class Vertex:
    """A tree vertex.

    ``annotation`` belongs to the caller (a renderer may store highlight
    state there); the algorithms never read or write it.
    """

    id: int
    annotation: Any = None


@dataclass(frozen=True)
class Edge:
    """An undirected, weighted edge between two vertex ids."""

    u: int
    v: int
    weight: int = 1

    def to_dict(self) -> dict[str, int]:
        return {"u": self.u, "v": self.v, "weight": self.weight}
