"""Data models for graph operations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Path:
    """An ordered walk through the tree.

    An empty path means "no result" and is not the same thing as a
    single-vertex path of length 0.
    """

    vertices: list[int] = field(default_factory=list)
    weight: int = 0

    @property
    def length(self) -> int:
        """Number of edges, 0 for single-vertex and empty paths."""
        return max(len(self.vertices) - 1, 0)

    @property
    def is_empty(self) -> bool:
        return not self.vertices

    def edge_pairs(self) -> list[tuple[int, int]]:
        """Consecutive (u, v) pairs along the path."""
        return list(zip(self.vertices, self.vertices[1:]))

    def reversed(self) -> Path:
        return Path(vertices=self.vertices[::-1], weight=self.weight)

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.vertices)

    def __bool__(self) -> bool:
        return bool(self.vertices)

    def __repr__(self) -> str:
        ids = " -> ".join(str(v) for v in self.vertices)
        return f"Path({ids}, weight={self.weight})"


@dataclass
class DiameterResult:
    """Diametric endpoints with the hop length and weight of the path between them."""

    endpoint_a: int
    endpoint_b: int
    length: int
    weight: int
    path: Path

    @property
    def endpoints(self) -> tuple[int, int]:
        return (self.endpoint_a, self.endpoint_b)

    def to_dict(self) -> dict[str, Any]:
        return {
            "endpoints": [self.endpoint_a, self.endpoint_b],
            "length": self.length,
            "weight": self.weight,
            "path": list(self.path.vertices),
        }


@dataclass
class TreeCheck:
    """Verdict of the tree validator with the reason for rejection."""

    is_tree: bool
    reason: str | None = None
    visited: int = 0

    def __bool__(self) -> bool:
        return self.is_tree
