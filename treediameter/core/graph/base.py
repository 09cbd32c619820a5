"""Core TreeModel class with adjacency list representation."""

from __future__ import annotations

from treediameter.core.exceptions import (
    DuplicateVertexError,
    InvalidEdgeError,
    VertexNotFoundError,
)
from treediameter.core.models import Edge, Vertex


class TreeModel:
    """Undirected weighted graph meant to hold a tree.

    The tree invariant is not enforced while building; run
    ``is_tree`` before handing the model to the diameter or path code.
    """

    __slots__ = ("_adj", "_vertices", "_edges")

    def __init__(self) -> None:
        self._adj: dict[int, list[tuple[int, Edge]]] = {}
        self._vertices: dict[int, Vertex] = {}
        self._edges: list[Edge] = []

    def add_vertex(self, vertex_id: int) -> Vertex:
        """Add an isolated vertex. O(1)."""
        if vertex_id in self._vertices:
            raise DuplicateVertexError(f"Vertex {vertex_id} already exists")
        vertex = Vertex(id=vertex_id)
        self._vertices[vertex_id] = vertex
        self._adj[vertex_id] = []
        return vertex

    def add_edge(self, u: int, v: int, weight: int = 1) -> Edge | None:
        """Add an undirected edge. O(deg(u)).

        Returns the new edge, or None when u and v are already joined.
        """
        if u == v:
            raise InvalidEdgeError(f"Self loop on vertex {u}")
        if u not in self._vertices or v not in self._vertices:
            missing = u if u not in self._vertices else v
            raise InvalidEdgeError(f"Edge ({u}, {v}) references unknown vertex {missing}")
        if weight < 0:
            raise InvalidEdgeError(f"Edge ({u}, {v}) has negative weight {weight}")
        if self.has_edge(u, v):
            return None

        edge = Edge(u=u, v=v, weight=weight)
        self._edges.append(edge)
        self._adj[u].append((v, edge))
        self._adj[v].append((u, edge))
        return edge

    def has_vertex(self, vertex_id: int) -> bool:
        return vertex_id in self._vertices

    def has_edge(self, u: int, v: int) -> bool:
        """Check adjacency in either orientation. O(deg(u))."""
        return any(nid == v for nid, _ in self._adj.get(u, []))

    def get_vertex(self, vertex_id: int) -> Vertex:
        """Get vertex by id. O(1)."""
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise VertexNotFoundError(f"Vertex {vertex_id} not found") from None

    def neighbors(self, vertex_id: int) -> list[tuple[int, int]]:
        """Get (neighbour id, weight) pairs in insertion order. O(degree)."""
        if vertex_id not in self._adj:
            raise VertexNotFoundError(f"Vertex {vertex_id} not found")
        return [(nid, edge.weight) for nid, edge in self._adj[vertex_id]]

    def edge_weight(self, u: int, v: int) -> int | None:
        """Weight of edge (u, v), or None when not adjacent."""
        for nid, edge in self._adj.get(u, []):
            if nid == v:
                return edge.weight
        return None

    def degree(self, vertex_id: int) -> int:
        """Number of incident edges. O(1)."""
        return len(self._adj.get(vertex_id, []))

    @property
    def first_vertex(self) -> int | None:
        """Id of the first inserted vertex."""
        return next(iter(self._vertices), None)

    @property
    def num_vertices(self) -> int:
        return len(self._vertices)

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    @property
    def vertices(self) -> dict[int, Vertex]:
        return self._vertices

    @property
    def edges(self) -> list[Edge]:
        return self._edges

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def __repr__(self) -> str:
        return f"TreeModel(vertices={self.num_vertices}, edges={self.num_edges})"
