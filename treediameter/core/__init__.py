"""
Core module: data models, exceptions, and scenarios.

This module provides the foundational types:

Models (models.py):
    - Vertex: An integer id plus a caller-owned annotation
    - Edge: An undirected weighted pair of vertex ids
    - TreeSource: Where a scenario's tree came from

Exceptions (exceptions.py):
    - TreeDiameterError: Base exception for all treediameter errors
    - InvalidEdgeError: Self loop, unknown endpoint or negative weight
    - NotATreeError: Graph fails the tree invariant
    - LoadError: Tree file could not be read or parsed

Scenario (scenario.py):
    - Scenario: A validated tree with its diameter (sample, random or file)

Algorithms live in treediameter.core.graph.
"""

from treediameter.core.exceptions import (
    DuplicateVertexError,
    EmptyTreeError,
    GeneratorError,
    InvalidEdgeError,
    LoadError,
    NotATreeError,
    TreeDiameterError,
    VertexNotFoundError,
)
from treediameter.core.models import Edge, TreeSource, Vertex
from treediameter.core.scenario import Scenario

__all__ = [
    # Models
    "Vertex",
    "Edge",
    "TreeSource",
    # Exceptions
    "TreeDiameterError",
    "InvalidEdgeError",
    "DuplicateVertexError",
    "VertexNotFoundError",
    "EmptyTreeError",
    "NotATreeError",
    "LoadError",
    "GeneratorError",
    # Scenario
    "Scenario",
]
