"""
Tree data structures and algorithms.

Data Structures:
    - TreeModel: Undirected adjacency list with weighted edges
    - Path: An ordered walk with its accumulated weight
    - DiameterResult: Diametric endpoints, length, weight and path

Algorithms:
    - validation: is_tree / check_tree (edge count, cycles, connectivity)
    - traversal: explicit-stack pre-order walk, farthest vertex
    - diameter: double-sweep find_diameter
    - pathfinding: path_between with weight aggregation

Building:
    - generator: sample_tree(), generate_random_tree()
    - loader: edge-list and adjacency-matrix parsers
"""

from treediameter.core.graph.base import TreeModel
from treediameter.core.graph.diameter import find_diameter
from treediameter.core.graph.generator import generate_random_tree, sample_tree
from treediameter.core.graph.loader import TreeFileFormat, load_tree
from treediameter.core.graph.models import DiameterResult, Path, TreeCheck
from treediameter.core.graph.pathfinding import path_between, path_weight
from treediameter.core.graph.validation import check_tree, is_tree

__all__ = [
    "TreeModel",
    "Path",
    "DiameterResult",
    "TreeCheck",
    "TreeFileFormat",
    "check_tree",
    "is_tree",
    "find_diameter",
    "path_between",
    "path_weight",
    "sample_tree",
    "generate_random_tree",
    "load_tree",
]
