"""Treediameter custom exceptions."""


class TreeDiameterError(Exception):
    """Base exception for treediameter errors."""


class InvalidEdgeError(TreeDiameterError):
    """Edge is a self loop, references an unknown vertex, or has a negative weight."""


class DuplicateVertexError(TreeDiameterError):
    """Vertex id already present in the model."""


class VertexNotFoundError(TreeDiameterError):
    """Vertex not present in the model."""


class EmptyTreeError(TreeDiameterError):
    """Operation needs at least one vertex."""


class NotATreeError(TreeDiameterError):
    """Graph is not connected, has a cycle, or has the wrong edge count."""


class LoadError(TreeDiameterError):
    """Error reading or parsing a tree file."""


class GeneratorError(TreeDiameterError):
    """Invalid arguments for the random tree generator."""
