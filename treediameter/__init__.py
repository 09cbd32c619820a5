"""
treediameter: longest paths in weighted trees.

treediameter validates that a graph is a tree, finds its diameter with a
double depth-first sweep, and reconstructs the diametric path:
- Build trees by hand, from the built-in sample, at random, or from files
- Reject graphs with cycles, missing edges or disconnected parts
- Report the diameter's endpoints, hop length, summed weight and path

Usage:
    from treediameter.core.graph import find_diameter, is_tree, sample_tree

    model = sample_tree()
    if is_tree(model):
        result = find_diameter(model)
        print(result.path)
"""

__version__ = "0.1.0"
