from .digraph import Arc, Graph, grid_graph

__all__ = [
    "Arc",
    "Graph",
    "grid_graph",
]
