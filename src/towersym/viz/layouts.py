from __future__ import annotations

import networkx as nx

from towersym.graph.digraph import Graph
from towersym.io.graph6 import graph_to_nx


def grid_layout(dim: int) -> dict:
    """
    Positions for a dim x dim grid graph: vertex i*dim + j is drawn at
    column j, row i (row 0 on top).
    """
    return {i * dim + j: (float(j), float(-i)) for i in range(dim) for j in range(dim)}


def base_layout(g: Graph, dim: int | None = None, seed: int = 7):
    """
    Grid positions when *dim* is given, otherwise a spring layout of *g*.
    """
    if dim is not None and dim * dim == g.size():
        return grid_layout(dim)
    return nx.spring_layout(graph_to_nx(g), seed=seed, iterations=300)
