"""
towersym: automorphism groups of small graphs, symmetry-reduced packed
states, and a budgeted breadth-first search for TowerBloxx on grids.
"""

from .errors import (
    InvalidArgumentError,
    VertexOutOfRangeError,
    LengthMismatchError,
    PermutationIndexError,
    StateValueError,
    EncodingWidthError,
    MappingSizeError,
)
from .config import SearchConfig

# Graphs and refinement
from .graph.digraph import Arc, Graph, grid_graph
from .wl.equitable_partition import Partition, equitable_partition, color_classes

# Automorphisms
from .automorphism.permutations import Permutations, permutations
from .automorphism.mapping import UNMAPPED, Mapping
from .automorphism.search import AutomorphismSearch, compute_automorphisms

# Packed states
from .state.encoding import MAX_BITS, StateEncoder
from .state.canonical import Canonicalizer

# Game
from .game.towerbloxx import SCORES, TowerBloxx
from .game.search import SearchNode, BoundedSearch

# IO
from .io.graph6 import graph_from_nx, graph_to_nx, g6_to_graph, graph_to_g6

# External tools
from .external.nauty import dreadnaut_available, aut_size

__all__ = [
    # Errors
    "InvalidArgumentError",
    "VertexOutOfRangeError",
    "LengthMismatchError",
    "PermutationIndexError",
    "StateValueError",
    "EncodingWidthError",
    "MappingSizeError",
    # Config
    "SearchConfig",
    # Graphs
    "Arc",
    "Graph",
    "grid_graph",
    "Partition",
    "equitable_partition",
    "color_classes",
    # Automorphisms
    "Permutations",
    "permutations",
    "UNMAPPED",
    "Mapping",
    "AutomorphismSearch",
    "compute_automorphisms",
    # States
    "MAX_BITS",
    "StateEncoder",
    "Canonicalizer",
    # Game
    "SCORES",
    "TowerBloxx",
    "SearchNode",
    "BoundedSearch",
    # IO
    "graph_from_nx",
    "graph_to_nx",
    "g6_to_graph",
    "graph_to_g6",
    # External
    "dreadnaut_available",
    "aut_size",
]
