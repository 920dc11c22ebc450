from .permutations import Permutation, Permutations, iter_permutations, permutations
from .mapping import UNMAPPED, Mapping
from .search import AutomorphismSearch, compute_automorphisms, search_order

__all__ = [
    "Permutation",
    "Permutations",
    "iter_permutations",
    "permutations",
    "UNMAPPED",
    "Mapping",
    "AutomorphismSearch",
    "compute_automorphisms",
    "search_order",
]
