from .towerbloxx import LEVELS, STATE_SIZE, SCORES, TowerBloxx
from .search import SearchNode, BoundedSearch

__all__ = [
    "LEVELS",
    "STATE_SIZE",
    "SCORES",
    "TowerBloxx",
    "SearchNode",
    "BoundedSearch",
]
