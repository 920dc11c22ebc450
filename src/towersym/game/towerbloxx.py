"""TowerBloxx on a k x k grid, with states packed two bits per cell.

Every cell holds a building of level 0..3. A cell can be upgraded to level
L only while it has neighbours of every level below L; when a cell below
level 3 has no level-0 neighbour left, one of its built-up neighbours may be
demolished back to level 0. States are kept in canonical form so rotations
and reflections of a board are never searched twice.
"""
from __future__ import annotations

from typing import Dict, List, Tuple

from towersym.automorphism.mapping import Mapping
from towersym.automorphism.search import AutomorphismSearch
from towersym.graph.digraph import Graph, grid_graph
from towersym.state.canonical import Canonicalizer
from towersym.state.encoding import StateEncoder

LEVELS = 4
STATE_SIZE = 2
SCORES: Tuple[int, ...] = (205, 966, 2677, 5738)


class TowerBloxx:
    """Move generation and scoring for TowerBloxx on a k x k grid."""

    def __init__(self, k: int):
        self.dim = k
        self.graph: Graph = grid_graph(k)
        self.encoder = StateEncoder(self.graph, STATE_SIZE)
        self.automorphisms: List[Mapping] = AutomorphismSearch(self.graph).compute_automorphisms()
        self.canonicalizer = Canonicalizer(self.automorphisms, STATE_SIZE)
        self._neighbours: List[Tuple[int, ...]] = [
            tuple(self.graph.get_neighbours(v)) for v in range(self.graph.size())
        ]

    def reduce(self, state: int) -> int:
        """Canonical representative of *state* under the grid's symmetries."""
        return self.canonicalizer.reduce(state)

    def get_hist(self, state: int, v: int) -> List[int]:
        """hist[L] = number of neighbours of v currently at level L."""
        hist = [0] * LEVELS
        for w in self._neighbours[v]:
            hist[self.encoder.get_state(state, w)] += 1
        return hist

    def expand(self, state: int) -> List[int]:
        """Distinct canonical states reachable from *state* in one move.

        Order is first-seen order while scanning vertices 0..n-1.
        """
        enc = self.encoder
        result: Dict[int, None] = {}
        for v in range(self.graph.size()):
            val = enc.get_state(state, v)
            hist = self.get_hist(state, v)

            if val == 0 and hist[0] > 0:
                result[self.reduce(enc.change_state(state, v, 1))] = None
            if val < 2 and hist[0] > 0 and hist[1] > 0:
                result[self.reduce(enc.change_state(state, v, 2))] = None
            if val < 3 and hist[0] > 0 and hist[1] > 0 and hist[2] > 0:
                result[self.reduce(enc.change_state(state, v, 3))] = None
            if val < 3 and hist[0] == 0:
                # no level-0 neighbour left: make room by demolishing one
                for w in self._neighbours[v]:
                    if enc.get_state(state, w) > 0:
                        result[self.reduce(enc.change_state(state, w, 0))] = None
        return list(result)

    def compute_score(self, state: int) -> int:
        return sum(SCORES[self.encoder.get_state(state, v)] for v in range(self.graph.size()))

    def to_grid(self, state: int) -> str:
        return self.encoder.to_grid(state, self.dim)
