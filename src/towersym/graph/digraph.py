"""Small directed graph with bitset adjacency and degree bookkeeping.

Vertices are labelled 0..n-1. Row ``u`` of the adjacency is an int with
bit ``v`` set iff the arc u->v is present. Undirected edges are stored as
two arcs.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, NamedTuple, Optional

from towersym.errors import InvalidArgumentError, MappingSizeError, VertexOutOfRangeError

if TYPE_CHECKING:
    from towersym.automorphism.mapping import Mapping


class Arc(NamedTuple):
    """Directed arc v -> w, compared by value."""

    v: int
    w: int


class Graph:
    """Directed graph on a fixed number of vertices.

    Keeps both an adjacency matrix (as bitset rows) and an ordered arc list,
    which is the combination the automorphism search needs.
    """

    def __init__(self, n: int):
        if n < 0:
            raise VertexOutOfRangeError(f"Graph size must be non-negative, got {n}")
        self._n = n
        self._out: List[int] = [0] * n
        self._in_deg: List[int] = [0] * n
        self._out_deg: List[int] = [0] * n
        self._arcs: List[Arc] = []

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_arc(self, i: int, j: int) -> None:
        """Add the arc i -> j. Adding an existing arc is a no-op."""
        self._check_vertex(i, "i")
        self._check_vertex(j, "j")
        bit = 1 << j
        if self._out[i] & bit:
            return
        self._out[i] |= bit
        self._out_deg[i] += 1
        self._in_deg[j] += 1
        self._arcs.append(Arc(i, j))

    def add_edge(self, i: int, j: int) -> None:
        """Add an undirected edge as the two arcs i -> j and j -> i."""
        self.add_arc(i, j)
        self.add_arc(j, i)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def size(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    @property
    def arcs(self) -> tuple[Arc, ...]:
        """Arcs in insertion order."""
        return tuple(self._arcs)

    def is_arc_present(self, i: int, j: int) -> bool:
        self._check_vertex(i, "i")
        self._check_vertex(j, "j")
        return bool((self._out[i] >> j) & 1)

    def is_adjacent(self, i: int, j: int) -> bool:
        """Adjacency in the undirected sense (an arc in either direction)."""
        return self.is_arc_present(i, j) or self.is_arc_present(j, i)

    def get_neighbours(self, v: int) -> List[int]:
        """All j with an arc v -> j, ascending."""
        self._check_vertex(v, "v")
        result: List[int] = []
        neigh = self._out[v]
        while neigh:
            lsb = neigh & -neigh
            result.append(lsb.bit_length() - 1)
            neigh ^= lsb
        return result

    def get_in_degree(self, v: int) -> int:
        self._check_vertex(v, "v")
        return self._in_deg[v]

    def get_out_degree(self, v: int) -> int:
        self._check_vertex(v, "v")
        return self._out_deg[v]

    def is_symmetric(self) -> bool:
        """True iff every arc has its reverse, i.e. the graph is undirected."""
        return all((self._out[w] >> v) & 1 for v, w in self._arcs)

    def edges(self) -> List[tuple[int, int]]:
        """Undirected edges (u, v) with u < v, for symmetric graphs."""
        return sorted({(min(v, w), max(v, w)) for v, w in self._arcs if v != w})

    # ------------------------------------------------------------------
    # Automorphism support
    # ------------------------------------------------------------------

    def check_mapping(self, m: "Mapping", touched: Optional[Iterable[int]] = None) -> bool:
        """Check that a (possibly partial) mapping preserves adjacency.

        Only arcs whose endpoints are both mapped are compared, so a partial
        mapping can be rejected before it is completed. If *touched* is
        given, only arcs with at least one endpoint in *touched* are checked.
        """
        if m.size() != self._n:
            raise MappingSizeError(
                f"Mapping is defined on {m.size()} vertices, graph has {self._n}"
            )
        if touched is None:
            arcs: Iterable[Arc] = self._arcs
        else:
            mask = 0
            for t in touched:
                self._check_vertex(t, "touched")
                mask |= 1 << t
            arcs = (a for a in self._arcs if (mask >> a.v) & 1 or (mask >> a.w) & 1)

        for v, w in arcs:
            map_v = m.lookup(v)
            map_w = m.lookup(w)
            if map_v >= 0 and map_w >= 0 and not self.is_adjacent(map_v, map_w):
                return False
        return True

    # ------------------------------------------------------------------

    def _check_vertex(self, i: int, name: str) -> None:
        if i < 0 or i >= self._n:
            raise VertexOutOfRangeError(
                f"Vertex {name}={i} is out of bounds for a graph with {self._n} vertices"
            )

    def __str__(self) -> str:
        lines = [f"Graph with {self._n} vertices", "--START OF GRAPH--"]
        for i in range(self._n):
            for j in range(self._n):
                fwd = self.is_arc_present(i, j)
                back = self.is_arc_present(j, i)
                if fwd and back:
                    if i < j:
                        lines.append(f"{i} -- {j}")
                elif fwd:
                    lines.append(f"{i} -> {j}")
        lines.append("--END OF GRAPH--")
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Graph(n={self._n}, arcs={len(self._arcs)})"


def grid_graph(k: int) -> Graph:
    """k x k four-neighbour mesh; vertex i*k + j sits at row i, column j."""
    if k < 0:
        raise InvalidArgumentError(f"Grid dimension must be non-negative, got {k}")
    g = Graph(k * k)
    for i in range(k):
        for j in range(k):
            v = i * k + j
            if i >= 1:
                g.add_edge(v, (i - 1) * k + j)
            if i < k - 1:
                g.add_edge(v, (i + 1) * k + j)
            if j >= 1:
                g.add_edge(v, i * k + (j - 1))
            if j < k - 1:
                g.add_edge(v, i * k + (j + 1))
    return g
