"""WL-1 color refinement (equitable partition) on a directed Graph."""
from __future__ import annotations

from collections import Counter
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from towersym.graph.digraph import Graph

Partition = Tuple[FrozenSet[int], ...]


def degree_colors(graph: Graph) -> Tuple[int, ...]:
    """Initial coloring: (in-degree, out-degree) packed as in*n + out."""
    n = graph.size()
    return tuple(graph.get_in_degree(v) * n + graph.get_out_degree(v) for v in range(n))


def _refine_colors(neighbours: Sequence[Sequence[int]], colors: Tuple[int, ...]) -> Tuple[int, ...]:
    """One round of WL-1 color refinement.

    The signature of u is its own color plus the multiset of its
    out-neighbours' colors, so a round never merges two classes.
    """
    sigs = []
    for u, neigh in enumerate(neighbours):
        cnt: Counter[int] = Counter(colors[v] for v in neigh)
        sigs.append((colors[u], tuple(sorted(cnt.items()))))

    uniq = {sig: i for i, sig in enumerate(sorted(set(sigs)))}
    return tuple(uniq[sig] for sig in sigs)


def color_classes(colors: Sequence[int]) -> List[List[int]]:
    """Group vertices by color, sorted deterministically by (size, members)."""
    groups: Dict[int, List[int]] = {}
    for v, c in enumerate(colors):
        groups.setdefault(c, []).append(v)
    cls = list(groups.values())
    cls.sort(key=lambda L: (len(L), L))
    return cls


def partition_from_colors(colors: Sequence[int]) -> Partition:
    """Immutable partition snapshot for a coloring."""
    return tuple(frozenset(c) for c in color_classes(colors))


def same_partition(a: Partition, b: Partition) -> bool:
    """Compare two partitions as unordered sets of classes."""
    return set(a) == set(b)


def refinement_steps(graph: Graph, initial: Optional[Tuple[int, ...]] = None) -> List[Partition]:
    """Every partition visited by the refinement, ending at the fixed point.

    The first entry is the initial (degree) partition; each later entry
    refines the one before it.
    """
    n = graph.size()
    neighbours = [graph.get_neighbours(v) for v in range(n)]
    colors = degree_colors(graph) if initial is None else tuple(initial)

    steps = [partition_from_colors(colors)]
    while True:
        colors = _refine_colors(neighbours, colors)
        nxt = partition_from_colors(colors)
        if same_partition(nxt, steps[-1]):
            return steps
        steps.append(nxt)


def equitable_partition(graph: Graph, initial: Optional[Tuple[int, ...]] = None) -> Partition:
    """Iterate WL-1 refinement to a fixed point.

    Parameters
    ----------
    graph : Graph
        The graph to refine. Directed arcs are followed forwards.
    initial : tuple[int, ...], optional
        Starting coloring. Defaults to the (in-degree, out-degree) coloring.

    Returns
    -------
    Partition
        Tuple of disjoint frozensets covering 0..n-1, ordered by
        (size, members).
    """
    return refinement_steps(graph, initial)[-1]
