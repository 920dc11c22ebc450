"""Automorphism group of a small graph via WL refinement + backtracking.

The vertices are first split into classes by equitable-partition refinement
(an over-approximation of the orbits). Every automorphism maps each class
onto itself, so candidates are assembled class by class from permutations
of the class members, and a candidate is dropped as soon as one of its
mapped arcs is not preserved.

When refinement cannot split a large class (e.g. vertex-transitive graphs
such as tori), every permutation of that class is tried. The cost is the
product of ``|class|!`` over all classes.
"""
from __future__ import annotations

import logging
from typing import List, Tuple

from towersym.automorphism.mapping import Mapping
from towersym.automorphism.permutations import Permutations
from towersym.graph.digraph import Graph
from towersym.wl.equitable_partition import Partition, equitable_partition

logger = logging.getLogger(__name__)


def search_order(graph: Graph, partition: Partition) -> List[List[int]]:
    """Order the classes so each one is checked against as many arcs as possible.

    Greedy: the next class is the one with the most arcs into classes already
    placed; ties go to the class with the smallest member. A class with no
    arcs into the placed ones prunes nothing, so it is postponed.
    """
    remaining = [sorted(c) for c in partition]
    placed = 0
    order: List[List[int]] = []
    while remaining:
        def links(cls: List[int]) -> int:
            members = 0
            for v in cls:
                members |= 1 << v
            return sum(
                1
                for v, w in graph.arcs
                if ((members >> v) & 1 and (placed >> w) & 1)
                or ((members >> w) & 1 and (placed >> v) & 1)
            )

        best = max(remaining, key=lambda cls: (links(cls), -cls[0]))
        remaining.remove(best)
        order.append(best)
        for v in best:
            placed |= 1 << v
    return order


class AutomorphismSearch:
    """Compute the automorphisms of a Graph.

    The equitable partition and the class search order are computed on
    construction; :meth:`compute_automorphisms` runs the permutation search.
    """

    def __init__(self, graph: Graph):
        self.graph = graph
        self._partition: Partition = equitable_partition(graph)
        self._order: List[List[int]] = search_order(graph, self._partition)
        self.candidates_checked = 0
        logger.debug(
            "[refine] %d vertices -> %d classes (sizes %s)",
            graph.size(),
            len(self._partition),
            [len(c) for c in self._partition],
        )

    @property
    def partition(self) -> Partition:
        """Candidate orbit classes as produced by the refinement."""
        return self._partition

    @property
    def order(self) -> List[List[int]]:
        """The classes in the order the search visits them."""
        return [list(c) for c in self._order]

    def search_space(self) -> int:
        """Upper bound on the number of candidates: prod |class|!."""
        total = 1
        for cls in self._partition:
            total *= len(Permutations(len(cls)))
        return total

    def compute_automorphisms(self) -> List[Mapping]:
        """Return every automorphism found, identity first.

        Explicit worklist of (partial mapping, index of next class). A
        partial mapping is only pushed if all arcs between mapped vertices
        are preserved, so invalid branches are cut before later classes are
        enumerated. ``candidates_checked`` counts the extensions tested.
        """
        graph = self.graph
        classes = self._order
        perms = [Permutations(len(c)) for c in classes]

        self.candidates_checked = 0
        result: List[Mapping] = []
        work: List[Tuple[Mapping, int]] = [(Mapping(graph.size()), 0)]
        while work:
            m, idx = work.pop()
            if idx == len(classes):
                result.append(m)
                continue

            labels = classes[idx]
            children = []
            for p in perms[idx]:
                ext = m.clone_and_permute(labels, p)
                self.candidates_checked += 1
                if graph.check_mapping(ext, touched=labels):
                    children.append((ext, idx + 1))
            # reversed so the first permutation (identity) is expanded first
            work.extend(reversed(children))

        logger.info(
            "[automorphisms] found %d, checked %d candidates (search space %d)",
            len(result),
            self.candidates_checked,
            self.search_space(),
        )
        return result

    def describe_partition(self) -> str:
        lines = [
            "Potential Automorphism Partitioning",
            "--START OF CANDIDATE AUTOMORPHISM PARTITIONS--",
        ]
        for index, cls in enumerate(self._partition, start=1):
            lines.append(f"Group {index} : {sorted(cls)}")
        lines.append("--END OF CANDIDATE AUTOMORPHISM PARTITIONS--")
        return "\n".join(lines) + "\n"


def compute_automorphisms(graph: Graph) -> List[Mapping]:
    """Convenience wrapper: ``AutomorphismSearch(graph).compute_automorphisms()``."""
    return AutomorphismSearch(graph).compute_automorphisms()
