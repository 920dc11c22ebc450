"""Vertex mappings: bijections (or partial maps) of 0..n-1 onto itself."""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from towersym.errors import (
    InvalidArgumentError,
    LengthMismatchError,
    PermutationIndexError,
    VertexOutOfRangeError,
)

if TYPE_CHECKING:
    from towersym.graph.digraph import Graph

UNMAPPED = -1


class Mapping:
    """A (possibly partial) map of vertex labels 0..n-1 onto 0..n-1.

    Unmapped positions hold ``UNMAPPED``. A complete, bijective mapping is
    a candidate automorphism; whether it is one depends on the graph.

    Mappings are extended with :meth:`clone_and_permute`, which leaves the
    original untouched, so branches of the search never share state.
    """

    __slots__ = ("_targets",)

    def __init__(self, n: int, targets: Optional[Sequence[int]] = None):
        if targets is None:
            self._targets: List[int] = [UNMAPPED] * n
        else:
            if len(targets) != n:
                raise LengthMismatchError(
                    f"Expected {n} targets, got {len(targets)}"
                )
            for t in targets:
                if t != UNMAPPED and not 0 <= t < n:
                    raise VertexOutOfRangeError(
                        f"Target {t} is not valid for a mapping of size {n}"
                    )
            self._targets = list(targets)

    @classmethod
    def identity(cls, n: int) -> "Mapping":
        return cls(n, range(n))

    @classmethod
    def construct(cls, graph: "Graph", labels: Sequence[int], perm: Sequence[int]) -> "Mapping":
        """Partial mapping on *graph* permuting *labels* according to *perm*."""
        m = cls(graph.size())
        m.apply_permutation(labels, perm)
        return m

    # ------------------------------------------------------------------

    def size(self) -> int:
        return len(self._targets)

    def __len__(self) -> int:
        return len(self._targets)

    def lookup(self, v: int) -> int:
        """Image of vertex v, or UNMAPPED."""
        if v < 0 or v >= len(self._targets):
            raise VertexOutOfRangeError(
                f"Index {v} is not valid for a mapping of size {len(self._targets)}"
            )
        return self._targets[v]

    def as_tuple(self) -> Tuple[int, ...]:
        return tuple(self._targets)

    def is_incomplete(self) -> bool:
        """True iff some vertex is still unmapped."""
        return any(t < 0 for t in self._targets)

    def is_valid(self) -> bool:
        """True iff every vertex is mapped and the targets are distinct."""
        n = len(self._targets)
        seen = [False] * n
        for t in self._targets:
            if t < 0 or seen[t]:
                return False
            seen[t] = True
        return True

    # ------------------------------------------------------------------

    def apply_permutation(self, labels: Sequence[int], perm: Sequence[int]) -> None:
        """Map labels[i] onto labels[perm[i]] for every position i, in place.

        Example: labels [3, 5, 7] with perm [1, 0, 2] maps 3 -> 5, 5 -> 3
        and 7 -> 7.
        """
        if len(labels) != len(perm):
            raise LengthMismatchError(
                "Original indices and permutation must have same length "
                f"({len(labels)} != {len(perm)})"
            )
        n = len(self._targets)
        k = len(labels)
        for i in range(k):
            src = labels[i]
            p = perm[i]
            if p < 0 or p >= k:
                raise PermutationIndexError(f"Index {p} in permutation is out of bounds")
            dst = labels[p]
            if src < 0 or src >= n or dst < 0 or dst >= n:
                raise VertexOutOfRangeError(
                    "The original list of indices contains an invalid index"
                )
            self._targets[src] = dst

    def clone_and_permute(self, labels: Sequence[int], perm: Sequence[int]) -> "Mapping":
        """Copy of this mapping extended by :meth:`apply_permutation`."""
        m = Mapping.__new__(Mapping)
        m._targets = list(self._targets)
        m.apply_permutation(labels, perm)
        return m

    def map_state(self, state: int, field_width: int) -> int:
        """Move the field of every vertex ``v`` to position ``lookup(v)``.

        *state* packs one *field_width*-bit field per vertex, vertex v at
        bits [v*field_width, (v+1)*field_width). Raises InvalidArgumentError
        if the mapping is incomplete.
        """
        if self.is_incomplete():
            raise InvalidArgumentError("Cannot map a state with an incomplete mapping")
        mask = (1 << field_width) - 1
        res = 0
        for src, dst in enumerate(self._targets):
            masked = state & mask
            if src >= dst:
                res |= masked >> (field_width * (src - dst))
            else:
                res |= masked << (field_width * (dst - src))
            mask <<= field_width
        return res

    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return self._targets == other._targets

    def __hash__(self) -> int:
        return hash(tuple(self._targets))

    def __repr__(self) -> str:
        return f"Mapping({self._targets!r})"

    def __str__(self) -> str:
        lines = [f"Mapping defined on {len(self._targets)} vertices", "--START OF MAPPING--"]
        for i, t in enumerate(self._targets):
            if t >= 0:
                lines.append(f"{i} to {t}")
        lines.append("--END OF MAPPING--")
        return "\n".join(lines) + "\n"
