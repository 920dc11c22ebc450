"""Lazy enumeration of all permutations of 0..k-1."""
from __future__ import annotations

import math
from typing import Iterator, List, Tuple

from towersym.errors import InvalidArgumentError

Permutation = Tuple[int, ...]


def iter_permutations(k: int) -> Iterator[Permutation]:
    """Yield every permutation of 0..k-1 in lexicographic order.

    Depth-first backtracking over an explicit stack: position ``len(prefix)``
    is filled with the next unused index, and the choice is undone when the
    position has no candidates left. Only O(k) state is alive at any time.
    """
    if k < 0:
        raise InvalidArgumentError(f"Permutation size must be non-negative, got {k}")
    if k == 0:
        yield ()
        return

    used = [False] * k
    prefix: List[int] = []
    # next_choice[d] = smallest index still to try at depth d
    next_choice = [0]

    while next_choice:
        depth = len(next_choice) - 1
        i = next_choice[depth]
        while i < k and used[i]:
            i += 1

        if i == k:
            # exhausted this position: backtrack
            next_choice.pop()
            if prefix:
                used[prefix.pop()] = False
            continue

        next_choice[depth] = i + 1
        used[i] = True
        prefix.append(i)

        if len(prefix) == k:
            yield tuple(prefix)
            used[prefix.pop()] = False
        else:
            next_choice.append(0)


class Permutations:
    """Restartable iterable over the k! permutations of 0..k-1.

    Each ``iter()`` starts a fresh enumeration, so the same object can be
    walked once per candidate mapping without sharing state.
    """

    __slots__ = ("k",)

    def __init__(self, k: int):
        if k < 0:
            raise InvalidArgumentError(f"Permutation size must be non-negative, got {k}")
        self.k = k

    def __iter__(self) -> Iterator[Permutation]:
        return iter_permutations(self.k)

    def __len__(self) -> int:
        return math.factorial(self.k)

    def __repr__(self) -> str:
        return f"Permutations({self.k})"


def permutations(k: int) -> Permutations:
    """All permutations of 0..k-1 as a lazy, restartable sequence."""
    return Permutations(k)
