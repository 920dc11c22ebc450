from __future__ import annotations

from typing import Sequence, Set

from towersym.automorphism.mapping import Mapping


class Canonicalizer:
    """Orbit representatives of packed states under a group of mappings.

    ``reduce(state)`` is the smallest packed value any mapping in the group
    sends *state* to. Since the identity is in the group,
    ``reduce(state) <= state``.
    """

    def __init__(self, group: Sequence[Mapping], state_size: int):
        self.group = tuple(group)
        self.state_size = state_size

    def reduce(self, state: int) -> int:
        lowest = state
        for m in self.group:
            image = m.map_state(state, self.state_size)
            if image < lowest:
                lowest = image
        return lowest

    def orbit(self, state: int) -> Set[int]:
        """Every image of *state* under the group."""
        return {m.map_state(state, self.state_size) for m in self.group}

    def is_canonical(self, state: int) -> bool:
        return self.reduce(state) == state
