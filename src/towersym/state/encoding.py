"""Pack the discrete state of every vertex into one integer.

Vertex v owns bits [v*state_size, (v+1)*state_size). The total width is
capped at 63 bits so a packed state always fits a signed 64-bit word.
"""
from __future__ import annotations

from typing import List, Sequence

from towersym.errors import (
    EncodingWidthError,
    LengthMismatchError,
    StateValueError,
    VertexOutOfRangeError,
)
from towersym.graph.digraph import Graph

MAX_BITS = 63


class StateEncoder:
    """Encode and decode per-vertex states of a graph as packed ints."""

    def __init__(self, graph: Graph, state_size: int):
        n = graph.size()
        if state_size <= 0:
            raise EncodingWidthError(f"state_size must be positive, got {state_size}")
        if state_size * n > MAX_BITS:
            raise EncodingWidthError(
                f"Cannot encode {n} vertices with {state_size} bits each "
                f"in {MAX_BITS} bits"
            )

        self.state_size = state_size
        self.n = n
        base = (1 << state_size) - 1
        self._basic_masks: List[int] = [base << (state_size * v) for v in range(n)]
        self._neighbour_masks: List[int] = []
        for v in range(n):
            mask = 0
            for w in graph.get_neighbours(v):
                mask |= self._basic_masks[w]
            self._neighbour_masks.append(mask)

    def _check_vertex(self, v: int) -> None:
        if v < 0 or v >= self.n:
            raise VertexOutOfRangeError(
                f"Vertex {v} is out of bounds for an encoder on {self.n} vertices"
            )

    def get_state_mask(self, v: int) -> int:
        """Mask of the (unshifted) bits that hold the state of v."""
        self._check_vertex(v)
        return self._basic_masks[v]

    def get_neighbour_mask(self, v: int) -> int:
        """Mask of the bits of all neighbours of v."""
        self._check_vertex(v)
        return self._neighbour_masks[v]

    def get_neighbours(self, states: int, v: int) -> int:
        """*states* with every field except those of v's neighbours zeroed."""
        return states & self.get_neighbour_mask(v)

    def get_state(self, states: int, v: int) -> int:
        self._check_vertex(v)
        return (states & self._basic_masks[v]) >> (v * self.state_size)

    def change_state(self, states: int, v: int, val: int) -> int:
        """Return *states* with the field of v replaced by *val*."""
        self._check_vertex(v)
        if val < 0 or val >= 1 << self.state_size:
            raise StateValueError(
                f"Value {val} for vertex {v} does not fit in {self.state_size} bits"
            )
        return (states & ~self._basic_masks[v]) | (val << (v * self.state_size))

    def encode(self, values: Sequence[int]) -> int:
        """Pack one value per vertex, vertex 0 in the lowest bits."""
        if len(values) != self.n:
            raise LengthMismatchError(f"Expected {self.n} values, got {len(values)}")
        states = 0
        for v, val in enumerate(values):
            states = self.change_state(states, v, val)
        return states

    def decode(self, states: int) -> List[int]:
        return [self.get_state(states, v) for v in range(self.n)]

    def to_grid(self, states: int, dim: int) -> str:
        """Render a dim x dim grid graph state, row-major, one line per row."""
        rows = []
        for i in range(dim):
            rows.append("".join(str(self.get_state(states, i * dim + j)) for j in range(dim)))
        return "".join(row + "\n" for row in rows)
