"""Budgeted breadth-first search over canonical TowerBloxx states."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from towersym.errors import InvalidArgumentError
from towersym.game.towerbloxx import TowerBloxx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchNode:
    """
    A canonical state as first discovered by the search.

    parent is the canonical state it was generated from (None for the start).
    """

    state: int
    depth: int
    score: int
    parent: Optional[int]


class BoundedSearch:
    """Breadth-first search that keeps track of the best-scoring states.

    States are discovered layer by layer. A state is recorded (with its
    score and parent) the first time it is generated and never again.
    Ties between equally scored states are broken by discovery order: the
    best path leads to the first best state found, which is also one of the
    shallowest.
    """

    def __init__(self, game: TowerBloxx):
        self.game = game
        self._nodes: Dict[int, SearchNode] = {}
        self._best: List[int] = []
        self.best_score: Optional[int] = None
        self.expanded = 0
        self._start: Optional[int] = None

    def _discover(self, state: int, depth: int, parent: Optional[int]) -> None:
        score = self.game.compute_score(state)
        self._nodes[state] = SearchNode(state=state, depth=depth, score=score, parent=parent)
        if self.best_score is None or score > self.best_score:
            self.best_score = score
            self._best = [state]
        elif score == self.best_score:
            self._best.append(state)

    def run_bfs(self, bound: int, start: int = 0) -> int:
        """Expand at most *bound* states starting from *start*.

        Returns the best score seen. Any previous results are discarded.
        """
        if bound < 0:
            raise InvalidArgumentError(f"bound must be non-negative, got {bound}")

        self._nodes = {}
        self._best = []
        self.best_score = None
        self.expanded = 0

        root = self.game.reduce(start)
        self._start = root
        self._discover(root, 0, None)

        frontier = [root]
        depth = 0
        while frontier and self.expanded < bound:
            next_frontier: List[int] = []
            for state in frontier:
                if self.expanded >= bound:
                    break
                self.expanded += 1
                for succ in self.game.expand(state):
                    if succ in self._nodes:
                        continue
                    self._discover(succ, depth + 1, state)
                    next_frontier.append(succ)
            depth += 1
            logger.debug(
                "[bfs depth=%d] expanded=%d visited=%d frontier=%d best=%s",
                depth,
                self.expanded,
                len(self._nodes),
                len(next_frontier),
                self.best_score,
            )
            frontier = next_frontier

        logger.info(
            "[bfs] expanded %d states, visited %d, best score %s (%d states)",
            self.expanded,
            len(self._nodes),
            self.best_score,
            len(self._best),
        )
        return self.best_score

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def _require_run(self) -> None:
        if self._start is None:
            raise RuntimeError("run_bfs() has not been called")

    @property
    def visited_count(self) -> int:
        return len(self._nodes)

    @property
    def best_count(self) -> int:
        self._require_run()
        return len(self._best)

    def node(self, state: int) -> SearchNode:
        return self._nodes[state]

    def visited_states(self) -> List[int]:
        """Every canonical state discovered, in discovery order."""
        return list(self._nodes)

    def best_path_states(self) -> List[int]:
        """Canonical states from the start to the first best state."""
        self._require_run()
        path = []
        cur: Optional[int] = self._best[0]
        while cur is not None:
            path.append(cur)
            cur = self._nodes[cur].parent
        path.reverse()
        return path

    def best_path(self) -> List[str]:
        """Grid renderings along :meth:`best_path_states`."""
        return [self.game.to_grid(s) for s in self.best_path_states()]

    def best_state_values(self) -> List[int]:
        """All best states, in discovery order."""
        self._require_run()
        return list(self._best)

    def best_states(self) -> List[str]:
        return [self.game.to_grid(s) for s in self.best_state_values()]
