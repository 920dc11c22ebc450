from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from towersym.errors import InvalidArgumentError


@dataclass(frozen=True)
class SearchConfig:
    """
    Parameters of one TowerBloxx run.

    dim:         grid dimension k (the board is k x k)
    budget:      number of states the BFS may expand; None -> 3*k*k
    save_prefix: if set, the best path is drawn to {save_prefix}_step{i}.png
    """

    dim: int = 3
    budget: Optional[int] = None
    save_prefix: Optional[str] = None

    def __post_init__(self) -> None:
        if self.dim < 1:
            raise InvalidArgumentError(f"dim must be at least 1, got {self.dim}")
        if self.budget is not None and self.budget < 0:
            raise InvalidArgumentError(f"budget must be non-negative, got {self.budget}")

    @property
    def resolved_budget(self) -> int:
        return 3 * self.dim * self.dim if self.budget is None else self.budget
