"""Tuning knobs for the search-node heuristic."""

from __future__ import annotations

from dataclasses import dataclass

# Linear conflicts are only counted on boards with fewer cells than this.
SIZE_THRESHOLD = 20
# The conflict bonus is weighted only when both dimensions are within this.
DIM_THRESHOLD = 4
LC_WEIGHT = 2


@dataclass(frozen=True)
class HeuristicSettings:
    """Gates for the linear-conflict term.

    ``size_threshold`` decides whether conflicts are counted at all;
    ``dimension_threshold`` decides whether they are weighted. The two
    are independent: a 5×3 board counts conflicts and then multiplies
    them by zero.
    """

    size_threshold: int = SIZE_THRESHOLD
    dimension_threshold: int = DIM_THRESHOLD
    weight: int = LC_WEIGHT

    def counts_conflicts(self, rows: int, cols: int) -> bool:
        return rows * cols < self.size_threshold

    def conflict_weight(self, rows: int, cols: int) -> int:
        if rows <= self.dimension_threshold and cols <= self.dimension_threshold:
            return self.weight
        return 0


DEFAULT_SETTINGS = HeuristicSettings()
