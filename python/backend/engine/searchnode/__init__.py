from backend.engine.searchnode.config import (
    DEFAULT_SETTINGS,
    DIM_THRESHOLD,
    LC_WEIGHT,
    SIZE_THRESHOLD,
    HeuristicSettings,
)
from backend.engine.searchnode.node import SearchNode

__all__ = [
    "DEFAULT_SETTINGS",
    "DIM_THRESHOLD",
    "LC_WEIGHT",
    "SIZE_THRESHOLD",
    "HeuristicSettings",
    "SearchNode",
]
