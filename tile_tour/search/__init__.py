"""Search layer: backtracking engine and history oracle."""

from tile_tour.search.engine import RunState, TourResult, run_tour_search, search
from tile_tour.search.oracle import (
    all_configurations,
    record_key,
    select_default,
    summarize_store,
)

__all__ = [
    "RunState",
    "TourResult",
    "all_configurations",
    "record_key",
    "run_tour_search",
    "search",
    "select_default",
    "summarize_store",
]
