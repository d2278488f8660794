"""Configuration dataclasses for tour search runs."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from tile_tour.config.constants import MAX_ITERATIONS, MAX_ITERATIONS_ENV, RESULTS_FILE

__all__ = [
    "SearchConfig",
    "iteration_budget_from_env",
]


def iteration_budget_from_env(environ: Mapping[str, str] | None = None) -> int:
    """Return the iteration budget from the environment, or the built-in default."""
    env = os.environ if environ is None else environ
    raw = env.get(MAX_ITERATIONS_ENV)
    if raw is None or not raw.strip():
        return MAX_ITERATIONS
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{MAX_ITERATIONS_ENV} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class SearchConfig:
    """Runtime knobs shared by every tile run of a batch."""

    iteration_budget: int = MAX_ITERATIONS
    results_path: Path = Path(RESULTS_FILE)
    out_dir: Path = Path("data")
    render: bool = False
    write_run_log: bool = True
    theme: str = "default"

    def __post_init__(self) -> None:
        if isinstance(self.iteration_budget, bool) or not isinstance(self.iteration_budget, int):
            raise ValueError("iteration_budget must be an integer")
        if self.iteration_budget < 1:
            raise ValueError("iteration_budget must be >= 1")
