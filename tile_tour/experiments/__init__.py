"""Experiments layer: per-tile runs, batch orchestration and the CLI."""

from tile_tour.experiments.runner import (
    BatchResult,
    TileRun,
    resolve_configuration,
    run_batch,
    run_tile,
)

__all__ = [
    "BatchResult",
    "TileRun",
    "resolve_configuration",
    "run_batch",
    "run_tile",
]
