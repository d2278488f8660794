"""Per-tile and batch orchestration of tour searches.

Each tile run reads the results store, asks the history oracle for a
suggestion, searches, and merges its record back into the store. Batches run
tiles strictly one after another; a failing tile is reported and skipped.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

import pyarrow.parquet as pq

from tile_tour.config.types import SearchConfig
from tile_tour.domain.board import Tile, format_tile
from tile_tour.domain.geometry import Direction, RotationPolicy
from tile_tour.io.paths import run_log_path, tour_figure_path
from tile_tour.io.persistence import append_run_row, flush_run_columns, new_run_columns
from tile_tour.io.store import load_store, record_result, utc_timestamp
from tile_tour.search.engine import TourResult, run_tour_search
from tile_tour.search.oracle import record_key, select_default
from tile_tour.viz.grid import format_visit_grid
from tile_tour.viz.render import render_tour
from tile_tour.viz.theme import get_theme


@dataclass(frozen=True)
class TileRun:
    """One finished tile run together with the oracle's suggestion."""

    result: TourResult
    suggestion: tuple[Direction, RotationPolicy]
    timestamp: str
    figure_path: Path | None = None


@dataclass
class BatchResult:
    """All tile runs of a batch plus the tiles that failed."""

    runs: list[TileRun] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    def summary(self) -> dict[str, object]:
        results = [run.result for run in self.runs]
        return {
            "tiles_attempted": len(self.runs) + len(self.failed),
            "succeeded": sum(1 for r in results if r.success),
            "exhausted": sum(1 for r in results if r.exhausted and not r.success),
            "dead_ends": sum(1 for r in results if not r.exhausted and not r.success),
            "failed": list(self.failed),
            "total_iterations": sum(r.iterations for r in results),
        }


def resolve_configuration(
    direction: Direction | None,
    rotation: RotationPolicy | None,
    suggestion: tuple[Direction, RotationPolicy],
) -> tuple[Direction, RotationPolicy]:
    """Pick the configuration to run.

    The oracle's suggestion applies only when neither value is given; a
    partial specification fills the missing value with N / clockwise.
    """
    if direction is None and rotation is None:
        return suggestion
    return (
        direction if direction is not None else Direction.N,
        rotation if rotation is not None else RotationPolicy.CLOCKWISE,
    )


def _format_path(path: Iterable[Tile]) -> str:
    return " ".join(f"({x},{y})" for x, y in path)


def run_tile(
    tile: Tile,
    config: SearchConfig,
    direction: Direction | None = None,
    rotation: RotationPolicy | None = None,
) -> TileRun:
    """Search from *tile* and merge the outcome into the results store.

    Store I/O errors propagate to the caller.
    """
    store = load_store(config.results_path)
    suggestion = select_default(tile, store, config.iteration_budget)
    chosen_direction, chosen_rotation = resolve_configuration(direction, rotation, suggestion)
    print(
        f"Tile {format_tile(tile)}: direction={chosen_direction.value} "
        f"rotation={chosen_rotation.value} "
        f"(oracle suggests {record_key(*suggestion)})"
    )

    result = run_tour_search(tile, chosen_direction, chosen_rotation, config.iteration_budget)
    if result.exhausted and not result.success:
        print(
            f"  Iteration budget of {config.iteration_budget} exhausted at path length "
            f"{len(result.path)}: {_format_path(result.path)}"
        )

    timestamp = utc_timestamp()
    record_result(config.results_path, result, timestamp)

    print(
        f"  Finished after {result.iterations} iterations: success={result.success} "
        f"length={len(result.path)} max_length={result.max_length}"
    )
    print(f"  Path: {_format_path(result.path)}")
    print(format_visit_grid(result.path))

    figure_path = None
    if config.render:
        figure_path = render_tour(
            result.path,
            tour_figure_path(config.out_dir, tile, result.key),
            title=f"{result.tile_key} {result.key} ({len(result.path)} tiles)",
            theme=get_theme(config.theme),
        )
    return TileRun(
        result=result, suggestion=suggestion, timestamp=timestamp, figure_path=figure_path
    )


def run_batch(
    tiles: Iterable[Tile],
    config: SearchConfig,
    direction: Direction | None = None,
    rotation: RotationPolicy | None = None,
) -> BatchResult:
    """Run *tiles* sequentially; one tile's failure does not stop the batch."""
    batch = BatchResult()
    run_columns = new_run_columns()
    run_writer: pq.ParquetWriter | None = None
    log_path = run_log_path(config.out_dir)

    try:
        for tile in tiles:
            try:
                tile_run = run_tile(tile, config, direction=direction, rotation=rotation)
            except Exception as exc:
                print(f"Tile {format_tile(tile)} failed: {exc}", file=sys.stderr)
                batch.failed.append(format_tile(tile))
                continue
            batch.runs.append(tile_run)
            if config.write_run_log:
                append_run_row(
                    run_columns, tile_run.result, tile_run.suggestion, tile_run.timestamp
                )
                run_writer = flush_run_columns(run_columns, log_path, run_writer)
    finally:
        if run_writer is not None:
            run_writer.close()

    return batch
