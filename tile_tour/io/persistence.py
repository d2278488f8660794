"""Parquet persistence helpers for the per-run tour log."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from tile_tour.config.constants import RUN_LOG_SCHEMA_VERSION
from tile_tour.domain.geometry import Direction, RotationPolicy
from tile_tour.io.schemas import RUN_LOG_SCHEMA
from tile_tour.search.engine import TourResult


def new_run_columns() -> dict[str, list[object]]:
    """Return empty column buffers matching RUN_LOG_SCHEMA."""
    return {name: [] for name in RUN_LOG_SCHEMA.names}


def append_run_row(
    run_columns: dict[str, list[object]],
    result: TourResult,
    suggestion: tuple[Direction, RotationPolicy],
    timestamp: str,
) -> None:
    """Buffer one run-log row for *result*."""
    suggested_direction, suggested_rotation = suggestion
    row: dict[str, object] = {
        "schema_version": RUN_LOG_SCHEMA_VERSION,
        "tile": result.tile_key,
        "direction": result.direction.value,
        "rotation": result.rotation.value,
        "suggested_direction": suggested_direction.value,
        "suggested_rotation": suggested_rotation.value,
        "iterations": result.iterations,
        "max_length": result.max_length,
        "path_length": len(result.path),
        "success": result.success,
        "exhausted": result.exhausted,
        "time": timestamp,
    }
    for name, value in row.items():
        run_columns[name].append(value)


def flush_run_columns(
    run_columns: dict[str, list[object]],
    run_log_path: Path,
    run_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write buffered run rows to Parquet and clear in-memory buffers."""
    if not run_columns["tile"]:
        return run_writer
    run_table = pa.Table.from_pydict(run_columns, schema=RUN_LOG_SCHEMA)
    if run_writer is None:
        run_log_path.parent.mkdir(parents=True, exist_ok=True)
        run_writer = pq.ParquetWriter(run_log_path, RUN_LOG_SCHEMA)
    run_writer.write_table(run_table)
    for values in run_columns.values():
        values.clear()
    return run_writer
