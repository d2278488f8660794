"""History oracle: pick a promising (direction, rotation) from past runs."""

from __future__ import annotations

from collections.abc import Mapping

from tile_tour.config.constants import MAX_ITERATIONS
from tile_tour.domain.board import Tile, format_tile
from tile_tour.domain.geometry import Direction, RotationPolicy

StoreRecords = Mapping[str, Mapping[str, Mapping[str, object]]]
"""Results store shape: ``"x,y"`` -> ``"DIRECTION:rotation"`` -> record."""


def record_key(direction: Direction, rotation: RotationPolicy) -> str:
    """Store key for one configuration, e.g. ``"NE:anticlockwise"``."""
    return f"{direction.value}:{rotation.value}"


def all_configurations() -> list[tuple[Direction, RotationPolicy]]:
    """Every configuration in canonical order: N..NW, clockwise first."""
    return [(direction, rotation) for direction in Direction for rotation in RotationPolicy]


def _recorded_iterations(record: Mapping[str, object] | None, fallback: int) -> int:
    if record is None:
        return fallback
    value = record.get("iterations")
    if isinstance(value, bool) or not isinstance(value, int):
        return fallback
    return value


def select_default(
    tile: Tile,
    records: StoreRecords,
    iteration_budget: int = MAX_ITERATIONS,
) -> tuple[Direction, RotationPolicy]:
    """Return the configuration with the lowest recorded iteration count for *tile*.

    Configurations without a record (or without a usable count) rank as if
    they had spent the whole *iteration_budget*. Ties go to the earliest
    configuration in canonical order, so an unknown tile yields
    ``(Direction.N, RotationPolicy.CLOCKWISE)``.
    """
    tile_records = records.get(format_tile(tile), {})
    best = all_configurations()[0]
    best_iterations: int | None = None
    for direction, rotation in all_configurations():
        iterations = _recorded_iterations(
            tile_records.get(record_key(direction, rotation)), iteration_budget
        )
        if best_iterations is None or iterations < best_iterations:
            best = (direction, rotation)
            best_iterations = iterations
    return best


def summarize_store(
    records: StoreRecords,
    iteration_budget: int = MAX_ITERATIONS,
) -> dict[str, object]:
    """Per-tile best configuration plus batch-wide success counts."""
    tiles: dict[str, dict[str, object]] = {}
    for tile_key in sorted(records, key=_tile_sort_key):
        tile_records = records[tile_key]
        best_key: str | None = None
        best_iterations: int | None = None
        for key, record in tile_records.items():
            iterations = _recorded_iterations(record, iteration_budget)
            if best_iterations is None or iterations < best_iterations:
                best_key = key
                best_iterations = iterations
        tiles[tile_key] = {
            "configurations": len(tile_records),
            "best": best_key,
            "best_iterations": best_iterations,
            "solved": any(bool(record.get("success")) for record in tile_records.values()),
        }
    return {
        "tiles": len(tiles),
        "solved": sum(1 for row in tiles.values() if row["solved"]),
        "per_tile": tiles,
    }


def _tile_sort_key(tile_key: str) -> tuple[int, ...]:
    try:
        x, y = (int(part) for part in tile_key.split(","))
    except ValueError:
        return (1 << 30,)
    return (y, x)
