"""JSON results store keyed by start tile and configuration.

Layout::

    {
      "x,y": {
        "DIRECTION:rotation": {
          "iterations": int,
          "success": bool,
          "path": ["x,y", ...],
          "time": ISO-8601 UTC timestamp
        }
      }
    }

Writes are merge-on-write: the file is re-read, one key is replaced and the
whole document is rewritten, so entries for other tiles and keys survive.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from tile_tour.domain.board import format_tile
from tile_tour.search.engine import TourResult

ResultsStore = dict[str, dict[str, dict[str, object]]]


def load_store(results_path: Path) -> ResultsStore:
    """Read the results store; a missing file is an empty store."""
    results_path = Path(results_path)
    if not results_path.exists():
        return {}
    with results_path.open(encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"results store must be a JSON object: {results_path}")
    for tile_key, tile_records in payload.items():
        if not isinstance(tile_records, dict):
            raise ValueError(f"results store entry {tile_key!r} must be a JSON object")
        for key, record in tile_records.items():
            if not isinstance(record, dict):
                raise ValueError(
                    f"results store record {tile_key!r}/{key!r} must be a JSON object"
                )
    return payload


def save_store(results_path: Path, store: ResultsStore) -> None:
    """Rewrite the whole results store."""
    results_path = Path(results_path)
    results_path.parent.mkdir(parents=True, exist_ok=True)
    with results_path.open("w", encoding="utf-8") as handle:
        json.dump(store, handle, ensure_ascii=False, indent=2)
        handle.write("\n")


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def build_record(result: TourResult, timestamp: str | None = None) -> dict[str, object]:
    """Serialize one search outcome into a store record."""
    return {
        "iterations": result.iterations,
        "success": result.success,
        "path": [format_tile(tile) for tile in result.path],
        "time": timestamp or utc_timestamp(),
    }


def write_record(
    results_path: Path,
    tile_key: str,
    key: str,
    record: dict[str, object],
) -> ResultsStore:
    """Merge one record into the store on disk and return the merged store."""
    store = load_store(results_path)
    store.setdefault(tile_key, {})[key] = record
    save_store(results_path, store)
    return store


def record_result(
    results_path: Path, result: TourResult, timestamp: str | None = None
) -> ResultsStore:
    """Persist *result* under its tile and configuration keys."""
    return write_record(results_path, result.tile_key, result.key, build_record(result, timestamp))
