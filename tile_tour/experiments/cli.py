"""CLI entrypoint for tour searches.

This module owns CLI argument parsing and mode dispatch. All domain logic
lives in the extracted modules:

- ``tile_tour.domain``              – geometry, board model, move selection
- ``tile_tour.search``              – backtracking engine and history oracle
- ``tile_tour.io``                  – JSON results store and Parquet run log
- ``tile_tour.experiments.runner``  – per-tile and batch orchestration
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from tile_tour.config.constants import RESULTS_FILE
from tile_tour.config.types import SearchConfig, iteration_budget_from_env
from tile_tour.domain.board import Tile, all_tiles, parse_tile
from tile_tour.domain.geometry import (
    Direction,
    RotationPolicy,
    parse_direction,
    parse_rotation,
)
from tile_tour.experiments.runner import run_batch
from tile_tour.io.paths import resolve_within_base
from tile_tour.io.store import load_store
from tile_tour.search.oracle import summarize_store
from tile_tour.viz.theme import get_theme

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_tile_selector(raw_tile: str | None) -> list[Tile]:
    """Parse ``x,y`` / ``all`` / absent into the list of start tiles."""
    if raw_tile is None or raw_tile.strip().lower() in {"", "all"}:
        return list(all_tiles())
    return [parse_tile(raw_tile)]


def _parse_optional_direction(raw_direction: str | None) -> Direction | None:
    return None if raw_direction is None else parse_direction(raw_direction)


def _parse_optional_rotation(raw_rotation: str | None) -> RotationPolicy | None:
    return None if raw_rotation is None else parse_rotation(raw_rotation)


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_optional_str(raw: object, key: str) -> str | None:
    """Coerce raw value to str, keeping None; rejects booleans."""
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    """CLI > file > default resolution for boolean flags."""
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    """CLI > file > default resolution for integer values."""
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_optional_str(
    cli_val: str | None, key: str, file_cfg: dict[str, object], default: str | None
) -> str | None:
    """CLI > file > default resolution for optional string values."""
    return _coerce_optional_str(_get_val(cli_val, key, file_cfg, default), key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Search 10x10 tile tours by backtracking")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument(
        "--tile",
        type=str,
        default=None,
        help="Start tile as x,y or 'all' (default: all 100 tiles)",
    )
    parser.add_argument(
        "--direction",
        type=str,
        default=None,
        help="Start direction: " + ", ".join(d.value for d in Direction),
    )
    parser.add_argument(
        "--rotation",
        type=str,
        default=None,
        help="Move-sorting rotation: " + ", ".join(r.value for r in RotationPolicy),
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=None,
        help="Iteration budget per tile (default: $MAX_ITERATIONS or 1000000)",
    )
    parser.add_argument("--results", type=Path, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Trusted directory that --results and --out-dir must stay within (default: .)",
    )
    parser.add_argument(
        "--render",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Save a PNG of every tour under <out-dir>/figures",
    )
    parser.add_argument(
        "--theme",
        type=str,
        default=None,
        help="Figure theme preset name (default, paper)",
    )
    parser.add_argument(
        "--run-log",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Write <out-dir>/logs/tour_runs.parquet",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print a summary of the results store and exit without searching",
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for tour searches.

    Supports ``--config path/to/config.json``. CLI arguments override
    config-file values; config-file values override the environment
    (``MAX_ITERATIONS``); the environment overrides built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        env_budget = iteration_budget_from_env()
        base_dir = Path(_get_optional_str(args.base_dir, "base_dir", file_cfg, ".") or ".")
        config = SearchConfig(
            iteration_budget=_get_int(
                args.max_iterations, "max_iterations", file_cfg, env_budget
            ),
            results_path=resolve_within_base(
                Path(
                    _get_optional_str(args.results, "results", file_cfg, RESULTS_FILE)
                    or RESULTS_FILE
                ),
                base_dir,
            ),
            out_dir=resolve_within_base(
                Path(_get_optional_str(args.out_dir, "out_dir", file_cfg, "data") or "data"),
                base_dir,
            ),
            render=_get_bool(args.render, "render", file_cfg, False),
            write_run_log=_get_bool(args.run_log, "run_log", file_cfg, True),
            theme=_get_optional_str(args.theme, "theme", file_cfg, "default") or "default",
        )
        get_theme(config.theme)
        tiles = _parse_tile_selector(_get_optional_str(args.tile, "tile", file_cfg, None))
        direction = _parse_optional_direction(
            _get_optional_str(args.direction, "direction", file_cfg, None)
        )
        rotation = _parse_optional_rotation(
            _get_optional_str(args.rotation, "rotation", file_cfg, None)
        )
    except ValueError as exc:
        parser.error(str(exc))

    if args.report:
        try:
            store = load_store(config.results_path)
        except (ValueError, OSError) as exc:
            parser.error(f"Cannot read results store {config.results_path}: {exc}")
        summary = summarize_store(store, config.iteration_budget)
        print(json.dumps(summary, ensure_ascii=False, indent=2))
        return

    batch = run_batch(tiles, config, direction=direction, rotation=rotation)
    summary = {
        "iteration_budget": config.iteration_budget,
        "results": str(config.results_path),
        **batch.summary(),
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
