"""Path construction helpers for tour output directories.

Centralises the directory/file naming conventions used by the batch runner
and the renderers, and keeps CLI-supplied paths inside a trusted base directory.
"""

from __future__ import annotations

from pathlib import Path

from tile_tour.domain.board import Tile


def resolve_within_base(path: Path, base_dir: Path) -> Path:
    """Resolve *path* and ensure it stays within the trusted *base_dir*.

    Raises :exc:`ValueError` if the resolved path escapes the base directory.
    """
    candidate = path if path.is_absolute() else base_dir / path
    resolved = candidate.resolve()
    base_resolved = base_dir.resolve()
    if resolved != base_resolved and base_resolved not in resolved.parents:
        raise ValueError(f"Path escapes base_dir: {path}")
    return resolved


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def figures_dir(out_dir: Path) -> Path:
    """Return path to the rendered-figure subdirectory within an output directory."""
    return out_dir / "figures"


def run_log_path(out_dir: Path) -> Path:
    """Return path to the per-run Parquet log."""
    return logs_dir(out_dir) / "tour_runs.parquet"


def tour_figure_path(out_dir: Path, tile: Tile, key: str) -> Path:
    """Return path to the PNG for one tile/configuration, e.g. ``tour_x3_y7_N_clockwise.png``."""
    safe_key = key.replace(":", "_")
    return figures_dir(out_dir) / f"tour_x{tile[0]}_y{tile[1]}_{safe_key}.png"
