"""Matplotlib rendering of a single tour."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.colors import ListedColormap  # noqa: E402

from tile_tour.config.constants import BOARD_SIZE, TILE_COUNT  # noqa: E402
from tile_tour.domain.board import Path as TilePath  # noqa: E402
from tile_tour.viz.grid import UNVISITED, visit_order_grid  # noqa: E402
from tile_tour.viz.theme import DEFAULT_THEME, Theme  # noqa: E402


def _draw_visit_grid(ax: plt.Axes, grid: np.ndarray, theme: Theme) -> None:
    """imshow of visit order with unvisited tiles greyed out and thin grid lines."""
    masked = np.ma.masked_equal(grid, UNVISITED)
    cmap = matplotlib.colormaps[theme.visited_cmap].copy()
    cmap.set_bad(theme.unvisited_color)
    ax.imshow(masked, cmap=cmap, vmin=0, vmax=TILE_COUNT - 1, origin="upper", aspect="equal")
    for edge in range(BOARD_SIZE + 1):
        ax.axvline(edge - 0.5, color=theme.grid_line_color, linewidth=0.5)
        ax.axhline(edge - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xticks(range(BOARD_SIZE))
    ax.set_yticks(range(BOARD_SIZE))
    ax.set_yticklabels([str(BOARD_SIZE - 1 - row) for row in range(BOARD_SIZE)])


def _draw_path(ax: plt.Axes, path: TilePath, theme: Theme) -> None:
    cols = [x for x, _ in path]
    rows = [BOARD_SIZE - 1 - y for _, y in path]
    ax.plot(cols, rows, color=theme.path_color, linewidth=1.0, alpha=0.8)
    ax.scatter(cols[:1], rows[:1], s=80, color=theme.start_color, zorder=3, label="start")
    if len(path) > 1:
        ax.scatter(cols[-1:], rows[-1:], s=80, color=theme.end_color, zorder=3, label="end")
    for index, (col, row) in enumerate(zip(cols, rows, strict=True)):
        ax.text(
            col,
            row,
            str(index),
            ha="center",
            va="center",
            fontsize=theme.font_size,
            color=theme.label_color,
        )


def render_tour(
    path: TilePath,
    output_path: Path,
    title: str | None = None,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Draw the board, the visit order and the tour polyline; save to *output_path*."""
    if not path:
        raise ValueError("path must contain at least the start tile")
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(6, 6))
    try:
        _draw_visit_grid(ax, visit_order_grid(path), theme)
        _draw_path(ax, path, theme)
        ax.set_title(title or f"{len(path)}/{TILE_COUNT} tiles")
        ax.legend(loc="upper right", fontsize=8, framealpha=0.8)
        fig.tight_layout()
        fig.savefig(output_path, dpi=150)
    finally:
        plt.close(fig)
    return output_path
