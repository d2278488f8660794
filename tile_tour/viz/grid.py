"""Visit-order grids for console output and figures."""

from __future__ import annotations

import numpy as np

from tile_tour.config.constants import BOARD_SIZE
from tile_tour.domain.board import Path, on_board

UNVISITED = -1
"""Grid sentinel for tiles the path never reached."""


def visit_order_grid(path: Path) -> np.ndarray:
    """Return a (BOARD_SIZE, BOARD_SIZE) int array of visit indices.

    Row 0 is the top of the board (y = BOARD_SIZE - 1) so the array reads the
    same way the board is drawn. Unvisited tiles hold ``UNVISITED``.
    Off-board tiles are silently skipped.
    """
    grid = np.full((BOARD_SIZE, BOARD_SIZE), UNVISITED, dtype=int)
    for index, tile in enumerate(path):
        if on_board(tile):
            x, y = tile
            grid[BOARD_SIZE - 1 - y, x] = index
    return grid


def format_visit_grid(path: Path) -> str:
    """Render the visit-order grid as right-aligned text, ``.`` for unvisited."""
    grid = visit_order_grid(path)
    width = len(str(max(BOARD_SIZE * BOARD_SIZE - 1, 0)))
    lines = []
    for row in grid:
        cells = [("." if value == UNVISITED else str(value)).rjust(width) for value in row]
        lines.append(" ".join(cells))
    return "\n".join(lines)
