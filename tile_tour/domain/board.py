"""Fixed 10x10 board: tile bounds, path membership and move application."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeAlias

from tile_tour.config.constants import BOARD_SIZE, TILE_COUNT
from tile_tour.domain.geometry import Move

Tile: TypeAlias = tuple[int, int]
"""Board coordinate ``(x, y)`` with ``0 <= x, y < BOARD_SIZE``."""

Path: TypeAlias = Sequence[Tile]
"""Ordered visit sequence; the last element is the current tile."""


def on_board(tile: Tile) -> bool:
    x, y = tile
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def visited(path: Path, tile: Tile) -> bool:
    return any(step == tile for step in path)


def apply(tile: Tile, move: Move) -> Tile:
    """Return the destination of *move* from *tile*; bounds are not checked."""
    return (tile[0] + move.dx, tile[1] + move.dy)


def all_tiles() -> Iterator[Tile]:
    """Yield every tile row by row: (0, 0), (1, 0), ..., (9, 9)."""
    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            yield (x, y)


def is_complete_tour(path: Path) -> bool:
    """True iff *path* visits each of the board's tiles exactly once."""
    return (
        len(path) == TILE_COUNT
        and all(on_board(tile) for tile in path)
        and len(set(path)) == TILE_COUNT
    )


def format_tile(tile: Tile) -> str:
    """Render a tile as the ``"x,y"`` key used by the results store."""
    return f"{tile[0]},{tile[1]}"


def parse_tile(raw_tile: str) -> Tile:
    """Parse an ``"x,y"`` label into an on-board tile."""
    tokens = [token.strip() for token in raw_tile.split(",")]
    if len(tokens) != 2:
        raise ValueError(f"tile must use x,y format, got {raw_tile!r}")
    try:
        tile = (int(tokens[0]), int(tokens[1]))
    except ValueError as exc:
        raise ValueError(f"tile must use integer x,y values, got {raw_tile!r}") from exc
    if not on_board(tile):
        raise ValueError(f"tile must lie within 0..{BOARD_SIZE - 1} on both axes")
    return tile
