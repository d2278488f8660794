"""Domain layer: move geometry, board model and move selection."""

from tile_tour.domain.board import (
    Path,
    Tile,
    all_tiles,
    apply,
    format_tile,
    is_complete_tour,
    on_board,
    parse_tile,
    visited,
)
from tile_tour.domain.geometry import (
    CANONICAL_MOVES,
    Direction,
    Move,
    RotationPolicy,
    move_list,
    parse_direction,
    parse_rotation,
)
from tile_tour.domain.moves import (
    UnmatchedMoveError,
    legal_moves,
    order_moves,
    previous_move_angle,
)

__all__ = [
    "CANONICAL_MOVES",
    "Direction",
    "Move",
    "Path",
    "RotationPolicy",
    "Tile",
    "UnmatchedMoveError",
    "all_tiles",
    "apply",
    "format_tile",
    "is_complete_tour",
    "legal_moves",
    "move_list",
    "on_board",
    "order_moves",
    "parse_direction",
    "parse_rotation",
    "parse_tile",
    "previous_move_angle",
    "visited",
]
