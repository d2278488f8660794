"""Depth-first backtracking tour search with an iteration budget.

Termination contract, checked in this order at every frame:

1. The iteration budget is spent: the frame returns its own path and every
   ancestor hands that path straight up. The result is the deepest
   in-progress path on the current call stack, not the best path seen over
   the whole tree.
2. A child returned a complete tour: it is handed straight up, skipping the
   remaining sibling moves of every ancestor.
3. No ordered legal move is left: the frame returns its own path and the
   parent carries on with its next sibling.

Recursion depth is bounded by the tile count, so native recursion is used.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from tile_tour.config.constants import TILE_COUNT
from tile_tour.domain.board import Tile, apply, format_tile, is_complete_tour, on_board
from tile_tour.domain.geometry import (
    Direction,
    Move,
    RotationPolicy,
    move_list,
    parse_direction,
    parse_rotation,
)
from tile_tour.domain.moves import legal_moves, order_moves


@dataclass
class RunState:
    """Mutable counters owned by exactly one tile run."""

    iterations: int = 0
    max_length: int = 0
    exhausted: bool = False


@dataclass(frozen=True)
class TourResult:
    """Outcome of one (tile, direction, rotation) search."""

    start: Tile
    direction: Direction
    rotation: RotationPolicy
    path: tuple[Tile, ...]
    iterations: int
    max_length: int
    exhausted: bool

    @property
    def success(self) -> bool:
        return is_complete_tour(self.path)

    @property
    def key(self) -> str:
        return f"{self.direction.value}:{self.rotation.value}"

    @property
    def tile_key(self) -> str:
        return format_tile(self.start)


def search(
    path: list[Tile],
    moves: Sequence[Move],
    rotation: RotationPolicy,
    iteration_budget: int,
    state: RunState,
) -> list[Tile]:
    """Extend *path* depth-first; return a complete tour or the path to report."""
    if state.iterations >= iteration_budget:
        state.exhausted = True
        return path

    candidates = order_moves(path, legal_moves(path, moves), rotation, moves)
    for move in candidates:
        extended = [*path, apply(path[-1], move)]
        state.iterations += 1
        if len(extended) > state.max_length:
            state.max_length = len(extended)
        result = search(extended, moves, rotation, iteration_budget, state)
        if len(result) == TILE_COUNT or state.exhausted:
            return result
    return path


def run_tour_search(
    start: Tile,
    direction: Direction | str,
    rotation: RotationPolicy | str,
    iteration_budget: int,
) -> TourResult:
    """Run one search from *start* with a fresh RunState."""
    if not on_board(start):
        raise ValueError(f"start tile {start} is off the board")
    if iteration_budget < 1:
        raise ValueError("iteration_budget must be >= 1")

    start_direction = parse_direction(direction)
    policy = parse_rotation(rotation)
    moves = move_list(start_direction)
    state = RunState(max_length=1)

    path = search([start], moves, policy, iteration_budget, state)
    return TourResult(
        start=start,
        direction=start_direction,
        rotation=policy,
        path=tuple(path),
        iterations=state.iterations,
        max_length=state.max_length,
        exhausted=state.exhausted,
    )
