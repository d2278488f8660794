"""Legal-move filtering and rotation-biased move ordering.

Ordering is the search heuristic: candidates are swept around the previous
move's angle in the chosen rotational sense so the search prefers minimal
turning and tends towards spiral-like sweeps.
"""

from __future__ import annotations

from collections.abc import Sequence

from tile_tour.domain.board import Path, apply, on_board, visited
from tile_tour.domain.geometry import Move, RotationPolicy, parse_rotation


class UnmatchedMoveError(ValueError):
    """The last step of a path is not one of the active move list's jumps."""


def legal_moves(path: Path, moves: Sequence[Move]) -> list[Move]:
    """Return moves from the current tile that land on an unvisited on-board tile.

    The result keeps the order of *moves*.
    """
    current = path[-1]
    legal: list[Move] = []
    for move in moves:
        target = apply(current, move)
        if on_board(target) and not visited(path, target):
            legal.append(move)
    return legal


def previous_move_angle(path: Path, moves: Sequence[Move]) -> int:
    """Angle, in the frame of *moves*, of the jump between the last two tiles."""
    (x0, y0), (x1, y1) = path[-2], path[-1]
    delta = (x1 - x0, y1 - y0)
    for move in moves:
        if move.delta == delta:
            return move.angle
    raise UnmatchedMoveError(
        f"step {path[-2]} -> {path[-1]} (delta {delta}) matches no entry of the move list"
    )


def order_moves(
    path: Path,
    legal: Sequence[Move],
    rotation: RotationPolicy | str,
    moves: Sequence[Move],
) -> list[Move]:
    """Order *legal* relative to the previous move's angle.

    Clockwise puts moves at or past the previous angle first, then the ones
    before it, both in move-list order. Anticlockwise puts moves at or before
    the previous angle first, then the ones past it, each group reversed.
    Without a previous move the legal moves keep their move-list order.
    """
    policy = parse_rotation(rotation)
    if len(path) < 2:
        return list(legal)
    previous = previous_move_angle(path, moves)

    if policy is RotationPolicy.CLOCKWISE:
        ahead = [move for move in legal if move.angle >= previous]
        behind = [move for move in legal if move.angle < previous]
        return ahead + behind

    behind = [move for move in legal if move.angle <= previous]
    ahead = [move for move in legal if move.angle > previous]
    return behind[::-1] + ahead[::-1]
