"""Move geometry: the eight jump vectors and their angular ring.

The ring is ordered by compass direction (N=0, NE=45, ..., NW=315). Straight
moves jump three tiles and diagonal moves jump two tiles along each axis, so
the ring is not uniform in length. ``move_list`` re-anchors the ring at a
chosen start direction and relabels angles relative to it; every later
ordering decision compares against those relabeled angles.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tile_tour.config.constants import ANGLE_STEP, DIAGONAL_JUMP, ORTHOGONAL_JUMP

__all__ = [
    "CANONICAL_MOVES",
    "Direction",
    "Move",
    "RotationPolicy",
    "move_list",
    "parse_direction",
    "parse_rotation",
]


class Direction(Enum):
    """Compass labels of the eight moves, in ring order."""

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"


class RotationPolicy(Enum):
    """Sense in which candidate moves are swept around the previous move."""

    CLOCKWISE = "clockwise"
    ANTICLOCKWISE = "anticlockwise"


@dataclass(frozen=True)
class Move:
    """One jump: integer displacement plus its angle in the active frame."""

    dx: int
    dy: int
    angle: int
    direction: Direction

    @property
    def delta(self) -> tuple[int, int]:
        return (self.dx, self.dy)


# x grows eastwards, y grows northwards.
CANONICAL_MOVES: tuple[Move, ...] = (
    Move(0, ORTHOGONAL_JUMP, 0, Direction.N),
    Move(DIAGONAL_JUMP, DIAGONAL_JUMP, 45, Direction.NE),
    Move(ORTHOGONAL_JUMP, 0, 90, Direction.E),
    Move(DIAGONAL_JUMP, -DIAGONAL_JUMP, 135, Direction.SE),
    Move(0, -ORTHOGONAL_JUMP, 180, Direction.S),
    Move(-DIAGONAL_JUMP, -DIAGONAL_JUMP, 225, Direction.SW),
    Move(-ORTHOGONAL_JUMP, 0, 270, Direction.W),
    Move(-DIAGONAL_JUMP, DIAGONAL_JUMP, 315, Direction.NW),
)


def move_list(start_direction: Direction) -> tuple[Move, ...]:
    """Return the eight moves rotated so *start_direction* comes first.

    For ``N`` the canonical ring is returned untouched. For any other start the
    ring is rotated and each move's angle becomes ``index * 45`` in the rotated
    order, i.e. angles are measured from the start direction, not from north.
    """
    if start_direction is Direction.N:
        return CANONICAL_MOVES
    offset = next(
        idx for idx, move in enumerate(CANONICAL_MOVES) if move.direction is start_direction
    )
    rotated = CANONICAL_MOVES[offset:] + CANONICAL_MOVES[:offset]
    return tuple(
        Move(move.dx, move.dy, idx * ANGLE_STEP, move.direction)
        for idx, move in enumerate(rotated)
    )


def parse_direction(raw_direction: str | Direction) -> Direction:
    """Parse a case-insensitive compass label into a Direction."""
    if isinstance(raw_direction, Direction):
        return raw_direction
    try:
        return Direction(str(raw_direction).strip().upper())
    except ValueError as exc:
        valid = ", ".join(d.value for d in Direction)
        raise ValueError(f"direction must be one of {valid}") from exc


def parse_rotation(raw_rotation: str | RotationPolicy) -> RotationPolicy:
    """Parse a rotation label into a RotationPolicy."""
    if isinstance(raw_rotation, RotationPolicy):
        return raw_rotation
    try:
        return RotationPolicy(str(raw_rotation).strip().lower())
    except ValueError as exc:
        valid = ", ".join(r.value for r in RotationPolicy)
        raise ValueError(f"rotation must be one of {valid}") from exc
