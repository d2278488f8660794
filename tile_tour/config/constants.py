"""Centralized domain constants for tour searches.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

BOARD_SIZE = 10
"""Board width and height in tiles."""

TILE_COUNT = BOARD_SIZE * BOARD_SIZE
"""Number of tiles a complete tour visits."""

ORTHOGONAL_JUMP = 3
"""Straight-move length along one axis (N/E/S/W)."""

DIAGONAL_JUMP = 2
"""Per-axis offset of a diagonal move (NE/SE/SW/NW)."""

ANGLE_STEP = 45
"""Angular distance in degrees between two adjacent moves of the ring."""

MAX_ITERATIONS = 1_000_000
"""Default iteration budget for a single tile run."""

MAX_ITERATIONS_ENV = "MAX_ITERATIONS"
"""Environment variable overriding the default iteration budget."""

RESULTS_FILE = "results.json"
"""Default results-store file name."""

RUN_LOG_SCHEMA_VERSION = 1
"""Schema version stamped on every Parquet run-log row."""
