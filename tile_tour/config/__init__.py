"""Configuration layer: constants and typed config dataclasses."""

from tile_tour.config.constants import (
    ANGLE_STEP,
    BOARD_SIZE,
    DIAGONAL_JUMP,
    MAX_ITERATIONS,
    MAX_ITERATIONS_ENV,
    ORTHOGONAL_JUMP,
    RESULTS_FILE,
    RUN_LOG_SCHEMA_VERSION,
    TILE_COUNT,
)
from tile_tour.config.types import SearchConfig, iteration_budget_from_env

__all__ = [
    "ANGLE_STEP",
    "BOARD_SIZE",
    "DIAGONAL_JUMP",
    "MAX_ITERATIONS",
    "MAX_ITERATIONS_ENV",
    "ORTHOGONAL_JUMP",
    "RESULTS_FILE",
    "RUN_LOG_SCHEMA_VERSION",
    "SearchConfig",
    "TILE_COUNT",
    "iteration_budget_from_env",
]
