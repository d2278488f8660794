"""Tests for tile_tour.search.oracle module."""

from __future__ import annotations

from tile_tour.domain.geometry import Direction, RotationPolicy
from tile_tour.search.oracle import (
    all_configurations,
    record_key,
    select_default,
    summarize_store,
)


def test_record_key_format() -> None:
    assert record_key(Direction.SE, RotationPolicy.ANTICLOCKWISE) == "SE:anticlockwise"


def test_all_configurations_canonical_order() -> None:
    configs = all_configurations()
    assert len(configs) == 16
    assert configs[0] == (Direction.N, RotationPolicy.CLOCKWISE)
    assert configs[1] == (Direction.N, RotationPolicy.ANTICLOCKWISE)
    assert configs[-1] == (Direction.NW, RotationPolicy.ANTICLOCKWISE)


class TestSelectDefault:
    def test_picks_lowest_iteration_count(self) -> None:
        records = {
            "0,0": {
                "N:clockwise": {"iterations": 500},
                "S:clockwise": {"iterations": 200},
            }
        }
        assert select_default((0, 0), records) == (Direction.S, RotationPolicy.CLOCKWISE)

    def test_no_records_defaults_to_north_clockwise(self) -> None:
        assert select_default((0, 0), {}) == (Direction.N, RotationPolicy.CLOCKWISE)

    def test_other_tiles_are_ignored(self) -> None:
        records = {"1,0": {"W:anticlockwise": {"iterations": 3}}}
        assert select_default((0, 0), records) == (Direction.N, RotationPolicy.CLOCKWISE)

    def test_missing_configurations_rank_at_budget(self) -> None:
        # A recorded count above the budget loses to every unrecorded configuration.
        records = {"4,4": {"N:clockwise": {"iterations": 2_000}}}
        assert select_default((4, 4), records, iteration_budget=1_000) == (
            Direction.N,
            RotationPolicy.ANTICLOCKWISE,
        )

    def test_missing_iteration_count_ranks_at_budget(self) -> None:
        records = {
            "2,3": {
                "N:clockwise": {"success": False},
                "E:clockwise": {"iterations": 999},
            }
        }
        assert select_default((2, 3), records, iteration_budget=1_000) == (
            Direction.E,
            RotationPolicy.CLOCKWISE,
        )

    def test_ties_keep_canonical_order(self) -> None:
        records = {
            "5,5": {
                "S:anticlockwise": {"iterations": 200},
                "S:clockwise": {"iterations": 200},
                "W:clockwise": {"iterations": 200},
            }
        }
        assert select_default((5, 5), records) == (Direction.S, RotationPolicy.CLOCKWISE)

    def test_non_integer_counts_are_ignored(self) -> None:
        records = {"0,0": {"E:clockwise": {"iterations": "12"}, "W:clockwise": {"iterations": True}}}
        assert select_default((0, 0), records) == (Direction.N, RotationPolicy.CLOCKWISE)


def test_summarize_store() -> None:
    records = {
        "1,0": {"N:clockwise": {"iterations": 1_000, "success": False}},
        "0,0": {
            "N:clockwise": {"iterations": 500, "success": True},
            "S:clockwise": {"iterations": 200, "success": True},
        },
    }
    summary = summarize_store(records, iteration_budget=1_000)
    assert summary["tiles"] == 2
    assert summary["solved"] == 1
    per_tile = summary["per_tile"]
    assert list(per_tile) == ["0,0", "1,0"]
    assert per_tile["0,0"] == {
        "configurations": 2,
        "best": "S:clockwise",
        "best_iterations": 200,
        "solved": True,
    }
    assert per_tile["1,0"]["solved"] is False
