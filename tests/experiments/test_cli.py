"""Tests for experiments/cli.py: argument parsing, config resolution and dispatch."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from tile_tour.domain.geometry import Direction, RotationPolicy
from tile_tour.experiments.cli import (
    _coerce_bool,
    _coerce_int,
    _parse_tile_selector,
    main,
)
from tile_tour.experiments.runner import BatchResult
from tile_tour.io.store import load_store, save_store


def _base_args(tmp_path: Path) -> list[str]:
    return [
        "--results",
        str(tmp_path / "results.json"),
        "--out-dir",
        str(tmp_path / "data"),
        "--base-dir",
        str(tmp_path),
    ]


def _summary(out: str) -> dict[str, object]:
    return json.loads(out[out.rindex('{\n  "iteration_budget"') :])


class TestParsingHelpers:
    def test_tile_selector_all(self) -> None:
        assert len(_parse_tile_selector(None)) == 100
        assert len(_parse_tile_selector("ALL")) == 100

    def test_tile_selector_single(self) -> None:
        assert _parse_tile_selector("4,2") == [(4, 2)]

    def test_tile_selector_rejects_off_board(self) -> None:
        with pytest.raises(ValueError):
            _parse_tile_selector("4,12")

    def test_coerce_bool(self) -> None:
        assert _coerce_bool("yes", "render") is True
        assert _coerce_bool("off", "render") is False
        with pytest.raises(ValueError, match="render must be a boolean value"):
            _coerce_bool("maybe", "render")

    def test_coerce_int(self) -> None:
        assert _coerce_int("12", "max_iterations") == 12
        assert _coerce_int(3.0, "max_iterations") == 3
        with pytest.raises(ValueError):
            _coerce_int(True, "max_iterations")
        with pytest.raises(ValueError):
            _coerce_int("ten", "max_iterations")


class TestMain:
    def test_single_tile_run(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(
            [
                "--tile",
                "0,0",
                "--direction",
                "e",
                "--max-iterations",
                "10",
                *_base_args(tmp_path),
            ]
        )
        store = load_store(tmp_path / "results.json")
        assert list(store["0,0"]) == ["E:clockwise"]
        assert store["0,0"]["E:clockwise"]["iterations"] == 10

        summary = _summary(capsys.readouterr().out)
        assert summary["iteration_budget"] == 10
        assert summary["tiles_attempted"] == 1
        assert (tmp_path / "data" / "logs" / "tour_runs.parquet").exists()

    def test_environment_budget(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("MAX_ITERATIONS", "7")
        main(["--tile", "3,3", *_base_args(tmp_path)])
        store = load_store(tmp_path / "results.json")
        assert store["3,3"]["N:clockwise"]["iterations"] == 7
        assert _summary(capsys.readouterr().out)["iteration_budget"] == 7

    def test_config_file_overrides_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MAX_ITERATIONS", "7")
        config_path = tmp_path / "config.json"
        config_path.write_text(
            json.dumps({"max_iterations": 4, "tile": "1,1", "rotation": "anticlockwise"})
        )
        main(["--config", str(config_path), *_base_args(tmp_path)])
        store = load_store(tmp_path / "results.json")
        assert store["1,1"]["N:anticlockwise"]["iterations"] == 4

    def test_cli_overrides_config_file(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"max_iterations": 4, "tile": "1,1"}))
        main(["--config", str(config_path), "--max-iterations", "2", *_base_args(tmp_path)])
        store = load_store(tmp_path / "results.json")
        assert store["1,1"]["N:clockwise"]["iterations"] == 2

    def test_absent_tile_runs_every_tile(self, tmp_path: Path) -> None:
        with patch("tile_tour.experiments.cli.run_batch", return_value=BatchResult()) as mock_run:
            main(["--direction", "S", "--rotation", "anticlockwise", *_base_args(tmp_path)])
        tiles = mock_run.call_args.args[0]
        assert len(tiles) == 100
        assert mock_run.call_args.kwargs == {
            "direction": Direction.S,
            "rotation": RotationPolicy.ANTICLOCKWISE,
        }

    def test_absent_direction_and_rotation_pass_none(self, tmp_path: Path) -> None:
        with patch("tile_tour.experiments.cli.run_batch", return_value=BatchResult()) as mock_run:
            main(["--tile", "all", *_base_args(tmp_path)])
        assert mock_run.call_args.kwargs == {"direction": None, "rotation": None}

    @pytest.mark.parametrize(
        "bad_args",
        [
            ["--tile", "10,10"],
            ["--direction", "up"],
            ["--rotation", "sideways"],
            ["--max-iterations", "0"],
            ["--theme", "neon"],
        ],
    )
    def test_invalid_values_exit(self, tmp_path: Path, bad_args: list[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main([*bad_args, *_base_args(tmp_path)])
        assert excinfo.value.code == 2

    def test_missing_config_file_exits(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit):
            main(["--config", str(tmp_path / "absent.json"), *_base_args(tmp_path)])

    def test_report_prints_store_summary(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        save_store(
            tmp_path / "results.json",
            {"0,0": {"S:clockwise": {"iterations": 200, "success": True}}},
        )
        with patch("tile_tour.experiments.cli.run_batch") as mock_run:
            main(["--report", *_base_args(tmp_path)])
        mock_run.assert_not_called()
        report = json.loads(capsys.readouterr().out)
        assert report["solved"] == 1
        assert report["per_tile"]["0,0"]["best"] == "S:clockwise"

    @pytest.mark.parametrize("contents", ["{not json", '{"0,0": [1, 2]}'])
    def test_report_with_unreadable_store_exits(
        self, tmp_path: Path, contents: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (tmp_path / "results.json").write_text(contents)
        with pytest.raises(SystemExit) as excinfo:
            main(["--report", *_base_args(tmp_path)])
        assert excinfo.value.code == 2
        assert "Cannot read results store" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "escaping_args",
        [
            ["--out-dir", "../escape"],
            ["--results", "../results.json"],
        ],
    )
    def test_paths_outside_base_dir_exit(
        self, tmp_path: Path, escaping_args: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        base_dir = tmp_path / "work"
        base_dir.mkdir()
        with patch("tile_tour.experiments.cli.run_batch") as mock_run:
            with pytest.raises(SystemExit) as excinfo:
                main(["--tile", "0,0", "--base-dir", str(base_dir), *escaping_args])
        assert excinfo.value.code == 2
        mock_run.assert_not_called()
        assert "Path escapes base_dir" in capsys.readouterr().err

    def test_relative_paths_resolve_under_base_dir(self, tmp_path: Path) -> None:
        with patch("tile_tour.experiments.cli.run_batch", return_value=BatchResult()) as mock_run:
            main(["--tile", "0,0", "--base-dir", str(tmp_path), "--out-dir", "runs/a"])
        config = mock_run.call_args.args[1]
        assert config.out_dir == (tmp_path / "runs" / "a").resolve()
        assert config.results_path == (tmp_path / "results.json").resolve()
