"""Tests for the snake-game CLI."""

import json

import pytest

from snake_game.cli import _build_parser, main


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_simulate_defaults(self):
        args = _build_parser().parse_args(["simulate"])
        assert args.command == "simulate"
        assert args.difficulty == "easy"
        assert args.games == 10
        assert args.growth is None

    def test_unknown_difficulty_rejected(self):
        with pytest.raises(SystemExit, match="2"):
            _build_parser().parse_args(["simulate", "--difficulty", "nightmare"])


class TestCLISimulate:
    def test_simulate_runs(self, capsys):
        result = main([
            "simulate",
            "--difficulty", "very_easy",
            "--games", "2",
            "--max-steps", "50",
        ])
        assert result == 0
        assert "Simulation:" in capsys.readouterr().out

    def test_simulate_bad_games(self):
        assert main(["simulate", "--games", "0"]) == 2


class TestCLIDifficulties:
    def test_lists_every_tier(self, capsys):
        assert main(["difficulties"]) == 0
        out = capsys.readouterr().out
        assert "normal" in out
        assert "25x25" in out
        assert len(out.strip().splitlines()) == 10


class TestCLIConfig:
    def test_writes_config(self, tmp_path):
        path = tmp_path / "session.json"
        result = main([
            "config", "--output", str(path),
            "--difficulty", "hard",
            "--growth", "3",
            "--placement", "corner",
        ])
        assert result == 0
        data = json.loads(path.read_text())
        assert data["difficulty"] == "hard"
        assert data["growth_per_food"] == 3
        assert data["initial_placement"] == "corner"

    def test_rejects_negative_growth(self, tmp_path):
        path = tmp_path / "session.json"
        assert main(["config", "--output", str(path), "--growth", "-1"]) == 2
        assert not path.exists()

    def test_output_defaults_to_session_json(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(["config"]) == 0
        data = json.loads((tmp_path / "session.json").read_text())
        assert data["difficulty"] == "normal"

    def test_positional_output_rejected(self, tmp_path):
        with pytest.raises(SystemExit, match="2"):
            _build_parser().parse_args(["config", str(tmp_path / "x.json")])
