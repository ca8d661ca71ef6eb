"""Tests for the throughput benchmark and CLI."""

import json

import pytest

from snake_sim.benchmark import BenchmarkResult, benchmark_throughput
from snake_sim.cli import main
from snake_sim.config import GameConfig
from snake_sim.direction import TurnMode


class TestBenchmark:
    def test_runs(self):
        result = benchmark_throughput(num_games=5, max_ticks=100, seed=0)
        assert isinstance(result, BenchmarkResult)
        assert result.total_games == 5
        assert 5 <= result.total_ticks <= 500
        assert result.best_score % 10 == 0
        assert "games" in result.summary()

    def test_deterministic_ticks(self):
        a = benchmark_throughput(num_games=3, max_ticks=50, seed=7)
        b = benchmark_throughput(num_games=3, max_ticks=50, seed=7)
        assert a.total_ticks == b.total_ticks
        assert a.best_score == b.best_score

    def test_invalid_games(self):
        with pytest.raises(ValueError, match="num_games"):
            benchmark_throughput(num_games=0)


class TestCli:
    def test_no_command(self):
        assert main([]) == 1

    def test_benchmark(self, capsys):
        assert main(["benchmark", "--num-games", "2", "--max-ticks", "20"]) == 0
        assert "Benchmark" in capsys.readouterr().out

    def test_config_defaults(self, tmp_path):
        out = tmp_path / "game.json"
        assert main(["config", str(out)]) == 0
        assert GameConfig.load(out) == GameConfig()

    def test_config_overrides(self, tmp_path):
        out = tmp_path / "game.json"
        rc = main([
            "config", str(out), "--grid-size", "10",
            "--turn-mode", "buffered", "--seed", "3",
        ])
        assert rc == 0
        cfg = GameConfig.load(out)
        assert cfg.grid_size == 10
        assert cfg.start == (5, 5)
        assert cfg.turn_mode is TurnMode.BUFFERED
        assert cfg.seed == 3
        assert json.loads(out.read_text())["initial_food"] is None

    def test_config_invalid(self, tmp_path):
        assert main(["config", str(tmp_path / "x.json"), "--grid-size", "2"]) == 2
