"""
Tests for the command-line entry point.
"""

import csv
import json

import pytest

from threepd.cli import format_leaderboard, format_match, main


@pytest.fixture
def out_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("OUT_DIR", str(tmp_path))
    return tmp_path


class TestCli:
    """End-to-end CLI runs on small rosters."""

    def test_csv_output(self, out_dir, capsys):
        """CSV mode writes matches, standings and a summary."""
        main(["--only", "AlwaysCooperate,AlwaysDefect", "--seed", "1"])

        out = capsys.readouterr().out
        assert "Tournament Results" in out
        assert out.index("AlwaysCooperate: 24.0000") < out.index("AlwaysDefect: 24.0000")

        matches = list(out_dir.glob("*_matches.csv"))
        standings = list(out_dir.glob("*_standings.csv"))
        summary = list(out_dir.glob("*_summary.json"))
        assert len(matches) == len(standings) == len(summary) == 1

        with open(matches[0], newline="", encoding="utf-8") as f:
            assert len(list(csv.DictReader(f))) == 4
        with open(standings[0], newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert [r["strategy"] for r in rows] == ["AlwaysCooperate", "AlwaysDefect"]

        data = json.loads(summary[0].read_text(encoding="utf-8"))
        assert data["matches"] == 4
        assert data["strategies"] == ["AlwaysCooperate", "AlwaysDefect"]

    def test_json_output(self, out_dir):
        """JSON mode writes a single results file."""
        main(["--only", "TitForTat", "--seed", "2", "--format", "json"])
        results = list(out_dir.glob("*_results.json"))
        assert len(results) == 1
        data = json.loads(results[0].read_text(encoding="utf-8"))
        assert len(data["matches"]) == 1
        assert data["standings"][0]["strategy"] == "TitForTat"

    def test_verbose_prints_every_match(self, out_dir, capsys):
        """--verbose prints one line per match before the leaderboard."""
        main(["--only", "AlwaysCooperate,AlwaysDefect", "--seed", "1", "--verbose"])
        out = capsys.readouterr().out
        assert sum(1 for line in out.splitlines() if " scored " in line) == 4
        assert out.index(" scored ") < out.index("Tournament Results")

    def test_labels(self, out_dir, capsys):
        """--labels lists strategy names and writes nothing."""
        main(["--labels"])
        out = capsys.readouterr().out.split()
        assert "Grudger" in out
        assert list(out_dir.iterdir()) == []

    def test_bad_payoffs_exit(self, out_dir):
        """An invalid payoff table ends the program with a message."""
        with pytest.raises(SystemExit, match="Payoff table"):
            main(["--payoffs", "[[[1, 1], [1, 1]], [[1, 1], [1, 1]]]"])

    def test_unknown_strategy_exit(self, out_dir):
        """Unknown names end the program with a message."""
        with pytest.raises(SystemExit, match="Unknown strategies"):
            main(["--only", "Nobody"])

    def test_bad_round_range_exit(self, out_dir):
        """Inverted bounds are refused."""
        with pytest.raises(SystemExit):
            main(["--min-rounds", "20", "--max-rounds", "10"])

    def test_bad_log_level_exit(self, out_dir):
        """An unknown log level is an argument error, not a traceback."""
        with pytest.raises(SystemExit):
            main(["--log-level", "LOUD", "--only", "AlwaysCooperate"])
        assert list(out_dir.iterdir()) == []

    def test_log_level_is_case_insensitive(self, out_dir):
        """Lower-case level names are accepted."""
        main(["--log-level", "debug", "--only", "AlwaysCooperate", "--seed", "1"])
        assert list(out_dir.glob("*_standings.csv"))

    def test_bad_environment_exit(self, out_dir, monkeypatch):
        """A malformed THREEPD_* override ends the program with its name."""
        monkeypatch.setenv("THREEPD_MAX_ROUNDS", "many")
        with pytest.raises(SystemExit, match="THREEPD_MAX_ROUNDS"):
            main(["--only", "AlwaysCooperate"])

    def test_environment_round_bounds(self, out_dir, monkeypatch):
        """Round bounds fall back to the environment when not given."""
        monkeypatch.setenv("THREEPD_MIN_ROUNDS", "4")
        monkeypatch.setenv("THREEPD_MAX_ROUNDS", "4")
        main(["--only", "AlwaysDefect", "--seed", "1", "--format", "json"])
        data = json.loads(next(out_dir.glob("*_results.json")).read_text(encoding="utf-8"))
        assert data["matches"][0]["rounds"] == 4


class TestFormatting:
    """Tests for console formatting helpers."""

    def test_format_match(self):
        row = {"A": "X", "B": "Y", "C": "Z", "avg_A": 6.0, "avg_B": 3.5, "avg_C": 2.0}
        assert format_match(row) == (
            "X scored 6.0000 points, Y scored 3.5000 points, and Z scored 2.0000 points."
        )

    def test_format_leaderboard(self):
        standings = [
            {"rank": 1, "strategy": "A", "total_score": 10.0},
            {"rank": 2, "strategy": "B", "total_score": 5.25},
        ]
        lines = format_leaderboard(standings).splitlines()
        assert lines == ["Tournament Results", "  1. A: 10.0000 points.", "  2. B: 5.2500 points."]
