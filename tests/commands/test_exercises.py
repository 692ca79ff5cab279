"""Tests for the sum, count, keys, and car commands."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from katactl.cli import cli


class TestSumCommand:
    def test_sum(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "sum", "1", "2", "3", "4", "5"])
        assert result.exit_code == 0
        assert result.output.strip() == "15"

    def test_no_numbers(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "sum"])
        assert result.output.strip() == "0"

    def test_negative_numbers(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "sum", "-1", "1", "-2.5"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "-2.5"

    def test_infinite(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sum", "1", "inf"])
        assert result.exit_code == 1


class TestCountCommand:
    def test_count(self, cli_runner: CliRunner) -> None:
        text = "TypeScript is great. I love TypeScript!"
        result = cli_runner.invoke(cli, ["--json", "count", text, "typescript"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["occurrences"] == 2

    def test_empty_word(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["count", "some text", ""])
        assert result.exit_code == 1
        assert "must not be empty" in result.output

    def test_warning_on_unmatchable_word(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["count", "a-b a-b", "a-b"])
        assert result.exit_code == 0
        assert "WARNING" in result.output


class TestKeysCommand:
    RECORD = '{"name": "Alice", "age": 25, "email": "alice@example.com"}'

    def test_valid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "keys", self.RECORD, "name", "age"])
        assert result.exit_code == 0
        assert result.output.strip() == "True"

    def test_missing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "keys", self.RECORD, "name", "address"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["valid"] is False
        assert data["missing"] == ["address"]

    def test_not_an_object(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["keys", "[1, 2]", "name"])
        assert result.exit_code == 2


class TestCarCommand:
    def test_age(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "car", "Honda", "Civic", "2018", "--current-year", "2024"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "6"

    def test_reference_year_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        cfg = tmp_path / "cars.toml"
        cfg.write_text("[car]\nreference_year = 2024\n")
        result = cli_runner.invoke(cli, ["-c", str(cfg), "-q", "car", "Honda", "Civic", "2018"])
        assert result.exit_code == 0
        assert result.output.strip() == "6"

    def test_future_year(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["car", "Honda", "Civic", "2030", "--current-year", "2024"]
        )
        assert result.exit_code == 1
        assert "after reference year" in result.output
