"""Tests for smartsearch stats command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from smartsearch.cli.main import cli

runner = CliRunner()


def _value(output: str, label: str) -> str:
    line = next(line for line in output.splitlines() if line.startswith(label))
    return line[len(label) :].strip()


class TestStatsCommand:
    """smartsearch stats tests."""

    def test_given_vault_when_stats_then_prints_table(self, vault: Path) -> None:
        """Stats print counts, dimensions and model."""
        result = runner.invoke(cli, ["stats", "--vault", str(vault)])

        assert result.exit_code == 0, result.output
        assert _value(result.output, "Total notes") == "4"
        assert _value(result.output, "Total blocks") == "1"
        assert _value(result.output, "Dimensions") == "3"
        assert _value(result.output, "Model") == "TaylorAI/bge-micro-v2"

    def test_given_json_flag_when_stats_then_prints_json(self, vault: Path) -> None:
        """--json prints the camelCase stats object."""
        result = runner.invoke(cli, ["stats", "--vault", str(vault), "--json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {
            "documentCount": 4,
            "sectionCount": 1,
            "dimensions": 3,
            "modelId": "TaylorAI/bge-micro-v2",
        }

    def test_given_env_var_when_stats_then_uses_it(self, vault: Path) -> None:
        """OBSIDIAN_VAULT_PATH is honored without --vault."""
        result = runner.invoke(cli, ["stats", "--json"], env={"OBSIDIAN_VAULT_PATH": str(vault)})

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["documentCount"] == 4

    def test_given_empty_vault_when_stats_then_reports_zero(self, tmp_path: Path) -> None:
        """A vault without embeddings reports zeros and a hint."""
        result = runner.invoke(cli, ["stats", "--vault", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert _value(result.output, "Total notes") == "0"
        assert "No embeddings found" in result.output

    def test_given_no_vault_when_stats_then_fails(self) -> None:
        """Without a vault the command exits with an error."""
        result = runner.invoke(cli, ["stats"])

        assert result.exit_code == 1
        assert "No vault configured" in result.output
