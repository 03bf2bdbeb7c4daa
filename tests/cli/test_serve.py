"""Tests for smartsearch serve command."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from smartsearch.cli.main import cli

runner = CliRunner()


class TestServeCommand:
    """smartsearch serve tests."""

    def test_given_vault_when_serve_then_runs_server(self, vault: Path) -> None:
        """serve hands the resolved config to run_server."""
        with patch("smartsearch.mcp.server.run_server") as run_server:
            result = runner.invoke(cli, ["serve", "--vault", str(vault)])

        assert result.exit_code == 0, result.output
        config = run_server.call_args.args[0]
        assert config.vault.path == str(vault.resolve())

    def test_given_no_vault_when_serve_then_fails(self) -> None:
        """serve refuses to start without a vault."""
        with patch("smartsearch.mcp.server.run_server") as run_server:
            result = runner.invoke(cli, ["serve"])

        assert result.exit_code == 1
        run_server.assert_not_called()
