"""smartsearch serve command - run the MCP server over stdio."""

from pathlib import Path

import click

from smartsearch.cli.utils import resolve_config, vault_options


@click.command()
@vault_options
def serve_command(vault: Path | None, config_path: Path | None) -> None:
    """Run the MCP server on stdin/stdout.

    Point an MCP client (Claude Desktop, an IDE agent) at this command.
    """
    from smartsearch.mcp.server import run_server

    config = resolve_config(vault, config_path)
    run_server(config)
