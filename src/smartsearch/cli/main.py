"""Smart Search CLI - smartsearch command."""

import click

from smartsearch.cli.read import read_command
from smartsearch.cli.search import related_command, search_command
from smartsearch.cli.serve import serve_command
from smartsearch.cli.stats import stats_command
from smartsearch.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="smartsearch")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Smart Search - semantic search over Obsidian Smart Connections embeddings."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(serve_command, name="serve")
cli.add_command(stats_command, name="stats")
cli.add_command(search_command, name="search")
cli.add_command(related_command, name="related")
cli.add_command(read_command, name="read")


if __name__ == "__main__":
    cli()
