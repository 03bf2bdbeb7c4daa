"""smartsearch stats command - summarize the loaded embeddings."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from smartsearch.cli.utils import resolve_config, vault_options, vault_root
from smartsearch.index.loader import embeddings_dir, load_collection
from smartsearch.index.models import CollectionStats
from smartsearch.index.ranking import collection_stats


def _make_stats_table(stats: CollectionStats) -> Table:
    table = Table(show_header=False, box=None, padding=(0, 1), pad_edge=False)
    table.add_column("label", style="cyan")
    table.add_column("value", style="white")
    table.add_row("Total notes", str(stats.document_count))
    table.add_row("Total blocks", str(stats.section_count))
    table.add_row("Dimensions", str(stats.dimensions))
    table.add_row("Model", stats.model_id)
    return table


@click.command()
@vault_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def stats_command(vault: Path | None, config_path: Path | None, as_json: bool) -> None:
    """Show how many notes and blocks carry embeddings."""
    config = resolve_config(vault, config_path)
    root = vault_root(config)
    model_id = config.encoder.model_id

    stats = collection_stats(load_collection(root, model_id=model_id), model_id=model_id)

    if as_json:
        click.echo(json.dumps(stats.to_dict()))
        return

    console = Console(highlight=False)
    console.print(_make_stats_table(stats))
    if stats.document_count == 0 and stats.section_count == 0:
        click.echo(f"No embeddings found under {embeddings_dir(root)}", err=True)
