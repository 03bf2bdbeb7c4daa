"""smartsearch search/related commands - rank notes from the command line."""

import asyncio
import json
from collections.abc import Sequence
from pathlib import Path

import click

from smartsearch.cli.utils import KIND_CHOICES, F, resolve_config, vault_options, vault_root
from smartsearch.core.errors import SmartSearchError
from smartsearch.core.formatting import format_hits
from smartsearch.index.encoder import create_encoder
from smartsearch.index.loader import load_collection
from smartsearch.index.models import SearchHit, SearchOptions
from smartsearch.index.ranking import find_similar, search


def _ranking_options(func: F) -> F:
    func = click.option("--json", "as_json", is_flag=True, help="Output as JSON")(func)
    func = click.option(
        "--kind",
        type=click.Choice(KIND_CHOICES, case_sensitive=False),
        default=None,
        help="Only whole notes (document) or heading blocks (section)",
    )(func)
    func = click.option(
        "--threshold", type=float, default=None, help="Minimum cosine similarity"
    )(func)
    func = click.option("--limit", type=int, default=None, help="Maximum results")(func)
    return func


def _echo_hits(hits: Sequence[SearchHit], as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps([hit.to_dict() for hit in hits]))
    else:
        click.echo(format_hits(hits))


@click.command()
@click.argument("query")
@vault_options
@_ranking_options
@click.option("--folder", default=None, help="Only paths starting with this prefix")
def search_command(
    query: str,
    vault: Path | None,
    config_path: Path | None,
    limit: int | None,
    threshold: float | None,
    kind: str | None,
    as_json: bool,
    folder: str | None,
) -> None:
    """Search the vault for QUERY by meaning rather than keywords."""
    config = resolve_config(vault, config_path)
    collection = load_collection(vault_root(config), model_id=config.encoder.model_id)
    encoder = create_encoder(config.encoder)

    options = SearchOptions(limit=limit, threshold=threshold, kind=kind, path_prefix=folder)
    try:
        hits = asyncio.run(
            search(
                query,
                collection,
                encoder,
                options,
                default_limit=config.search.default_limit,
                default_threshold=config.search.default_threshold,
            )
        )
    except SmartSearchError as e:
        raise click.ClickException(e.message) from e

    _echo_hits(hits, as_json)


@click.command()
@click.argument("note_path")
@vault_options
@_ranking_options
def related_command(
    note_path: str,
    vault: Path | None,
    config_path: Path | None,
    limit: int | None,
    threshold: float | None,
    kind: str | None,
    as_json: bool,
) -> None:
    """List notes similar to NOTE_PATH (use note.md#Heading for a block)."""
    config = resolve_config(vault, config_path)
    collection = load_collection(vault_root(config), model_id=config.encoder.model_id)

    options = SearchOptions(limit=limit, threshold=threshold, kind=kind)
    try:
        hits = find_similar(
            note_path,
            collection,
            options,
            default_limit=config.search.default_limit,
            default_threshold=config.search.default_threshold,
        )
    except SmartSearchError as e:
        raise click.ClickException(e.message) from e

    _echo_hits(hits, as_json)
