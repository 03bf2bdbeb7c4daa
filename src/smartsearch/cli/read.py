"""smartsearch read command - print a vault note."""

from pathlib import Path

import click

from smartsearch.cli.utils import resolve_config, vault_options, vault_root
from smartsearch.core.errors import SmartSearchError
from smartsearch.core.formatting import format_note
from smartsearch.files.ops import NoteReader


@click.command()
@click.argument("note_path")
@vault_options
def read_command(note_path: str, vault: Path | None, config_path: Path | None) -> None:
    """Print NOTE_PATH, truncated the same way the read_note tool truncates."""
    config = resolve_config(vault, config_path)
    reader = NoteReader(vault_root(config), max_chars=config.vault.max_note_chars)

    try:
        note = reader.read(note_path)
    except SmartSearchError as e:
        raise click.ClickException(e.message) from e

    click.echo(format_note(note))
