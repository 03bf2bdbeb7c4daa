"""CLI utilities."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

import click

from smartsearch.config.loader import load_config
from smartsearch.core.errors import ConfigError

if TYPE_CHECKING:
    from smartsearch.config.models import SmartSearchConfig

F = TypeVar("F", bound=Callable[..., Any])

KIND_CHOICES = ["document", "section", "source", "block"]


def vault_options(func: F) -> F:
    """Attach --vault and --config to a command."""
    func = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="YAML config file (default: ~/.config/smartsearch/config.yaml)",
    )(func)
    func = click.option(
        "--vault",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        default=None,
        help="Obsidian vault root (falls back to OBSIDIAN_VAULT_PATH or the config)",
    )(func)
    return func


def resolve_config(vault: Path | None, config_path: Path | None) -> SmartSearchConfig:
    """Load config with --vault taking precedence over every other source.

    Raises:
        click.ClickException: If the config is invalid or no vault is configured
    """
    overrides: dict[str, Any] = {}
    if vault is not None:
        overrides["vault"] = {"path": str(vault.resolve())}

    try:
        config = load_config(config_path, **overrides)
    except ConfigError as e:
        raise click.ClickException(e.message) from e

    if not config.vault.path:
        raise click.ClickException(
            "No vault configured. Pass --vault PATH or set OBSIDIAN_VAULT_PATH."
        )
    return config


def vault_root(config: SmartSearchConfig) -> Path:
    """Vault root of a config returned by resolve_config."""
    return Path(config.vault.path).expanduser()  # type: ignore[arg-type]
