"""Application context for MCP handlers.

Single object passed to all tool handlers with access to the collection
store, the query encoder and the note reader.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smartsearch.config.models import SmartSearchConfig
    from smartsearch.files.ops import NoteReader
    from smartsearch.index.encoder import QueryEncoder
    from smartsearch.index.loader import CollectionStore
    from smartsearch.index.models import Collection


@dataclass
class AppContext:
    """Context object passed to all MCP tool handlers."""

    config: SmartSearchConfig
    store: CollectionStore
    encoder: QueryEncoder
    note_reader: NoteReader

    @property
    def vault_root(self) -> Path:
        return self.store.vault_root

    @classmethod
    def create(
        cls,
        config: SmartSearchConfig,
        *,
        collection: Collection | None = None,
        encoder: QueryEncoder | None = None,
    ) -> AppContext:
        """Factory to create context with all collaborators wired together.

        Args:
            config: Resolved configuration; vault.path is required
            collection: Preloaded snapshot (loaded from the vault if omitted)
            encoder: Query encoder (fastembed-backed if omitted)

        Raises:
            ConfigError: If vault.path is not configured.
        """
        from smartsearch.core.errors import ConfigError
        from smartsearch.files.ops import NoteReader
        from smartsearch.index.encoder import create_encoder
        from smartsearch.index.loader import CollectionStore, load_collection

        if not config.vault.path:
            raise ConfigError.missing_required("vault.path")
        vault_root = Path(config.vault.path).expanduser()

        if collection is None:
            collection = load_collection(vault_root, model_id=config.encoder.model_id)

        return cls(
            config=config,
            store=CollectionStore(vault_root, collection, model_id=config.encoder.model_id),
            encoder=encoder if encoder is not None else create_encoder(config.encoder),
            note_reader=NoteReader(vault_root, max_chars=config.vault.max_note_chars),
        )
