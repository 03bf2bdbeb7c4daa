"""Collection loading from a vault's ``.smart-env/multi`` directory.

A missing directory or an unreadable file is a valid "no data" state, never an
error. Files are processed in sorted filename order so that when two files
carry the same path the winner does not depend on the platform's directory
listing order.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterator
from pathlib import Path

import structlog

from smartsearch.config.constants import EMBEDDINGS_SUBDIR, MODEL_ID, RECORD_EXTENSION
from smartsearch.index.models import Collection, EmbeddingRecord
from smartsearch.index.parser import iter_records

log = structlog.get_logger(__name__)


def embeddings_dir(vault_root: Path) -> Path:
    return vault_root.joinpath(*EMBEDDINGS_SUBDIR)


def _record_files(directory: Path) -> list[Path] | None:
    try:
        entries = list(directory.iterdir())
    except OSError:
        return None
    return sorted(
        (p for p in entries if p.name.endswith(RECORD_EXTENSION) and p.is_file()),
        key=lambda p: p.name,
    )


def _read_records(path: Path, model_id: str) -> Iterator[EmbeddingRecord]:
    try:
        raw = path.read_bytes()
    except OSError as e:
        log.debug("collection.file_unreadable", file=str(path), error=str(e))
        return
    yield from iter_records(raw.decode("utf-8", errors="replace"), model_id=model_id)


def load_collection(vault_root: Path | str, *, model_id: str = MODEL_ID) -> Collection:
    """Build a Collection from every .ajson file under the vault. Never raises.

    Later files (by name) overwrite earlier ones for the same record path.
    """
    directory = embeddings_dir(Path(vault_root))
    files = _record_files(directory)
    if files is None:
        log.info("collection.directory_missing", directory=str(directory))
        return Collection.empty()

    def records() -> Iterator[EmbeddingRecord]:
        for path in files:
            yield from _read_records(path, model_id)

    collection = Collection.from_records(records())
    log.info(
        "collection.loaded",
        directory=str(directory),
        files=len(files),
        records=len(collection),
    )
    return collection


class CollectionStore:
    """Holds the live Collection snapshot for the process.

    Readers take ``snapshot`` once per operation. ``reload`` builds a complete
    new Collection before publishing it with a single reference assignment, so
    in-flight readers never see a partially built snapshot.
    """

    def __init__(
        self,
        vault_root: Path,
        collection: Collection | None = None,
        *,
        model_id: str = MODEL_ID,
    ) -> None:
        self._vault_root = vault_root
        self._model_id = model_id
        self._snapshot = collection if collection is not None else Collection.empty()

    @property
    def vault_root(self) -> Path:
        return self._vault_root

    @property
    def snapshot(self) -> Collection:
        return self._snapshot

    def reload(self) -> Collection:
        fresh = load_collection(self._vault_root, model_id=self._model_id)
        self._snapshot = fresh
        return fresh

    async def areload(self) -> Collection:
        """Reload with file I/O off the event loop."""
        fresh = await asyncio.to_thread(load_collection, self._vault_root, model_id=self._model_id)
        self._snapshot = fresh
        return fresh
