"""Ranking over a Collection snapshot: query search, similar entries, stats.

All operations are read-only over the snapshot. Equal scores are ordered by
ascending path so results are deterministic.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace
from itertools import islice
from typing import TYPE_CHECKING

from smartsearch.config.constants import DEFAULT_LIMIT, DEFAULT_THRESHOLD, MODEL_ID
from smartsearch.core.errors import SearchError
from smartsearch.index.models import (
    Collection,
    CollectionStats,
    EmbeddingRecord,
    RecordKind,
    ResolvedOptions,
    SearchHit,
    SearchOptions,
)
from smartsearch.index.similarity import VectorLike, cosine_scaled, scaled_vector

if TYPE_CHECKING:
    from smartsearch.index.encoder import QueryEncoder


def _matches(record: EmbeddingRecord, options: ResolvedOptions) -> bool:
    if options.kind is not None and record.kind is not options.kind:
        return False
    if options.path_prefix is not None and not record.path.lower().startswith(options.path_prefix):
        return False
    return True


def _rank(
    reference: VectorLike,
    candidates: Iterable[EmbeddingRecord],
    options: ResolvedOptions,
) -> list[SearchHit]:
    # Filter before scoring so excluded records cost no vector arithmetic
    eligible = (r for r in candidates if _matches(r, options))
    prepared = scaled_vector(reference)
    scored = (
        SearchHit(r.path, cosine_scaled(prepared, scaled_vector(r.vector))) for r in eligible
    )
    kept = (hit for hit in scored if hit.score >= options.threshold)
    ordered = sorted(kept, key=lambda hit: (-hit.score, hit.path))
    return list(islice(ordered, options.limit))


def rank_by_vector(
    query_vector: VectorLike,
    collection: Collection,
    options: SearchOptions | None = None,
    *,
    default_limit: int | None = None,
    default_threshold: float | None = None,
) -> list[SearchHit]:
    """Rank every record in the collection against an already-encoded query."""
    resolved = _resolve(options, default_limit, default_threshold)
    return _rank(query_vector, collection.records(), resolved)


async def search(
    query: str,
    collection: Collection,
    encoder: QueryEncoder,
    options: SearchOptions | None = None,
    *,
    default_limit: int | None = None,
    default_threshold: float | None = None,
) -> list[SearchHit]:
    """Encode a natural-language query and rank the collection against it.

    Options are resolved before encoding so invalid options fail fast.
    Encoder failures propagate unchanged.
    """
    resolved = _resolve(options, default_limit, default_threshold)
    query_vector: Sequence[float] = await encoder.encode(query)
    return _rank(query_vector, collection.records(), resolved)


def find_similar(
    path: str,
    collection: Collection,
    options: SearchOptions | None = None,
    *,
    default_limit: int | None = None,
    default_threshold: float | None = None,
) -> list[SearchHit]:
    """Rank every other record against the record stored at ``path``.

    ``options.path_prefix`` is ignored here.

    Raises:
        SearchError: If ``path`` is not in the collection.
    """
    reference = collection.get(path)
    if reference is None:
        raise SearchError.entry_not_found(path)

    resolved = _resolve(options, default_limit, default_threshold)
    unprefixed = replace(resolved, path_prefix=None)
    others = (r for r in collection.records() if r.path != path)
    return _rank(reference.vector, others, unprefixed)


def collection_stats(collection: Collection, *, model_id: str = MODEL_ID) -> CollectionStats:
    """Count records by kind; dimensions come from the first record seen."""
    documents = 0
    sections = 0
    dimensions = 0
    for record in collection.records():
        if record.kind is RecordKind.DOCUMENT:
            documents += 1
        else:
            sections += 1
        if dimensions == 0:
            dimensions = len(record.vector)
    return CollectionStats(
        document_count=documents,
        section_count=sections,
        dimensions=dimensions,
        model_id=model_id,
    )


def _resolve(
    options: SearchOptions | None,
    default_limit: int | None,
    default_threshold: float | None,
) -> ResolvedOptions:
    return (options or SearchOptions()).resolved(
        default_limit=DEFAULT_LIMIT if default_limit is None else default_limit,
        default_threshold=DEFAULT_THRESHOLD if default_threshold is None else default_threshold,
    )
