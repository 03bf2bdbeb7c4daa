"""Embedding records, the immutable collection snapshot, and ranking value types."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from smartsearch.config.constants import (
    DEFAULT_LIMIT,
    DEFAULT_THRESHOLD,
    SEARCH_MAX_LIMIT,
)
from smartsearch.core.errors import SearchError


class RecordKind(StrEnum):
    """Whole-note vs heading-level embedding.

    Lookup is case-insensitive and accepts the Smart Connections names
    ``source`` and ``block``.
    """

    DOCUMENT = "document"
    SECTION = "section"

    @classmethod
    def _missing_(cls, value: object) -> RecordKind | None:
        if not isinstance(value, str):
            return None
        lowered = value.strip().lower()
        return _KIND_ALIASES.get(lowered)


_KIND_ALIASES = {
    "document": RecordKind.DOCUMENT,
    "source": RecordKind.DOCUMENT,
    "section": RecordKind.SECTION,
    "block": RecordKind.SECTION,
}


@dataclass(frozen=True, slots=True)
class EmbeddingRecord:
    """A single parsed embedding. ``path`` is unique within a collection."""

    path: str
    vector: tuple[float, ...]
    kind: RecordKind


class Collection(Mapping[str, EmbeddingRecord]):
    """Read-only snapshot of all loaded records, keyed by path.

    Built once and never mutated. Reloading builds a new Collection.
    """

    __slots__ = ("_records",)

    def __init__(self, records: Mapping[str, EmbeddingRecord] | None = None) -> None:
        self._records: Mapping[str, EmbeddingRecord] = MappingProxyType(dict(records or {}))

    @classmethod
    def from_records(cls, records: Iterable[EmbeddingRecord]) -> Collection:
        """Build a collection; a later record replaces an earlier one with the same path."""
        by_path: dict[str, EmbeddingRecord] = {}
        for record in records:
            by_path[record.path] = record
        return cls(by_path)

    @classmethod
    def empty(cls) -> Collection:
        return cls()

    def __getitem__(self, path: str) -> EmbeddingRecord:
        return self._records[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"Collection(records={len(self._records)})"

    def records(self) -> Iterator[EmbeddingRecord]:
        return iter(self._records.values())


@dataclass(frozen=True, slots=True)
class SearchHit:
    """One ranked result."""

    path: str
    score: float

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "score": self.score}


@dataclass(frozen=True, slots=True)
class CollectionStats:
    """Summary of a collection snapshot."""

    document_count: int
    section_count: int
    dimensions: int
    model_id: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "documentCount": self.document_count,
            "sectionCount": self.section_count,
            "dimensions": self.dimensions,
            "modelId": self.model_id,
        }


@dataclass(frozen=True, slots=True)
class SearchOptions:
    """Caller-supplied ranking options. ``None`` means "use the default".

    Call ``resolved()`` to get the effective values. Out-of-range values are
    clamped rather than rejected:

    - limit below 1 falls back to the default; above SEARCH_MAX_LIMIT is capped.
    - threshold that is NaN falls back to the default; otherwise clipped to [-1, 1].
    - empty path_prefix means no prefix filter.

    An unrecognised kind string is a caller error and raises SearchError.
    """

    limit: int | None = None
    threshold: float | None = None
    kind: RecordKind | str | None = None
    path_prefix: str | None = None

    def resolved(
        self,
        *,
        default_limit: int = DEFAULT_LIMIT,
        default_threshold: float = DEFAULT_THRESHOLD,
    ) -> ResolvedOptions:
        limit = default_limit if self.limit is None or self.limit < 1 else self.limit
        limit = min(limit, SEARCH_MAX_LIMIT)

        if self.threshold is None or math.isnan(self.threshold):
            threshold = default_threshold
        else:
            threshold = min(max(float(self.threshold), -1.0), 1.0)

        kind: RecordKind | None = None
        if self.kind is not None:
            try:
                kind = RecordKind(self.kind)
            except ValueError as e:
                raise SearchError.invalid_option(
                    "kind", self.kind, "expected 'document' or 'section'"
                ) from e

        prefix = self.path_prefix.lower() if self.path_prefix else None
        return ResolvedOptions(limit=limit, threshold=threshold, kind=kind, path_prefix=prefix)


@dataclass(frozen=True, slots=True)
class ResolvedOptions:
    """Effective ranking options. ``path_prefix`` is already lower-cased."""

    limit: int
    threshold: float
    kind: RecordKind | None
    path_prefix: str | None
