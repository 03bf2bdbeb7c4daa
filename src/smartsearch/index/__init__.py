"""Embedding collection: parsing, loading, similarity and ranking."""

from smartsearch.index.loader import CollectionStore, load_collection
from smartsearch.index.models import (
    Collection,
    CollectionStats,
    EmbeddingRecord,
    RecordKind,
    SearchHit,
    SearchOptions,
)
from smartsearch.index.parser import parse_content, parse_line
from smartsearch.index.ranking import collection_stats, find_similar, rank_by_vector, search
from smartsearch.index.similarity import cosine_similarity

__all__ = [
    "Collection",
    "CollectionStats",
    "CollectionStore",
    "EmbeddingRecord",
    "RecordKind",
    "SearchHit",
    "SearchOptions",
    "collection_stats",
    "cosine_similarity",
    "find_similar",
    "load_collection",
    "parse_content",
    "parse_line",
    "rank_by_vector",
    "search",
]
