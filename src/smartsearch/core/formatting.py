"""Plain-text rendering for tool and CLI output.

Design principles:
- One result per line, scores always with 3 decimals
- Empty results say so instead of returning blank text
- Grammatically correct (1 note vs 2 notes)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smartsearch.files.ops import NoteContent
    from smartsearch.index.models import CollectionStats, SearchHit

NO_RESULTS = "No results found."


def format_hits(hits: Sequence[SearchHit]) -> str:
    """Render ranked hits.

    Examples:
        [SearchHit("notes/a.md", 0.7071)] -> "notes/a.md (score: 0.707)"
        [] -> "No results found."
    """
    if not hits:
        return NO_RESULTS
    return "\n".join(f"{hit.path} (score: {hit.score:.3f})" for hit in hits)


def format_stats(stats: CollectionStats) -> str:
    lines = [
        f"Total notes: {stats.document_count}",
        f"Total blocks: {stats.section_count}",
        f"Dimensions: {stats.dimensions}",
        f"Model: {stats.model_id}",
    ]
    return "\n".join(lines)


def format_note(note: NoteContent) -> str:
    """Render note content, marking truncation on a trailing line."""
    if note.truncated:
        return f"{note.content}\n\n[truncated: {note.path} exceeds {len(note.content)} characters]"
    return note.content


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return grammatically correct singular/plural form.

    Args:
        count: The number of items
        singular: Singular form (e.g., "note")
        plural: Plural form (default: singular + "s")

    Returns:
        Formatted string like "1 note" or "3 notes"
    """
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"


def truncate_query(query: str, max_len: int = 50) -> str:
    """Truncate a search query for display and logs.

    Examples:
        "how do I configure the sync plugin on mobile devices" -> "how do I configure the sync plugin on mobile de..."
        "short" -> "short"
    """
    if len(query) <= max_len:
        return query
    return query[: max_len - 3] + "..."
