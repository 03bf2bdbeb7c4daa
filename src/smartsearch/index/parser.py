"""Tolerant parser for Smart Connections ``.ajson`` record files.

Each line of an .ajson file is one key/value pair of a JSON object whose
surrounding braces were never written::

    "smart_sources:notes/a.md": {"path": "notes/a.md", "embeddings": {"TaylorAI/bge-micro-v2": {"vec": [0.1, ...]}}},

Files are appended to incrementally by the Obsidian plugin, so truncated or
otherwise malformed lines are expected. Every failure mode degrades to
"skip this line"; nothing in this module raises.
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterator
from typing import Any

from smartsearch.config.constants import DOCUMENT_PREFIX, MODEL_ID, SECTION_PREFIX
from smartsearch.index.models import EmbeddingRecord, RecordKind

_KEY_PREFIXES: tuple[tuple[str, RecordKind], ...] = (
    (DOCUMENT_PREFIX, RecordKind.DOCUMENT),
    (SECTION_PREFIX, RecordKind.SECTION),
)


def _reject_constant(name: str) -> float:
    # NaN / Infinity are not valid JSON; the line is treated as malformed
    raise ValueError(f"invalid literal {name}")


def _parse_pair(line: str) -> tuple[str, Any] | None:
    """Parse ``"key": value`` (trailing comma optional) into (key, value)."""
    normalized = line[:-1] if line.endswith(",") else line
    try:
        parsed = json.loads("{" + normalized + "}", parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return None
    if not isinstance(parsed, dict) or not parsed:
        return None
    key = next(iter(parsed))
    return key, parsed[key]


def _resolve_key(key: str) -> tuple[RecordKind, str] | None:
    for prefix, kind in _KEY_PREFIXES:
        if key.startswith(prefix):
            return kind, key[len(prefix) :]
    return None


def _extract_vector(value: Any, model_id: str) -> tuple[float, ...] | None:
    """Return value.embeddings[model_id].vec as floats, or None if unusable."""
    if not isinstance(value, dict):
        return None
    embeddings = value.get("embeddings")
    if not isinstance(embeddings, dict):
        return None
    model_entry = embeddings.get(model_id)
    if not isinstance(model_entry, dict):
        return None
    vec = model_entry.get("vec")
    if not isinstance(vec, list) or not vec:
        return None
    # bool is an int subclass; true/false in a vector is corruption
    if not all(isinstance(x, (int, float)) and not isinstance(x, bool) for x in vec):
        return None
    try:
        vector = tuple(float(x) for x in vec)
    except OverflowError:
        return None
    if not all(math.isfinite(x) for x in vector):
        return None
    return vector


def parse_line(line: str, *, model_id: str = MODEL_ID) -> EmbeddingRecord | None:
    """Parse one .ajson line into a record, or None when the line is unusable."""
    line = line.strip()
    if not line:
        return None

    pair = _parse_pair(line)
    if pair is None:
        return None
    key, value = pair

    resolved = _resolve_key(key)
    if resolved is None:
        return None
    kind, path = resolved

    vector = _extract_vector(value, model_id)
    if vector is None:
        return None

    return EmbeddingRecord(path=path, vector=vector, kind=kind)


def iter_records(content: str | None, *, model_id: str = MODEL_ID) -> Iterator[EmbeddingRecord]:
    """Yield records from .ajson text in line order."""
    if not content or not isinstance(content, str):
        return
    for raw in content.split("\n"):
        record = parse_line(raw, model_id=model_id)
        if record is not None:
            yield record


def parse_content(content: str | None, *, model_id: str = MODEL_ID) -> list[EmbeddingRecord]:
    """Parse the full text of an .ajson file. Never raises."""
    return list(iter_records(content, model_id=model_id))
