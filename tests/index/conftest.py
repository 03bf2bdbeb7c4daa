"""Shared fixtures for collection tests."""

from __future__ import annotations

import pytest

from smartsearch.index.models import Collection, EmbeddingRecord, RecordKind


@pytest.fixture
def sample_collection() -> Collection:
    """Four documents whose scores against [1, 0, 0] are 1.0, 0.0, 0.707 and -1.0."""
    return Collection.from_records(
        [
            EmbeddingRecord("alpha", (1.0, 0.0, 0.0), RecordKind.DOCUMENT),
            EmbeddingRecord("beta", (0.0, 1.0, 0.0), RecordKind.DOCUMENT),
            EmbeddingRecord("gamma", (1.0, 1.0, 0.0), RecordKind.DOCUMENT),
            EmbeddingRecord("delta", (-1.0, 0.0, 0.0), RecordKind.DOCUMENT),
        ]
    )
