"""Shared fixtures for MCP tests."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from smartsearch.config.models import SmartSearchConfig, VaultConfig
from smartsearch.mcp.context import AppContext


class FakeEncoder:
    """Encodes every query to the same vector and remembers what it saw."""

    def __init__(self, vector: Sequence[float] = (1.0, 0.0, 0.0)) -> None:
        self.vector = list(vector)
        self.queries: list[str] = []

    async def encode(self, text: str) -> Sequence[float]:
        self.queries.append(text)
        return self.vector


@pytest.fixture
def fake_encoder() -> FakeEncoder:
    return FakeEncoder()


@pytest.fixture
def config(vault: Path) -> SmartSearchConfig:
    """Config pointing at the fixture vault."""
    return SmartSearchConfig(vault=VaultConfig(path=str(vault)))


@pytest.fixture
def app_ctx(config: SmartSearchConfig, fake_encoder: FakeEncoder) -> AppContext:
    """Context over the fixture vault with a fake encoder."""
    return AppContext.create(config, encoder=fake_encoder)
