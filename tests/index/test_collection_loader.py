"""Tests for loading a Collection from a vault."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from smartsearch.index.loader import CollectionStore, embeddings_dir, load_collection
from smartsearch.index.models import RecordKind

WriteAjson = Callable[[Path, str, Sequence[str]], Path]


class TestLoadCollection:
    """load_collection tests."""

    def test_missing_directory_is_empty(self, tmp_path: Path) -> None:
        """A vault without Smart Connections data loads as empty."""
        collection = load_collection(tmp_path)

        assert len(collection) == 0

    def test_embeddings_dir_location(self, tmp_path: Path) -> None:
        """Record files live in .smart-env/multi."""
        assert embeddings_dir(tmp_path) == tmp_path / ".smart-env" / "multi"

    def test_loads_vault(self, vault: Path) -> None:
        """Documents and sections from the fixture vault are loaded."""
        collection = load_collection(vault)

        assert set(collection) == {
            "notes/alpha.md",
            "notes/beta.md",
            "projects/gamma.md",
            "notes/delta.md",
            "notes/alpha.md#Intro",
        }
        assert collection["notes/alpha.md#Intro"].kind is RecordKind.SECTION

    def test_accepts_string_path(self, vault: Path) -> None:
        """The vault root may be given as a string."""
        assert len(load_collection(str(vault))) == 5

    def test_merges_multiple_files(
        self, tmp_path: Path, ajson_line: Callable[..., str], write_ajson: WriteAjson
    ) -> None:
        """Records from every .ajson file are combined."""
        write_ajson(tmp_path, "one.ajson", [ajson_line("smart_sources:a.md", [1.0])])
        write_ajson(tmp_path, "two.ajson", [ajson_line("smart_sources:b.md", [1.0])])

        assert set(load_collection(tmp_path)) == {"a.md", "b.md"}

    def test_later_filename_wins_for_duplicate_path(
        self, tmp_path: Path, ajson_line: Callable[..., str], write_ajson: WriteAjson
    ) -> None:
        """Files are applied in sorted name order regardless of creation order."""
        write_ajson(tmp_path, "b.ajson", [ajson_line("smart_sources:same.md", [0.0, 1.0])])
        write_ajson(tmp_path, "a.ajson", [ajson_line("smart_sources:same.md", [1.0, 0.0])])

        assert load_collection(tmp_path)["same.md"].vector == (0.0, 1.0)

    def test_later_line_wins_within_file(
        self, tmp_path: Path, ajson_line: Callable[..., str], write_ajson: WriteAjson
    ) -> None:
        """The plugin appends updates, so the last line for a path is current."""
        write_ajson(
            tmp_path,
            "notes.ajson",
            [
                ajson_line("smart_sources:a.md", [1.0, 0.0]),
                ajson_line("smart_sources:a.md", [0.5, 0.5]),
            ],
        )

        assert load_collection(tmp_path)["a.md"].vector == (0.5, 0.5)

    def test_ignores_other_extensions_and_directories(
        self, tmp_path: Path, ajson_line: Callable[..., str], write_ajson: WriteAjson
    ) -> None:
        """Only regular .ajson files are read."""
        write_ajson(tmp_path, "notes.json", [ajson_line("smart_sources:json.md", [1.0])])
        write_ajson(tmp_path, "notes.ajson.bak", [ajson_line("smart_sources:bak.md", [1.0])])
        (embeddings_dir(tmp_path) / "nested.ajson").mkdir()
        write_ajson(tmp_path, "real.ajson", [ajson_line("smart_sources:real.md", [1.0])])

        assert set(load_collection(tmp_path)) == {"real.md"}

    def test_invalid_utf8_does_not_discard_file(
        self, tmp_path: Path, ajson_line: Callable[..., str], write_ajson: WriteAjson
    ) -> None:
        """Undecodable bytes only spoil the line they appear on."""
        path = write_ajson(tmp_path, "notes.ajson", [])
        good = ajson_line("smart_sources:good.md", [1.0]).encode()
        path.write_bytes(b'"smart_sources:bad\xff.md": {garbage\n' + good + b"\n")

        assert set(load_collection(tmp_path)) == {"good.md"}

    def test_multi_path_is_a_file(self, tmp_path: Path) -> None:
        """A non-directory where the data directory should be loads as empty."""
        (tmp_path / ".smart-env").mkdir()
        (tmp_path / ".smart-env" / "multi").write_text("oops")

        assert len(load_collection(tmp_path)) == 0


class TestCollectionStore:
    """CollectionStore snapshot tests."""

    def test_defaults_to_empty_snapshot(self, tmp_path: Path) -> None:
        """A store built without a collection starts empty."""
        store = CollectionStore(tmp_path)

        assert len(store.snapshot) == 0
        assert store.vault_root == tmp_path

    def test_reload_publishes_new_snapshot(
        self, tmp_path: Path, ajson_line: Callable[..., str], write_ajson: WriteAjson
    ) -> None:
        """Reload swaps in a fresh collection and leaves the old one untouched."""
        write_ajson(tmp_path, "a.ajson", [ajson_line("smart_sources:a.md", [1.0])])
        store = CollectionStore(tmp_path, load_collection(tmp_path))
        before = store.snapshot

        write_ajson(tmp_path, "b.ajson", [ajson_line("smart_sources:b.md", [1.0])])
        after = store.reload()

        assert set(before) == {"a.md"}
        assert set(after) == {"a.md", "b.md"}
        assert store.snapshot is after

    @pytest.mark.asyncio
    async def test_areload_off_loop(self, vault: Path) -> None:
        """Async reload produces the same snapshot as a blocking load."""
        store = CollectionStore(vault)

        fresh = await store.areload()

        assert len(fresh) == 5
        assert store.snapshot is fresh
