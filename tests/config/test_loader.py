"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() source precedence and error mapping
"""

from __future__ import annotations

from pathlib import Path

import pytest

from smartsearch.config.loader import VAULT_PATH_ENV, _deep_merge, _load_yaml, load_config
from smartsearch.core.errors import ConfigError, ErrorCode


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        """Returns empty dict when file doesn't exist."""
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """Loads valid YAML content."""
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("logging:\n  level: DEBUG\n")

        assert _load_yaml(yaml_file) == {"logging": {"level": "DEBUG"}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        """Returns empty dict for empty file."""
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _load_yaml(yaml_file) == {}

    def test_raises_parse_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        """Malformed YAML raises ConfigError with the file path."""
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text("search: [unclosed\n")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code is ErrorCode.CONFIG_PARSE_ERROR
        assert str(yaml_file) in exc_info.value.message

    def test_raises_parse_error_for_non_mapping(self, tmp_path: Path) -> None:
        """A top-level list is not a config."""
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_nested_keys_merge(self) -> None:
        """Nested dicts merge key by key."""
        base = {"vault": {"path": "/a", "max_note_chars": 5}}
        override = {"vault": {"path": "/b"}}

        assert _deep_merge(base, override) == {"vault": {"path": "/b", "max_note_chars": 5}}

    def test_inputs_not_mutated(self) -> None:
        """Neither input is modified."""
        base = {"a": {"b": 1}}
        override = {"a": {"c": 2}}

        _deep_merge(base, override)

        assert base == {"a": {"b": 1}}
        assert override == {"a": {"c": 2}}


class TestLoadConfig:
    """Tests for load_config source precedence."""

    def test_defaults_without_any_source(self) -> None:
        """With no file and no env, defaults apply."""
        config = load_config()
        assert config.vault.path is None
        assert config.search.default_limit == 10

    def test_explicit_missing_file_raises(self, tmp_path: Path) -> None:
        """An explicit path must exist."""
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.yaml")
        assert exc_info.value.code is ErrorCode.CONFIG_FILE_NOT_FOUND

    def test_yaml_values_loaded(self, tmp_path: Path) -> None:
        """Values from an explicit YAML file are applied."""
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("vault:\n  path: /notes\nsearch:\n  default_limit: 5\n")

        config = load_config(yaml_file)

        assert config.vault.path == "/notes"
        assert config.search.default_limit == 5

    def test_vault_env_used_as_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """OBSIDIAN_VAULT_PATH supplies vault.path when nothing else does."""
        monkeypatch.setenv(VAULT_PATH_ENV, "/from-env")

        assert load_config().vault.path == "/from-env"

    def test_yaml_beats_vault_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """An explicit vault.path in YAML wins over OBSIDIAN_VAULT_PATH."""
        monkeypatch.setenv(VAULT_PATH_ENV, "/from-env")
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("vault:\n  path: /from-yaml\n")

        assert load_config(yaml_file).vault.path == "/from-yaml"

    def test_prefixed_env_beats_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """SMARTSEARCH__ env vars override YAML values."""
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("search:\n  default_limit: 5\n")
        monkeypatch.setenv("SMARTSEARCH__SEARCH__DEFAULT_LIMIT", "7")

        assert load_config(yaml_file).search.default_limit == 7

    def test_kwargs_beat_everything(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Direct kwargs have the highest precedence."""
        monkeypatch.setenv(VAULT_PATH_ENV, "/from-env")
        monkeypatch.setenv("SMARTSEARCH__VAULT__PATH", "/from-prefixed-env")

        config = load_config(vault={"path": "/from-kwargs"})

        assert config.vault.path == "/from-kwargs"

    def test_validation_error_mapped_to_config_error(self, tmp_path: Path) -> None:
        """Out-of-range values raise ConfigError naming the field."""
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("search:\n  default_limit: 0\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(yaml_file)
        assert exc_info.value.code is ErrorCode.CONFIG_INVALID_VALUE
        assert exc_info.value.details["field"] == "search.default_limit"
