# tests/test_config_loader.py
"""
Tests for layered configuration loading.

Merge order: package defaults, then explicit path / $LEXIRANK_CONFIG /
./.lexirank/config.yaml.
"""

from __future__ import annotations

import pytest
import yaml
from pydantic import ValidationError

from lexirank.config.loader import (
    DEFAULTS_PATH,
    deep_merge,
    get_config_source,
    load_config,
    load_yaml,
)
from lexirank.config.schema import ChunkingConfig, LexiRankConfig, LoggingConfig
from lexirank.core.exceptions import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)

pytestmark = pytest.mark.tier2


def _write(path, data) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.dump(data), encoding="utf-8")


class TestDefaults:
    """Package defaults."""

    def test_defaults_file_exists(self):
        assert DEFAULTS_PATH.exists()

    def test_load_defaults_only(self, isolated_config):
        config = load_config()

        assert config.retrieval.limit == 5
        assert config.retrieval.snippet_chars == 200
        assert config.chunking.chunk_size == 800
        assert config.chunking.chunk_overlap == 200
        assert config.logging.level == "WARNING"

    def test_defaults_match_schema_defaults(self, isolated_config):
        assert load_config() == LexiRankConfig()

    def test_source_reports_defaults(self, isolated_config):
        assert "package defaults" in get_config_source()


class TestUserOverrides:
    """User config layered over defaults."""

    def test_explicit_path(self, isolated_config):
        path = isolated_config / "custom.yaml"
        _write(path, {"retrieval": {"limit": 3}})

        config = load_config(path)

        assert config.retrieval.limit == 3
        assert config.retrieval.snippet_chars == 200

    def test_env_var(self, isolated_config, monkeypatch):
        path = isolated_config / "env.yaml"
        _write(path, {"chunking": {"chunk_size": 400, "chunk_overlap": 50}})
        monkeypatch.setenv("LEXIRANK_CONFIG", str(path))

        config = load_config()

        assert config.chunking.chunk_size == 400
        assert "overriding defaults" in get_config_source()

    def test_workspace_file(self, isolated_config):
        _write(isolated_config / ".lexirank" / "config.yaml", {"logging": {"level": "debug"}})

        assert load_config().logging.level == "DEBUG"

    def test_explicit_path_beats_env(self, isolated_config, monkeypatch):
        env_path = isolated_config / "env.yaml"
        explicit = isolated_config / "explicit.yaml"
        _write(env_path, {"retrieval": {"limit": 7}})
        _write(explicit, {"retrieval": {"limit": 2}})
        monkeypatch.setenv("LEXIRANK_CONFIG", str(env_path))

        assert load_config(explicit).retrieval.limit == 2

    def test_empty_user_file(self, isolated_config):
        path = isolated_config / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == LexiRankConfig()


class TestErrors:
    """Config failures raise ConfigError subclasses carrying the file path."""

    def test_missing_explicit_file(self, isolated_config):
        with pytest.raises(ConfigNotFoundError, match="missing.yaml"):
            load_config(isolated_config / "missing.yaml")

    def test_invalid_yaml(self, isolated_config):
        path = isolated_config / "bad.yaml"
        path.write_text("retrieval: [unclosed", encoding="utf-8")

        with pytest.raises(ConfigParseError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping_root(self, isolated_config):
        path = isolated_config / "list.yaml"
        path.write_text("- one\n- two\n", encoding="utf-8")

        with pytest.raises(ConfigParseError, match="mapping"):
            load_yaml(path)

    def test_directory_path(self, isolated_config):
        with pytest.raises(ConfigError, match="directory"):
            load_yaml(isolated_config)

    def test_unknown_key(self, isolated_config):
        path = isolated_config / "extra.yaml"
        _write(path, {"retrieval": {"limit": 3, "mystery": True}})

        with pytest.raises(ConfigValidationError) as exc_info:
            load_config(path)

        assert exc_info.value.path == path

    def test_overlap_must_be_smaller_than_size(self, isolated_config):
        path = isolated_config / "overlap.yaml"
        _write(path, {"chunking": {"chunk_size": 100, "chunk_overlap": 100}})

        with pytest.raises(ConfigValidationError, match="chunk_overlap"):
            load_config(path)

    def test_limit_must_be_positive(self, isolated_config):
        path = isolated_config / "limit.yaml"
        _write(path, {"retrieval": {"limit": 0}})

        with pytest.raises(ConfigValidationError):
            load_config(path)


class TestSchema:
    """Direct schema validation."""

    def test_log_level_normalized(self):
        assert LoggingConfig(level="info").level == "INFO"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

    def test_chunking_validation(self):
        with pytest.raises(ValidationError):
            ChunkingConfig(chunk_size=50, chunk_overlap=60)


class TestDeepMerge:
    """Tests for deep_merge()"""

    def test_nested_merge(self):
        base = {"a": 1, "b": {"c": 2, "d": 3}}
        assert deep_merge(base, {"b": {"c": 10}}) == {"a": 1, "b": {"c": 10, "d": 3}}

    def test_lists_replaced(self):
        assert deep_merge({"x": [1, 2]}, {"x": [3]}) == {"x": [3]}

    def test_inputs_untouched(self):
        base = {"b": {"c": 2}}
        deep_merge(base, {"b": {"c": 5}})
        assert base == {"b": {"c": 2}}
