# tests/test_cli.py
"""
Tests for the lexirank CLI (search and config commands).
"""

from __future__ import annotations

import json

import pytest
import yaml
from typer.testing import CliRunner

from lexirank.cli.cli import app

runner = CliRunner()

pytestmark = pytest.mark.tier2


@pytest.fixture
def corpus(isolated_config):
    cats = isolated_config / "cats.txt"
    cats.write_text("The cat sat on the mat.", encoding="utf-8")
    stocks = isolated_config / "stocks.txt"
    stocks.write_text("Stock markets rallied today.", encoding="utf-8")
    return cats, stocks


class TestCLIApp:
    """Top-level app behaviour."""

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert "search" in result.output
        assert "config" in result.output

    def test_search_help(self):
        result = runner.invoke(app, ["search", "--help"])

        assert result.exit_code == 0
        assert "--query" in result.output


class TestSearchCommand:
    """Tests for lexirank search."""

    def test_ranks_matching_file(self, corpus):
        cats, stocks = corpus

        result = runner.invoke(app, ["search", str(cats), str(stocks), "-q", "cat mat", "-k", "1"])

        assert result.exit_code == 0, result.output
        assert "cats.txt" in result.output
        assert "Score" in result.output

    def test_query_required(self, corpus):
        cats, _ = corpus

        result = runner.invoke(app, ["search", str(cats)])

        assert result.exit_code != 0

    def test_nothing_indexable(self, isolated_config):
        empty = isolated_config / "empty.txt"
        empty.write_text("   ", encoding="utf-8")

        result = runner.invoke(app, ["search", str(empty), "-q", "cat"])

        assert result.exit_code == 1
        assert "No documents" in result.output

    def test_unreadable_file_skipped(self, corpus):
        cats, _ = corpus
        missing = cats.parent / "missing.txt"

        result = runner.invoke(app, ["search", str(missing), str(cats), "-q", "cat"])

        assert result.exit_code == 0, result.output
        assert "Skipped" in result.output
        assert "cats.txt" in result.output

    def test_bracketed_filename_printed_verbatim(self, isolated_config):
        draft = isolated_config / "report[draft].txt"
        draft.write_text("The cat sat on the mat.", encoding="utf-8")

        result = runner.invoke(app, ["search", str(draft), "-q", "cat"])

        assert result.exit_code == 0, result.output
        assert "Indexed report[draft].txt" in result.output

    def test_unmatched_query_still_lists_passages(self, corpus):
        cats, _ = corpus

        result = runner.invoke(app, ["search", str(cats), "-q", "zebra"])

        assert result.exit_code == 0, result.output
        assert "0.000" in result.output

    def test_bad_config(self, corpus):
        cats, _ = corpus
        bad = cats.parent / "bad.yaml"
        bad.write_text(yaml.dump({"retrieval": {"limit": 0}}), encoding="utf-8")

        result = runner.invoke(app, ["search", str(cats), "-q", "cat", "--config", str(bad)])

        assert result.exit_code == 1
        assert "config" in result.output.lower()


class TestConfigCommand:
    """Tests for lexirank config."""

    def test_json_output(self, isolated_config):
        result = runner.invoke(app, ["config", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["retrieval"]["limit"] == 5
        assert data["chunking"] == {"chunk_size": 800, "chunk_overlap": 200}

    def test_yaml_output_with_override(self, isolated_config):
        path = isolated_config / "custom.yaml"
        path.write_text(yaml.dump({"retrieval": {"limit": 9}}), encoding="utf-8")

        result = runner.invoke(app, ["config", "--config", str(path)])

        assert result.exit_code == 0, result.output
        assert "limit: 9" in result.output

    def test_missing_config_file(self, isolated_config):
        result = runner.invoke(app, ["config", "--config", str(isolated_config / "nope.yaml")])

        assert result.exit_code == 1
        assert "not found" in result.output.lower()

    def test_bracketed_config_path(self, isolated_config):
        folder = isolated_config / "cfg[" / "x]"
        folder.mkdir(parents=True)
        path = folder / "c.yaml"
        path.write_text(yaml.dump({"retrieval": {"limit": 7}}), encoding="utf-8")

        result = runner.invoke(app, ["config", "--config", str(path)])

        assert result.exit_code == 0, result.output
        assert "limit: 7" in result.output
