# lexirank/cli/commands/search.py
"""
Search command.

Usage:
    lexirank search notes.txt report.txt -q "quarterly revenue"
    lexirank search docs/*.txt -q "cat mat" -k 3 --verbose

Every invocation builds a fresh in-memory index; nothing is saved.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape

from lexirank.cli.ui import ui
from lexirank.config.loader import load_config
from lexirank.config.schema import LexiRankConfig
from lexirank.core.exceptions import ConfigError, IngestionError
from lexirank.ingestion.service import DocumentService
from lexirank.logging.logger import configure_logging, get_logger
from lexirank.logging.tags import CLI

logger = get_logger(__name__)


def _load_config_safe(path: Optional[Path]) -> LexiRankConfig:
    """Load config or exit with a helpful message."""
    try:
        return load_config(path)
    except ConfigError as e:
        ui.error(f"Failed to load config: {escape(str(e))}")
        raise typer.Exit(1)


def _ingest_all(service: DocumentService, files: List[Path]) -> int:
    """Ingest every readable file, warning about the rest. Returns the count indexed."""
    indexed = 0
    for path in files:
        try:
            document = service.ingest_file(path)
        except IngestionError as e:
            ui.warning(f"Skipped {escape(str(path))}", detail=escape(str(e)))
            continue
        ui.info(f"Indexed {escape(document.filename)} ({document.chunk_count} chunks)")
        indexed += 1
    return indexed


def command(
    files: List[Path],
    query: str,
    limit: Optional[int] = None,
    config: Optional[Path] = None,
    verbose: bool = False,
) -> None:
    """Index `files` and print the passages that best match `query`."""
    cfg = _load_config_safe(config)
    configure_logging("DEBUG" if verbose else cfg.logging.level)

    service = DocumentService.from_config(cfg)

    ui.header("lexirank search", escape(query))
    if _ingest_all(service, files) == 0:
        ui.error("No documents could be indexed.")
        raise typer.Exit(1)

    sources = service.search(query, limit=limit)
    logger.debug(f"{CLI} {len(sources)} results across {service.index.size()} chunks")

    ui.sources_table(sources)
