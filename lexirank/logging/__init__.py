# lexirank/logging/__init__.py
"""Logging facade for lexirank."""

from lexirank.logging.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
