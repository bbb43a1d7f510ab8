"""Logging module."""

from classdiagram.core.logger.logger import setup_logging

__all__ = ["setup_logging"]
