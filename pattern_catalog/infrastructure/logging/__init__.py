"""Structured logging package."""

from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
