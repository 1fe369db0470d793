"""Configuration package."""

from pattern_catalog.config.manager import ConfigurationManager
from pattern_catalog.config.schemas import (
    AppConfig,
    DemoSettings,
    LogFileConfig,
    LoggingConfig,
    NarrationConfig,
)

__all__ = [
    "ConfigurationManager",
    "AppConfig",
    "LoggingConfig",
    "LogFileConfig",
    "NarrationConfig",
    "DemoSettings",
]
