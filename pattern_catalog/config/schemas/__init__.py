"""Configuration schemas."""

from .app_schema import AppConfig, validate_config
from .logging_schema import LogFileConfig, LoggingConfig
from .narration_schema import DemoSettings, NarrationConfig

__all__ = [
    "AppConfig",
    "validate_config",
    "LoggingConfig",
    "LogFileConfig",
    "NarrationConfig",
    "DemoSettings",
]
