"""Application bootstrap - wires configuration, logging, catalogue and runner."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pattern_catalog.application.catalog import build_catalog
from pattern_catalog.application.context import DemoContext
from pattern_catalog.application.runner import DemoRunner
from pattern_catalog.config import AppConfig, ConfigurationManager
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging
from pattern_catalog.infrastructure.narration import Narrator
from pattern_catalog.infrastructure.registry import DemoRegistry


class Application:
    """Application context: owns the configuration and the objects built from it."""

    def __init__(self, config_file: Optional[str] = None,
                 overrides: Optional[Dict[str, Any]] = None,
                 narrator: Optional[Narrator] = None) -> None:
        """Initialize the instance."""
        self.config_manager = ConfigurationManager(config_file, overrides)
        self._narrator = narrator
        self._registry: Optional[DemoRegistry] = None
        self._runner: Optional[DemoRunner] = None
        self._initialized = False
        self.logger = get_logger(__name__)

    @property
    def config(self) -> AppConfig:
        return self.config_manager.get_app_config()

    def initialize(self) -> "Application":
        """Load configuration, set up logging and build the catalogue."""
        if self._initialized:
            return self
        config = self.config
        setup_logging(config.logging)
        if self._narrator is None:
            self._narrator = Narrator(color=config.narration.color)
        self._registry = build_catalog()
        self._runner = DemoRunner(self._registry, self.new_context)
        self._initialized = True
        self.logger.info("Application initialized", demos=len(self._registry),
                         environment=config.environment)
        return self

    @property
    def narrator(self) -> Narrator:
        self.initialize()
        return self._narrator

    @property
    def registry(self) -> DemoRegistry:
        self.initialize()
        return self._registry

    @property
    def runner(self) -> DemoRunner:
        self.initialize()
        return self._runner

    def new_context(self) -> DemoContext:
        """Fresh per-demo context sharing only the narrator."""
        return DemoContext.from_config(self.config, self.narrator)


def create_application(config_file: Optional[str] = None,
                       overrides: Optional[Dict[str, Any]] = None,
                       narrator: Optional[Narrator] = None) -> Application:
    """Create and initialize the application."""
    return Application(config_file, overrides, narrator).initialize()
