"""Demo Registry - Registry pattern for catalogue entries.

Demos register themselves by name; the runner and the CLI resolve names
through the registry instead of importing demo modules directly.
"""
import threading
from typing import Callable, Dict, List, Optional

from pattern_catalog.domain.core.exceptions import ConfigurationError, DemoNotFoundError
from pattern_catalog.domain.demo import DemoDefinition, PatternCategory, normalize_demo_name
from pattern_catalog.infrastructure.logging.logger import get_logger


class DemoRegistry:
    """
    Registry of demo definitions keyed by normalized name.

    Registration order is preserved so listings follow the order demos were
    added. Thread-safe; instances are created and passed around explicitly.
    """

    def __init__(self):
        self._registrations: Dict[str, DemoDefinition] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)

    def register(self, definition: DemoDefinition) -> None:
        """
        Register a demo definition.

        Raises:
            ConfigurationError: If a demo with the same name is already registered
        """
        with self._registry_lock:
            if definition.name in self._registrations:
                raise ConfigurationError(f"Demo '{definition.name}' is already registered")
            self._registrations[definition.name] = definition
        self.logger.debug("Registered demo", demo=definition.name,
                          category=definition.category.value)

    def register_demo(self, name: str, title: str, category: PatternCategory,
                      summary: str, runner: Callable) -> DemoDefinition:
        """Build and register a definition in one call."""
        definition = DemoDefinition(
            name=name, title=title, category=category, summary=summary, runner=runner
        )
        self.register(definition)
        return definition

    def get(self, name: str) -> DemoDefinition:
        """
        Resolve a demo by name.

        Raises:
            DemoNotFoundError: If no demo matches
        """
        key = normalize_demo_name(name)
        with self._registry_lock:
            definition = self._registrations.get(key)
            if definition is None:
                raise DemoNotFoundError(name, list(self._registrations))
            return definition

    def is_registered(self, name: str) -> bool:
        """Check if a demo name is registered."""
        with self._registry_lock:
            return normalize_demo_name(name) in self._registrations

    def definitions(self, category: Optional[PatternCategory] = None) -> List[DemoDefinition]:
        """Registered definitions, optionally restricted to one category."""
        with self._registry_lock:
            values = list(self._registrations.values())
        if category is None:
            return values
        return [d for d in values if d.category == category]

    def names(self, category: Optional[PatternCategory] = None) -> List[str]:
        """Registered names, optionally restricted to one category."""
        return [d.name for d in self.definitions(category)]

    def clear_registrations(self) -> None:
        """Remove every registration."""
        with self._registry_lock:
            self._registrations.clear()

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._registrations)
