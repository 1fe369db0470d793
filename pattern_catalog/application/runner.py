"""Demo runner service."""
import time
from typing import Callable, Iterable, List, Optional

from pattern_catalog.application.context import DemoContext
from pattern_catalog.domain.core.exceptions import DomainException
from pattern_catalog.domain.demo import DemoDefinition, DemoResult, DemoStatus, PatternCategory
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.registry import DemoRegistry


class DemoRunner:
    """
    Runs demos from a registry.

    Every demo gets a fresh :class:`DemoContext` from ``context_factory`` so
    no state leaks from one demo into the next.
    """

    def __init__(self, registry: DemoRegistry, context_factory: Callable[[], DemoContext]):
        """
        Initialize the runner.

        Args:
            registry: Where demo names are resolved
            context_factory: Builds the context handed to each demo
        """
        self.registry = registry
        self.context_factory = context_factory
        self.logger = get_logger(__name__)

    def run(self, name: str) -> DemoResult:
        """
        Run one demo by name.

        Returns:
            Result record for the demo

        Raises:
            DemoNotFoundError: If ``name`` is not registered
            DomainException: Whatever the demo raised, after logging it
        """
        return self._execute(self.registry.get(name))

    def run_many(self, names: Iterable[str], keep_going: bool = False) -> List[DemoResult]:
        """
        Run several demos in order.

        Every name is resolved before anything runs, so an unknown name fails
        the whole request up front.

        Args:
            names: Demo names to run
            keep_going: Record domain errors as failed results instead of raising

        Returns:
            One result per demo
        """
        definitions = [self.registry.get(name) for name in names]
        return self._execute_all(definitions, keep_going)

    def run_all(self, category: Optional[PatternCategory] = None,
                keep_going: bool = False) -> List[DemoResult]:
        """Run every registered demo, optionally only one category."""
        return self._execute_all(self.registry.definitions(category), keep_going)

    def _execute_all(self, definitions: List[DemoDefinition], keep_going: bool) -> List[DemoResult]:
        results = []
        for definition in definitions:
            try:
                results.append(self._execute(definition))
            except DomainException as e:
                if not keep_going:
                    raise
                results.append(DemoResult(
                    name=definition.name,
                    category=definition.category,
                    status=DemoStatus.FAILED,
                    error=str(e),
                ))
        return results

    def _execute(self, definition: DemoDefinition) -> DemoResult:
        context = self.context_factory()
        lines_before = len(context.narrator.lines)
        self.logger.info("Running demo", demo=definition.name, category=definition.category.value)
        start = time.perf_counter()
        try:
            definition.runner(context)
        except DomainException as e:
            self.logger.error("Demo failed", demo=definition.name, error=str(e))
            raise
        duration_ms = (time.perf_counter() - start) * 1000
        result = DemoResult(
            name=definition.name,
            category=definition.category,
            status=DemoStatus.COMPLETED,
            lines=len(context.narrator.lines) - lines_before,
            duration_ms=round(duration_ms, 3),
        )
        self.logger.info("Demo completed", demo=definition.name, lines=result.lines,
                         duration_ms=result.duration_ms)
        return result
