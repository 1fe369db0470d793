"""Demo context - process-scoped collaborators handed to every demo."""
import random
from dataclasses import dataclass, field
from typing import Optional

from pattern_catalog.config.schemas import AppConfig, DemoSettings
from pattern_catalog.infrastructure.narration import LatencySimulator, Narrator
from pattern_catalog.infrastructure.patterns import SingletonRegistry


@dataclass
class DemoContext:
    """
    Everything a demo may need beyond its own participants.

    A fresh context per run keeps demos isolated: the singleton registry,
    random source and narration transcript all belong to the run.
    """

    narrator: Narrator
    latency: LatencySimulator = field(default_factory=LatencySimulator)
    singletons: SingletonRegistry = field(default_factory=SingletonRegistry)
    settings: DemoSettings = field(default_factory=DemoSettings)

    def random_source(self) -> random.Random:
        """Random generator seeded from the demo settings."""
        return random.Random(self.settings.random_seed)

    @classmethod
    def from_config(cls, config: AppConfig, narrator: Optional[Narrator] = None) -> "DemoContext":
        """Build a context from validated application configuration."""
        return cls(
            narrator=narrator or Narrator(color=config.narration.color),
            latency=LatencySimulator(
                enabled=config.narration.simulate_latency,
                scale=config.narration.latency_scale,
            ),
            singletons=SingletonRegistry(),
            settings=config.demos,
        )
