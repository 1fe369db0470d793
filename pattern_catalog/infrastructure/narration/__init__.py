"""Console narration for demos."""

from pattern_catalog.infrastructure.narration.latency import LatencySimulator
from pattern_catalog.infrastructure.narration.narrator import Narrator

__all__ = ["Narrator", "LatencySimulator"]
