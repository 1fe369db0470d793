"""Simulated processing latency for demos that narrate slow work."""
import time
from typing import Callable

from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class LatencySimulator:
    """
    Pauses to simulate processing time.

    Disabled simulators return immediately; delays carry no correctness
    meaning and exist only so narrated timings differ.
    """

    def __init__(self, enabled: bool = False, scale: float = 1.0,
                 sleep: Callable[[float], None] = time.sleep):
        if scale < 0:
            raise ValueError("Latency scale must not be negative")
        self.enabled = enabled
        self.scale = scale
        self._sleep = sleep

    def pause(self, milliseconds: int) -> float:
        """
        Simulate ``milliseconds`` of work.

        Returns:
            Seconds actually slept
        """
        if not self.enabled or milliseconds <= 0 or self.scale == 0:
            return 0.0
        seconds = milliseconds * self.scale / 1000.0
        logger.debug("Simulating latency", milliseconds=milliseconds, seconds=seconds)
        self._sleep(seconds)
        return seconds
