"""Tests for simulated latency."""
from unittest.mock import Mock

import pytest

from pattern_catalog.infrastructure.narration import LatencySimulator


class TestLatencySimulator:
    """Test pausing behaviour."""

    def test_disabled_by_default(self):
        sleep = Mock()
        assert LatencySimulator(sleep=sleep).pause(1000) == 0.0
        sleep.assert_not_called()

    def test_enabled_sleeps_scaled_time(self):
        sleep = Mock()
        simulator = LatencySimulator(enabled=True, scale=0.5, sleep=sleep)
        assert simulator.pause(200) == pytest.approx(0.1)
        sleep.assert_called_once_with(pytest.approx(0.1))

    @pytest.mark.parametrize("milliseconds,scale", [(0, 1.0), (-10, 1.0), (100, 0.0)])
    def test_nothing_to_wait_for(self, milliseconds, scale):
        sleep = Mock()
        simulator = LatencySimulator(enabled=True, scale=scale, sleep=sleep)
        assert simulator.pause(milliseconds) == 0.0
        sleep.assert_not_called()

    def test_negative_scale_is_rejected(self):
        with pytest.raises(ValueError, match="must not be negative"):
            LatencySimulator(scale=-1)
