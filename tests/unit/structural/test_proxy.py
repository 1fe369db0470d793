"""Tests for the lazy image proxy."""
from unittest.mock import Mock

from pattern_catalog.infrastructure.narration import LatencySimulator
from pattern_catalog.structural.proxy import (
    UNKNOWN_DIMENSIONS,
    ProxyImage,
    RealImage,
    run_demo,
)
from tests.helpers import said


class TestProxyImage:
    """Test lazy loading, caching and access control."""

    def make_loader(self, narrator):
        return Mock(side_effect=lambda name: RealImage(narrator, name))

    def test_nothing_loads_until_first_display(self, narrator):
        loader = self.make_loader(narrator)
        proxy = ProxyImage(narrator, "photo.jpg", loader=loader)

        assert not proxy.is_loaded
        assert proxy.get_dimensions() == UNKNOWN_DIMENSIONS
        loader.assert_not_called()

    def test_real_image_is_loaded_exactly_once(self, narrator):
        loader = self.make_loader(narrator)
        proxy = ProxyImage(narrator, "photo.jpg", loader=loader)

        assert proxy.display() is True
        assert proxy.display() is True
        assert proxy.display() is True

        loader.assert_called_once_with("photo.jpg")
        assert proxy.access_count == 3
        assert proxy.get_dimensions() == "1920x1080"
        assert said(narrator, "Using cached image (no disk access needed)")

    def test_denied_access_counts_but_does_not_load(self, narrator):
        loader = self.make_loader(narrator)
        proxy = ProxyImage(narrator, "private/secret.jpg", loader=loader,
                           access_check=lambda name: False)

        assert proxy.display() is False
        assert proxy.access_count == 1
        assert not proxy.is_loaded
        loader.assert_not_called()
        assert said(narrator, "Access denied to 'private/secret.jpg'")

    def test_statistics_before_and_after_loading(self, narrator):
        proxy = ProxyImage(narrator, "photo.jpg")
        before = proxy.statistics()
        assert before.loaded is False
        assert before.size_mb is None
        assert before.lines() == ["File: photo.jpg", "Access Count: 0", "Loaded: No"]

        proxy.display()
        after = proxy.statistics()
        assert after.loaded is True
        assert after.dimensions == "1920x1080"
        assert after.size_mb == 5
        assert after.load_time_ms == 1000
        assert "Load Time: 1000 ms" in after.lines()

    def test_loading_simulates_latency(self, narrator):
        sleep = Mock()
        proxy = ProxyImage(narrator, "photo.jpg",
                           latency=LatencySimulator(enabled=True, scale=0.5, sleep=sleep))
        proxy.display()
        proxy.display()
        sleep.assert_called_once_with(0.5)

    def test_demo_runs(self, demo_context):
        run_demo(demo_context)
        lines = demo_context.narrator.lines
        assert "Images loaded: 1 of 3" in lines
        assert "Loaded after denied access: False" in lines
        assert "Without proxy: ~15 MB loaded up front" in lines
