"""Shared fixtures for the pattern catalogue test suite."""
import io
import logging
import os

import pytest

from pattern_catalog.application.context import DemoContext
from pattern_catalog.config.schemas import DemoSettings
from pattern_catalog.infrastructure.narration import LatencySimulator, Narrator
from pattern_catalog.infrastructure.patterns import SingletonRegistry


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep PATTERN_CATALOG_* variables from the developer's shell out of tests."""
    for name in list(os.environ):
        if name.startswith("PATTERN_CATALOG_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def narrator():
    """Narrator that records a transcript without printing."""
    return Narrator(stream=io.StringIO(), color=False, echo=False)


@pytest.fixture
def demo_settings():
    return DemoSettings(random_seed=42, forest_size=200, gallery_size=3)


@pytest.fixture
def demo_context(narrator, demo_settings):
    """Demo context with latency disabled and a small, seeded data set."""
    return DemoContext(
        narrator=narrator,
        latency=LatencySimulator(enabled=False),
        singletons=SingletonRegistry(),
        settings=demo_settings,
    )


@pytest.fixture(autouse=True)
def isolate_root_logger():
    """Undo handler changes made by ``setup_logging`` during a test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
