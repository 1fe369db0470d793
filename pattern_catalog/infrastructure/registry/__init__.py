"""Registries."""

from pattern_catalog.infrastructure.registry.demo_registry import DemoRegistry

__all__ = ["DemoRegistry"]
