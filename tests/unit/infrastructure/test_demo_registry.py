"""Tests for the demo registry."""
import pytest

from pattern_catalog.domain.core.exceptions import ConfigurationError, DemoNotFoundError
from pattern_catalog.domain.demo import PatternCategory
from pattern_catalog.infrastructure.registry import DemoRegistry


def noop(context):
    pass


class TestDemoRegistry:
    """Test registration and lookup."""

    def setup_method(self):
        self.registry = DemoRegistry()
        self.registry.register_demo("observer", "Observer", PatternCategory.BEHAVIORAL,
                                    "Weather station", noop)
        self.registry.register_demo("Factory_Method", "Factory Method",
                                    PatternCategory.CREATIONAL, "Creators", noop)

    def test_names_are_normalized(self):
        assert self.registry.names() == ["observer", "factory-method"]
        assert self.registry.get("factory method").title == "Factory Method"
        assert self.registry.is_registered("FACTORY-METHOD")

    def test_duplicate_registration_fails(self):
        with pytest.raises(ConfigurationError, match="already registered"):
            self.registry.register_demo("Observer", "Again", PatternCategory.BEHAVIORAL,
                                        "dup", noop)

    def test_unknown_demo(self):
        with pytest.raises(DemoNotFoundError) as exc_info:
            self.registry.get("visitor")
        assert str(exc_info.value) == "Demo 'visitor' not found"
        assert exc_info.value.available == ["observer", "factory-method"]

    def test_unknown_demo_is_a_key_error(self):
        with pytest.raises(KeyError):
            self.registry.get("visitor")

    def test_category_filter(self):
        assert self.registry.names(PatternCategory.CREATIONAL) == ["factory-method"]
        assert self.registry.definitions(PatternCategory.STRUCTURAL) == []

    def test_clear_registrations(self):
        self.registry.clear_registrations()
        assert len(self.registry) == 0
        assert not self.registry.is_registered("observer")

    def test_describe_excludes_runner(self):
        definition = self.registry.get("observer")
        assert definition.describe() == {
            "name": "observer",
            "title": "Observer",
            "category": "behavioral",
            "summary": "Weather station",
        }
        assert "runner" not in definition.model_dump()

    def test_empty_name_is_invalid(self):
        with pytest.raises(ValueError):
            self.registry.register_demo("  ", "Blank", PatternCategory.BEHAVIORAL, "", noop)
