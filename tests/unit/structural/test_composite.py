"""Tests for the catalogue composite."""
import pytest

from pattern_catalog.domain.core.exceptions import (
    IndexOutOfRangeError,
    UnsupportedOperationError,
)
from pattern_catalog.structural.composite import Composite, Leaf, run_demo


class TestCatalogueComposite:
    """Test uniform treatment of items and bundles."""

    def setup_method(self):
        self.mouse = Leaf("Wireless Mouse", 25.99)
        self.keyboard = Leaf("Mechanical Keyboard", 79.99)
        self.peripherals = Composite("Peripherals")
        self.peripherals.add(self.mouse)
        self.peripherals.add(self.keyboard)

    def test_totals_are_recursive(self):
        setup = Composite("Setup")
        setup.add(self.peripherals)
        setup.add(Leaf("Standing Desk", 399.99))

        assert self.peripherals.total_price() == pytest.approx(105.98)
        assert setup.total_price() == pytest.approx(505.97)

    def test_empty_composite_costs_nothing(self):
        assert Composite("Empty").total_price() == 0

    def test_leaf_rejects_child_management(self):
        with pytest.raises(UnsupportedOperationError, match="Leaf does not support 'add'"):
            self.mouse.add(Leaf("Mouse Pad", 9.99))
        with pytest.raises(UnsupportedOperationError):
            self.mouse.remove(self.keyboard)
        with pytest.raises(UnsupportedOperationError):
            self.mouse.get_child(0)

    def test_get_child_bounds(self):
        assert self.peripherals.get_child(1) is self.keyboard
        with pytest.raises(IndexOutOfRangeError, match="Invalid child index: 2"):
            self.peripherals.get_child(2)
        with pytest.raises(IndexError):
            self.peripherals.get_child(-1)

    def test_remove(self):
        assert self.peripherals.remove(self.mouse) is True
        assert self.peripherals.remove(self.mouse) is False
        assert self.peripherals.child_count == 1
        assert self.peripherals.total_price() == pytest.approx(79.99)

    def test_composite_cannot_contain_itself(self):
        with pytest.raises(UnsupportedOperationError):
            self.peripherals.add(self.peripherals)

    def test_operation_indents_children(self, narrator):
        setup = Composite("Setup")
        setup.add(self.peripherals)
        setup.operation(narrator)
        assert narrator.lines == [
            "Setup:",
            "  Peripherals:",
            "    - Wireless Mouse ($25.99)",
            "    - Mechanical Keyboard ($79.99)",
        ]

    def test_is_composite(self):
        assert self.peripherals.is_composite
        assert not self.mouse.is_composite

    def test_demo_runs(self, demo_context):
        run_demo(demo_context)
        lines = demo_context.narrator.lines
        assert "Complete Setup Total: $1778.89" in lines
        assert "First item: Intel i7 Processor" in lines
