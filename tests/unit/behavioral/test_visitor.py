"""Tests for computer part visitors."""
import pytest

from pattern_catalog.behavioral.visitor import (
    CPU,
    GPU,
    RAM,
    ComputerPartVisitor,
    PriceCalculatorVisitor,
    SpecsDisplayVisitor,
    Storage,
    UpgradeCheckVisitor,
    create_gaming_pc,
    create_office_pc,
    run_demo,
)
from tests.helpers import said


class RecordingVisitor(ComputerPartVisitor):
    def __init__(self, narrator):
        super().__init__(narrator)
        self.visited = []

    def visit_cpu(self, cpu):
        self.visited.append(("cpu", cpu.model))

    def visit_ram(self, ram):
        self.visited.append(("ram", ram.model))

    def visit_storage(self, storage):
        self.visited.append(("storage", storage.model))

    def visit_gpu(self, gpu):
        self.visited.append(("gpu", gpu.model))


class TestComputerVisitors:
    """Test double dispatch over the part list."""

    def test_parts_are_visited_in_order_by_type(self, narrator):
        visitor = RecordingVisitor(narrator)
        create_gaming_pc(narrator).accept(visitor)
        assert [kind for kind, _ in visitor.visited] == ["cpu", "ram", "storage", "gpu"]

    def test_gaming_pc_price(self, narrator):
        visitor = PriceCalculatorVisitor(narrator)
        create_gaming_pc(narrator).accept(visitor)
        assert visitor.total_price == pytest.approx(2099.96)

    def test_office_pc_price(self, narrator):
        visitor = PriceCalculatorVisitor(narrator)
        create_office_pc(narrator).accept(visitor)
        assert visitor.total_price == pytest.approx(234.97)

    def test_gaming_pc_needs_no_upgrades(self, narrator):
        visitor = UpgradeCheckVisitor(narrator)
        create_gaming_pc(narrator).accept(visitor)
        visitor.display_summary()
        assert visitor.upgrade_count == 0
        assert said(narrator, "All components meet current standards!")

    def test_office_pc_upgrades(self, narrator):
        visitor = UpgradeCheckVisitor(narrator)
        create_office_pc(narrator).accept(visitor)
        visitor.display_summary()
        assert visitor.upgrade_count == 3
        assert said(narrator, "Checking CPU: Intel Core i3-10100 ... OK")
        assert said(narrator, "Checking RAM: Kingston Value DDR3 ... UPGRADE RECOMMENDED")
        assert said(narrator, "3 component(s) need upgrading")

    @pytest.mark.parametrize(
        "part,expected",
        [
            (CPU("Slow", 50.0, 2, 3.0), 1),
            (CPU("Low clock", 50.0, 8, 2.0), 1),
            (RAM("Small", 20.0, 4, "DDR4"), 1),
            (RAM("Fine", 40.0, 16, "DDR4"), 0),
            (Storage("Tiny SSD", 30.0, 128, "SSD"), 1),
            (GPU("Big", 500.0, 4, "AMD"), 0),
        ],
    )
    def test_upgrade_rules(self, narrator, part, expected):
        visitor = UpgradeCheckVisitor(narrator)
        part.accept(visitor)
        assert visitor.upgrade_count == expected

    def test_specs_visitor_leaves_parts_untouched(self, narrator):
        computer = create_office_pc(narrator)
        before = [repr(part) for part in computer.parts]
        computer.accept(SpecsDisplayVisitor(narrator))
        assert [repr(part) for part in computer.parts] == before

    def test_demo_runs(self, demo_context):
        run_demo(demo_context)
        assert said(demo_context.narrator, "Total System Price: $2099.96")
