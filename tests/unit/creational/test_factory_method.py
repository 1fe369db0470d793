"""Tests for creators and their factory methods."""
from pattern_catalog.creational.factory_method import (
    ConcreteCreatorA,
    ConcreteCreatorB,
    ConcreteProductA,
    ConcreteProductB,
    run_demo,
)


class TestCreators:
    """Test that each creator picks its own product."""

    def test_creator_a(self, narrator):
        product = ConcreteCreatorA(narrator).perform_action()
        assert isinstance(product, ConcreteProductA)
        assert narrator.lines == ["Using ConcreteProductA"]

    def test_creator_b(self, narrator):
        product = ConcreteCreatorB(narrator).perform_action()
        assert isinstance(product, ConcreteProductB)
        assert narrator.lines == ["Using ConcreteProductB"]

    def test_each_call_creates_a_new_product(self, narrator):
        creator = ConcreteCreatorA(narrator)
        assert creator.create_product() is not creator.create_product()

    def test_demo_indents_product_use(self, demo_context):
        run_demo(demo_context)
        assert "  Using ConcreteProductA" in demo_context.narrator.lines
        assert "  Using ConcreteProductB" in demo_context.narrator.lines
