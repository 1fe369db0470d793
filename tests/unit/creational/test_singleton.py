"""Tests for the registry-owned greeting service."""
from pattern_catalog.creational.singleton import GreetingService, get_greeting_service, run_demo
from pattern_catalog.infrastructure.patterns import SingletonRegistry


class TestGreetingService:
    """Test identity of the shared service."""

    def setup_method(self):
        self.registry = SingletonRegistry()

    def test_same_instance_until_cleared(self, narrator):
        first = get_greeting_service(self.registry, narrator)
        second = get_greeting_service(self.registry, narrator)
        assert first is second

        first.show_message()
        second.show_message()
        assert first.calls == 2

        self.registry.clear(GreetingService)
        third = get_greeting_service(self.registry, narrator)
        assert third is not first
        assert third.calls == 0

    def test_separate_registries_hold_separate_instances(self, narrator):
        other = SingletonRegistry()
        assert get_greeting_service(self.registry, narrator) is not get_greeting_service(
            other, narrator
        )

    def test_demo_confirms_identity(self, demo_context):
        run_demo(demo_context)
        lines = demo_context.narrator.lines
        assert "Both references point to the same Singleton instance!" in lines
        assert "After clearing the registry a new instance is created: True" in lines
