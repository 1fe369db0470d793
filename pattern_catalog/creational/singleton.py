"""Singleton - one shared greeting service, owned by an explicit registry."""
import itertools
from typing import TYPE_CHECKING

from pattern_catalog.infrastructure.narration import Narrator
from pattern_catalog.infrastructure.patterns import SingletonRegistry

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext

_serial = itertools.count(1)


class GreetingService:
    """The service every caller should share."""

    def __init__(self, narrator: Narrator):
        self.narrator = narrator
        self.serial = next(_serial)
        self.calls = 0

    def show_message(self) -> None:
        self.calls += 1
        self.narrator.say(f"Hello from GreetingService #{self.serial} (call {self.calls})")


def get_greeting_service(registry: SingletonRegistry, narrator: Narrator) -> GreetingService:
    return registry.get(GreetingService, narrator)


def run_demo(context: "DemoContext") -> None:
    """Fetch the service twice, compare identities, then clear the registry."""
    narrator = context.narrator
    registry = context.singletons
    narrator.banner("Singleton Pattern Demo")

    first = get_greeting_service(registry, narrator)
    first.show_message()
    second = get_greeting_service(registry, narrator)
    second.show_message()
    if first is second:
        narrator.say("Both references point to the same Singleton instance!")
    else:
        narrator.say("Different instances exist (should not happen)!")

    registry.clear(GreetingService)
    third = get_greeting_service(registry, narrator)
    third.show_message()
    narrator.say(f"After clearing the registry a new instance is created: {third is not first}")
    narrator.blank()
    narrator.banner("Singleton Demo Complete")
