"""Prototype - cloning configured game characters."""
import copy
from typing import TYPE_CHECKING, List, Optional

from pattern_catalog.infrastructure.narration import Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext


class GameCharacter:
    """A character that can produce independent copies of itself."""

    def __init__(self, name: str, health: int, attack_power: int,
                 abilities: Optional[List[str]] = None):
        self.name = name
        self.health = health
        self.attack_power = attack_power
        self.abilities = list(abilities or [])

    def clone(self) -> "GameCharacter":
        """Deep copy; nothing mutable is shared with the original."""
        return copy.deepcopy(self)

    def describe(self) -> str:
        abilities = ", ".join(self.abilities) if self.abilities else "none"
        return (f"Character: {self.name} | Health: {self.health} | "
                f"Attack: {self.attack_power} | Abilities: {abilities}")

    def display(self, narrator: Narrator) -> None:
        narrator.say(self.describe())


def run_demo(context: "DemoContext") -> None:
    """Clone a warrior, then customise the clone without touching the original."""
    narrator = context.narrator
    narrator.banner("Prototype Pattern - Game Character Demo")

    warrior = GameCharacter("Warrior", 100, 20, ["Slash", "Shield Block"])
    elite = warrior.clone()
    elite.name = "Elite Warrior"
    elite.health = 150
    elite.abilities.append("Whirlwind")

    warrior.display(narrator)
    elite.display(narrator)
    narrator.say(f"Original abilities untouched: {warrior.abilities == ['Slash', 'Shield Block']}")
    narrator.blank()
    narrator.banner("Prototype Demo Complete")
