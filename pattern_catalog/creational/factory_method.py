"""Factory Method - creators deferring product choice to subclasses."""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from pattern_catalog.infrastructure.narration import Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext


class Product(ABC):
    def __init__(self, narrator: Narrator):
        self.narrator = narrator

    @abstractmethod
    def use(self) -> None: ...


class ConcreteProductA(Product):
    def use(self) -> None:
        self.narrator.say("Using ConcreteProductA")


class ConcreteProductB(Product):
    def use(self) -> None:
        self.narrator.say("Using ConcreteProductB")


class Creator(ABC):
    def __init__(self, narrator: Narrator):
        self.narrator = narrator

    @abstractmethod
    def create_product(self) -> Product:
        """The factory method."""

    def perform_action(self) -> Product:
        """Create a product through the factory method and use it."""
        product = self.create_product()
        product.use()
        return product


class ConcreteCreatorA(Creator):
    def create_product(self) -> Product:
        return ConcreteProductA(self.narrator)


class ConcreteCreatorB(Creator):
    def create_product(self) -> Product:
        return ConcreteProductB(self.narrator)


def run_demo(context: "DemoContext") -> None:
    """Run the same client action through two creators."""
    narrator = context.narrator
    narrator.banner("Factory Method Pattern Demo")
    for label, creator in (("Using CreatorA:", ConcreteCreatorA(narrator)),
                           ("Using CreatorB:", ConcreteCreatorB(narrator))):
        narrator.say(label)
        with narrator.indented():
            creator.perform_action()
    narrator.blank()
    narrator.banner("Factory Method Demo Complete")
