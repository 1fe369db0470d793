"""Decorator - coffee orders wrapped in condiments."""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext


class Beverage(ABC):
    @abstractmethod
    def get_description(self) -> str: ...

    @abstractmethod
    def cost(self) -> float: ...

    def __str__(self) -> str:
        return f"{self.get_description()} ${self.cost():.2f}"


class _Coffee(Beverage):
    description = ""
    price = 0.0

    def get_description(self) -> str:
        return self.description

    def cost(self) -> float:
        return self.price


class Espresso(_Coffee):
    description = "Espresso"
    price = 1.99


class HouseBlend(_Coffee):
    description = "House Blend Coffee"
    price = 0.89


class DarkRoast(_Coffee):
    description = "Dark Roast Coffee"
    price = 0.99


class CondimentDecorator(Beverage):
    """Wraps a beverage, adding its own name and price."""

    name = ""
    price = 0.0

    def __init__(self, beverage: Beverage):
        self.beverage = beverage

    def get_description(self) -> str:
        return f"{self.beverage.get_description()}, {self.name}"

    def cost(self) -> float:
        return round(self.beverage.cost() + self.price, 2)


class Milk(CondimentDecorator):
    name = "Milk"
    price = 0.10


class Mocha(CondimentDecorator):
    name = "Mocha"
    price = 0.20


class Soy(CondimentDecorator):
    name = "Soy"
    price = 0.15


class Whip(CondimentDecorator):
    name = "Whip"
    price = 0.70


def run_demo(context: "DemoContext") -> None:
    """Order plain and decorated coffees."""
    narrator = context.narrator
    narrator.banner("Decorator Pattern - Coffee Shop Demo")

    narrator.say(str(Espresso()))
    narrator.say(str(Whip(Mocha(Mocha(DarkRoast())))))
    narrator.say(str(Whip(Mocha(Soy(HouseBlend())))))
    narrator.say(str(Milk(Espresso())))
    narrator.blank()
    narrator.banner("Decorator Demo Complete")
