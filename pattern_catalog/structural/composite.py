"""Composite - a product catalogue of items and nested bundles."""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

from pattern_catalog.domain.core.exceptions import IndexOutOfRangeError, UnsupportedOperationError
from pattern_catalog.infrastructure.narration import Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext


class Component(ABC):
    """Uniform interface for single items and bundles."""

    def __init__(self, name: str):
        self.name = name

    @property
    def is_composite(self) -> bool:
        return False

    @abstractmethod
    def total_price(self) -> float:
        """Price of this item or of everything inside this bundle."""

    @abstractmethod
    def operation(self, narrator: Narrator) -> None:
        """Narrate this component and anything it contains."""

    def add(self, component: "Component") -> None:
        raise UnsupportedOperationError("add", type(self).__name__, "leaf components have no children")

    def remove(self, component: "Component") -> bool:
        raise UnsupportedOperationError("remove", type(self).__name__, "leaf components have no children")

    def get_child(self, index: int) -> "Component":
        raise UnsupportedOperationError("get_child", type(self).__name__, "leaf components have no children")


class Leaf(Component):
    def __init__(self, name: str, price: float):
        super().__init__(name)
        self.price = price

    def total_price(self) -> float:
        return self.price

    def operation(self, narrator: Narrator) -> None:
        narrator.say(f"- {self.name} (${self.price:.2f})")


class Composite(Component):
    def __init__(self, name: str):
        super().__init__(name)
        self._children: List[Component] = []

    @property
    def is_composite(self) -> bool:
        return True

    @property
    def child_count(self) -> int:
        return len(self._children)

    def add(self, component: Component) -> None:
        if component is self:
            raise UnsupportedOperationError("add", "Composite", "a composite cannot contain itself")
        self._children.append(component)

    def remove(self, component: Component) -> bool:
        """Remove a direct child; False if it was not one."""
        if component not in self._children:
            return False
        self._children.remove(component)
        return True

    def get_child(self, index: int) -> Component:
        """
        Child at ``index``.

        Raises:
            IndexOutOfRangeError: If ``index`` is outside the children
        """
        if not 0 <= index < len(self._children):
            raise IndexOutOfRangeError("child", index, len(self._children))
        return self._children[index]

    def total_price(self) -> float:
        return sum(child.total_price() for child in self._children)

    def operation(self, narrator: Narrator) -> None:
        narrator.say(f"{self.name}:")
        with narrator.indented():
            for child in self._children:
                child.operation(narrator)


def run_demo(context: "DemoContext") -> None:
    """Build a home-office catalogue, price it, then modify it."""
    narrator = context.narrator
    narrator.banner("Composite Pattern - Home Office Catalogue Demo")

    mouse = Leaf("Wireless Mouse", 25.99)
    hdmi_cable = Leaf("HDMI Cable", 12.99)
    peripherals = Composite("Computer Peripherals")
    for item in (mouse, Leaf("Mechanical Keyboard", 79.99), Leaf('27" Monitor', 299.99), hdmi_cable):
        peripherals.add(item)

    pc_components = Composite("PC Components")
    for item in (Leaf("Intel i7 Processor", 349.99), Leaf("16GB RAM", 89.99),
                 Leaf("512GB SSD", 69.99), Leaf("ATX Motherboard", 159.99)):
        pc_components.add(item)

    furniture = Composite("Office Furniture")
    for item in (Leaf("Ergonomic Chair", 249.99), Leaf("Standing Desk", 399.99),
                 Leaf("LED Desk Lamp", 39.99)):
        furniture.add(item)

    complete_setup = Composite("Complete Home Office Setup")
    for bundle in (peripherals, pc_components, furniture):
        complete_setup.add(bundle)

    narrator.section("Product Catalog")
    complete_setup.operation(narrator)

    narrator.section("Price Calculation")
    for label, component in (("Peripherals", peripherals), ("PC Components", pc_components),
                             ("Furniture", furniture), ("Complete Setup", complete_setup)):
        narrator.say(f"{label} Total: ${component.total_price():.2f}")

    narrator.section("Uniform Treatment Example")
    for item in (mouse, peripherals):
        narrator.say(f"Processing: {item.name} (composite: {item.is_composite})")
        with narrator.indented():
            item.operation(narrator)

    narrator.section("Dynamic Modification")
    narrator.say("Adding webcam to peripherals...")
    peripherals.add(Leaf("HD Webcam", 59.99))
    narrator.say(f"New peripherals total: ${peripherals.total_price():.2f}")
    narrator.say("Removing HDMI cable from peripherals...")
    peripherals.remove(hdmi_cable)
    narrator.say(f"Updated peripherals total: ${peripherals.total_price():.2f}")

    narrator.section("Accessing Children")
    narrator.say(f"Number of items in PC Components: {pc_components.child_count}")
    narrator.say(f"First item: {pc_components.get_child(0).name}")
    try:
        mouse.add(Leaf("Mouse Pad", 9.99))
    except UnsupportedOperationError as e:
        narrator.say(f"Leaf rejected add: {e}")
    narrator.blank()
    narrator.banner("Composite Demo Complete")
