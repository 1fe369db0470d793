"""Builder - a director assembling products step by step."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from pattern_catalog.infrastructure.narration import Narrator

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext


@dataclass
class Product:
    part_a: Optional[str] = None
    part_b: Optional[str] = None
    part_c: Optional[str] = None

    def parts(self) -> List[str]:
        return [part for part in (self.part_a, self.part_b, self.part_c) if part is not None]

    def show_parts(self, narrator: Narrator) -> None:
        narrator.say("Product parts:")
        for part in self.parts():
            narrator.say(f"  {part}")


class ProductBuilder(ABC):
    @abstractmethod
    def build_part_a(self) -> None: ...

    @abstractmethod
    def build_part_b(self) -> None: ...

    @abstractmethod
    def build_part_c(self) -> None: ...

    @abstractmethod
    def get_product(self) -> Product:
        """Hand out the finished product and start a fresh one."""


class ConcreteProductBuilder(ProductBuilder):
    def __init__(self):
        self._product = Product()

    def reset(self) -> None:
        self._product = Product()

    def build_part_a(self) -> None:
        self._product.part_a = "PartA built by ConcreteProductBuilder"

    def build_part_b(self) -> None:
        self._product.part_b = "PartB built by ConcreteProductBuilder"

    def build_part_c(self) -> None:
        self._product.part_c = "PartC built by ConcreteProductBuilder"

    def get_product(self) -> Product:
        product = self._product
        self.reset()
        return product


class Director:
    """Knows the recipes; the builder knows the parts."""

    def __init__(self, builder: ProductBuilder):
        self.builder = builder

    def construct(self) -> Product:
        self.builder.build_part_a()
        self.builder.build_part_b()
        self.builder.build_part_c()
        return self.builder.get_product()

    def construct_minimal(self) -> Product:
        self.builder.build_part_a()
        return self.builder.get_product()


def run_demo(context: "DemoContext") -> None:
    """Build a full and a minimal product with one builder."""
    narrator = context.narrator
    narrator.banner("Builder Pattern - Product Assembly Demo")
    director = Director(ConcreteProductBuilder())

    narrator.say("Full build:")
    full = director.construct()
    full.show_parts(narrator)
    narrator.blank()

    narrator.say("Minimal build (same builder, reset after the first product):")
    minimal = director.construct_minimal()
    minimal.show_parts(narrator)
    narrator.say(f"Products are distinct: {full is not minimal}")
    narrator.blank()
    narrator.banner("Builder Demo Complete")
