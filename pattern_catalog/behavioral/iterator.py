"""Iterator - walking a product collection without exposing its storage."""
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List

if TYPE_CHECKING:
    from pattern_catalog.application.context import DemoContext


@dataclass(frozen=True)
class Product:
    name: str
    price: float

    def __str__(self) -> str:
        return f"{self.name} - ${self.price:,.2f}"


class ProductIterator(Iterator[Product]):
    """Cursor over a product list. Once exhausted it stays exhausted."""

    def __init__(self, products: List[Product]):
        self._products = products
        self._index = 0

    def has_next(self) -> bool:
        return self._index < len(self._products)

    def __next__(self) -> Product:
        if not self.has_next():
            raise StopIteration
        product = self._products[self._index]
        self._index += 1
        return product

    def __iter__(self) -> "ProductIterator":
        return self


class ProductCollection:
    """Aggregate handing out independent iterators."""

    def __init__(self):
        self._products: List[Product] = []

    def add(self, product: Product) -> None:
        self._products.append(product)

    def create_iterator(self) -> ProductIterator:
        return ProductIterator(self._products)

    def __iter__(self) -> ProductIterator:
        return self.create_iterator()

    def __len__(self) -> int:
        return len(self._products)


def run_demo(context: "DemoContext") -> None:
    """Iterate a small catalogue explicitly and with a for-loop."""
    narrator = context.narrator
    narrator.banner("Iterator Pattern - Product Catalogue Demo")

    collection = ProductCollection()
    collection.add(Product("Laptop", 1200))
    collection.add(Product("Phone", 800))
    collection.add(Product("Headphones", 150))

    narrator.section("Explicit iteration with has_next()")
    iterator = collection.create_iterator()
    while iterator.has_next():
        narrator.say(str(next(iterator)))
    narrator.say(f"Iterator exhausted: {not iterator.has_next()}")
    narrator.blank()

    narrator.section("Iteration with a for-loop")
    total = 0.0
    for product in collection:
        narrator.say(str(product))
        total += product.price
    narrator.say(f"Catalogue total: ${total:,.2f}")
    narrator.blank()
    narrator.banner("Iterator Demo Complete")
