"""The catalogue of pattern demos."""
from typing import Optional

from pattern_catalog.behavioral import (
    chain_of_responsibility,
    command,
    iterator,
    mediator,
    memento,
    observer,
    state,
    strategy,
    template_method,
    visitor,
)
from pattern_catalog.creational import abstract_factory, builder, factory_method, prototype, singleton
from pattern_catalog.domain.demo import PatternCategory
from pattern_catalog.infrastructure.registry import DemoRegistry
from pattern_catalog.structural import (
    adapter,
    bridge,
    composite,
    decorator,
    facade,
    flyweight,
    proxy,
)

BEHAVIORAL = PatternCategory.BEHAVIORAL
CREATIONAL = PatternCategory.CREATIONAL
STRUCTURAL = PatternCategory.STRUCTURAL

# name, title, category, summary, module
CATALOG = [
    ("chain-of-responsibility", "Chain of Responsibility", BEHAVIORAL,
     "Support tickets escalate through handler tiers until one accepts them",
     chain_of_responsibility),
    ("command", "Command", BEHAVIORAL,
     "Smart-home remote with per-slot commands and a shared undo history", command),
    ("iterator", "Iterator", BEHAVIORAL,
     "Walk a product collection without exposing its storage", iterator),
    ("mediator", "Mediator", BEHAVIORAL,
     "Chat room relays messages so users never reference each other", mediator),
    ("memento", "Memento", BEHAVIORAL,
     "Text editor snapshots restored from an undo history", memento),
    ("observer", "Observer", BEHAVIORAL,
     "Weather station pushes measurements to registered displays", observer),
    ("state", "State", BEHAVIORAL,
     "Bank account tier decides deposit and withdrawal behaviour", state),
    ("strategy", "Strategy", BEHAVIORAL,
     "Shopping cart pays through an interchangeable payment method", strategy),
    ("template-method", "Template Method", BEHAVIORAL,
     "Fixed beverage recipe skeleton with pluggable steps", template_method),
    ("visitor", "Visitor", BEHAVIORAL,
     "Price, describe and audit computer parts without changing them", visitor),
    ("abstract-factory", "Abstract Factory", CREATIONAL,
     "Platform factories produce matching widget families", abstract_factory),
    ("builder", "Builder", CREATIONAL,
     "Director assembles full and minimal products step by step", builder),
    ("factory-method", "Factory Method", CREATIONAL,
     "Creators defer the choice of product to subclasses", factory_method),
    ("prototype", "Prototype", CREATIONAL,
     "Clone configured game characters into independent copies", prototype),
    ("singleton", "Singleton", CREATIONAL,
     "One shared greeting service owned by an explicit registry", singleton),
    ("adapter", "Adapter", STRUCTURAL,
     "MP3 player plays MP4 and VLC files through an adapter", adapter),
    ("bridge", "Bridge", STRUCTURAL,
     "Payment processors decoupled from the payment methods they use", bridge),
    ("composite", "Composite", STRUCTURAL,
     "Product catalogue of single items and nested bundles", composite),
    ("decorator", "Decorator", STRUCTURAL,
     "Coffee orders wrapped in condiments that add cost", decorator),
    ("facade", "Facade", STRUCTURAL,
     "One home-theater interface over four subsystems", facade),
    ("flyweight", "Flyweight", STRUCTURAL,
     "Forest of many trees sharing a few immutable tree types", flyweight),
    ("proxy", "Proxy", STRUCTURAL,
     "Images load lazily on first display and are cached", proxy),
]


def build_catalog(registry: Optional[DemoRegistry] = None) -> DemoRegistry:
    """Register every demo with ``registry`` (a new one when omitted)."""
    if registry is None:
        registry = DemoRegistry()
    for name, title, category, summary, module in CATALOG:
        registry.register_demo(name, title, category, summary, module.run_demo)
    return registry
