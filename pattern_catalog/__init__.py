"""Pattern Catalog - Root Package.

A catalogue of narrated Gang-of-Four design pattern demonstrations. Every
demo builds a few participants, wires them together and narrates what the
pattern does to the console.

Key Components:
    - behavioral: Chain of Responsibility, Command, Iterator, Mediator,
      Memento, Observer, State, Strategy, Template Method, Visitor
    - creational: Abstract Factory, Builder, Factory Method, Prototype,
      Singleton
    - structural: Adapter, Bridge, Composite, Decorator, Facade, Flyweight,
      Proxy
    - application: demo context, catalogue and runner service
    - infrastructure: narration, logging, registries
    - config: typed configuration loading
    - cli: command line interface

Usage:
    >>> pattern-catalog list
    >>> pattern-catalog run flyweight
    >>> python -m pattern_catalog run --all --category structural
"""

from ._version import __version__
from ._package import PACKAGE_NAME

__package_name__ = PACKAGE_NAME
