"""Core domain types."""

from pattern_catalog.domain.core.exceptions import (
    CallerError,
    ConfigurationError,
    CyclicChainError,
    DemoNotFoundError,
    DomainException,
    IndexOutOfRangeError,
    UnsupportedOperationError,
)

__all__ = [
    "DomainException",
    "CallerError",
    "UnsupportedOperationError",
    "IndexOutOfRangeError",
    "CyclicChainError",
    "DemoNotFoundError",
    "ConfigurationError",
]
