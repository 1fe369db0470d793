# pattern_catalog/domain/core/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all catalogue errors."""
    pass


class CallerError(DomainException):
    """Raised when an operation is attempted on a role that does not support it."""
    pass


class UnsupportedOperationError(CallerError):
    """Raised when a participant is asked for a capability it lacks."""
    def __init__(self, operation: str, role: str, reason: Optional[str] = None):
        message = f"{role} does not support '{operation}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.operation = operation
        self.role = role
        self.reason = reason


class IndexOutOfRangeError(CallerError, IndexError):
    """Raised when an index falls outside a participant's collection."""
    def __init__(self, collection: str, index: int, size: int):
        super().__init__(
            f"Invalid {collection} index: {index} (valid range 0..{size - 1})"
            if size > 0
            else f"Invalid {collection} index: {index} ({collection} is empty)"
        )
        self.collection = collection
        self.index = index
        self.size = size


class CyclicChainError(CallerError):
    """Raised when a handler chain leads back to a handler already visited."""
    def __init__(self, handler_name: str):
        super().__init__(f"Handler chain loops back to '{handler_name}'")
        self.handler_name = handler_name


class DemoNotFoundError(DomainException, KeyError):
    """Raised when a requested demo is not in the catalogue."""
    def __init__(self, name: str, available: Optional[List[str]] = None):
        super().__init__(f"Demo '{name}' not found")
        self.name = name
        self.available = available or []

    def __str__(self) -> str:
        # KeyError would otherwise quote the message
        return str(self.args[0])


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details
