"""Singleton registry - explicit owner of create-on-first-use instances."""
import threading
from typing import Any, Dict, Optional, Type, TypeVar, cast

from pattern_catalog.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry:
    """
    Holds at most one instance per class.

    The registry is an ordinary object handed to whoever needs shared
    instances, so the lifetime of every "singleton" is the lifetime of the
    registry that owns it. ``clear()`` ends that lifetime explicitly.
    """

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._lock = threading.RLock()
        self.logger = get_logger(__name__)

    def get(self, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of ``singleton_class``, creating it on first use.

        Args:
            singleton_class: The class to get an instance of
            *args: Constructor arguments, used only when creating
            **kwargs: Constructor keyword arguments, used only when creating

        Returns:
            The one instance held for ``singleton_class``
        """
        with self._lock:
            if singleton_class not in self._instances:
                self.logger.debug("Creating singleton", cls=singleton_class.__name__)
                self._instances[singleton_class] = singleton_class(*args, **kwargs)
            return cast(T, self._instances[singleton_class])

    def register(self, singleton_class: Type[T], instance: T) -> None:
        """Register a pre-created instance."""
        with self._lock:
            self._instances[singleton_class] = instance

    def has(self, singleton_class: Type) -> bool:
        """Check whether an instance exists for ``singleton_class``."""
        with self._lock:
            return singleton_class in self._instances

    def clear(self, singleton_class: Optional[Type] = None) -> None:
        """Drop one held instance, or all of them."""
        with self._lock:
            if singleton_class is None:
                self._instances.clear()
            else:
                self._instances.pop(singleton_class, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)
