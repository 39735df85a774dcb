# Standard library imports
from typing import Any, Callable, Dict, Type, TypeVar

T = TypeVar("T")


class BaseContainer:
    """
    Minimal type-keyed registry.

    Singletons are shared instances; factories build a new instance on every
    ``get``. A singleton registered for a type shadows any factory for it.
    """

    def __init__(self) -> None:
        self._singletons: Dict[type, Any] = {}
        self._factories: Dict[type, Callable[[], Any]] = {}

    def register_singleton(self, interface: Type[T], instance: T) -> None:
        self._singletons[interface] = instance

    def register_factory(self, interface: Type[T], factory: Callable[[], T]) -> None:
        self._factories[interface] = factory

    def get(self, interface: Type[T]) -> T:
        """
        Resolve a registered dependency

        Raises:
            ValueError: If nothing is registered for the type
        """
        if interface in self._singletons:
            return self._singletons[interface]
        if interface in self._factories:
            return self._factories[interface]()
        raise ValueError(f"No registration for {interface.__name__}")

    def is_registered(self, interface: type) -> bool:
        return interface in self._singletons or interface in self._factories
