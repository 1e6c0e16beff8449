"""Factory Registry - Registry pattern for named factory constructors.

This module lets callers (the CLI, configuration) obtain a factory by name
instead of importing concrete factory classes. New factories are added by
registering their constructor without modifying existing code.
"""

import threading
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from patternkit.domain.base.exceptions import DomainException
from patternkit.infrastructure.logging.logger import get_logger


class FactoryKind(str, Enum):
    """Kinds of factories the registry holds."""
    GAMEPLAY = "gameplay"
    VEHICLE = "vehicle"
    SCENE = "scene"


class FactoryNotRegisteredError(DomainException):
    """Exception raised when an unknown factory is requested."""

    def __init__(self, kind: FactoryKind, name: str, available: List[str]):
        super().__init__(
            f"No {kind.value} factory registered as '{name}'. "
            f"Available: {', '.join(available) or 'none'}",
            "FACTORY_NOT_REGISTERED",
            {"kind": kind.value, "name": name, "available": available},
        )
        self.kind = kind
        self.name = name


class FactoryRegistration:
    """Container for factory registration information."""

    def __init__(self,
                 kind: FactoryKind,
                 name: str,
                 constructor: Callable[..., Any],
                 description: str = ""):
        """
        Initialize factory registration.

        Args:
            kind: Kind of factory (gameplay, vehicle, scene)
            name: Name the factory is looked up by (e.g., 'mission', 'sunny-morning')
            constructor: Callable returning a factory instance
            description: Short human-readable description
        """
        self.kind = kind
        self.name = name
        self.constructor = constructor
        self.description = description

    def to_dict(self) -> Dict[str, str]:
        return {"kind": self.kind.value, "name": self.name, "description": self.description}


class FactoryRegistry:
    """
    Registry of factory constructors, keyed by kind and name.

    Thread-safe singleton implementation.
    """

    _instance: Optional['FactoryRegistry'] = None
    _lock = threading.RLock()

    def __init__(self):
        """Initialize factory registry."""
        self._registrations: Dict[Tuple[FactoryKind, str], FactoryRegistration] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    @classmethod
    def get_instance(cls) -> 'FactoryRegistry':
        """Get singleton instance of factory registry."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def register_factory(self,
                         kind: FactoryKind,
                         name: str,
                         constructor: Callable[..., Any],
                         description: str = "") -> None:
        """
        Register a factory constructor.

        Args:
            kind: Kind of factory
            name: Lookup name, unique within the kind
            constructor: Callable returning a factory instance
            description: Short human-readable description

        Raises:
            ValueError: If the name is already registered for this kind
        """
        kind = FactoryKind(kind)
        with self._registration_lock:
            key = (kind, name)
            if key in self._registrations:
                raise ValueError(f"{kind.value.capitalize()} factory '{name}' is already registered")

            self._registrations[key] = FactoryRegistration(kind, name, constructor, description)
            self._logger.debug("Registered factory", kind=kind.value, name=name)

    def unregister_factory(self, kind: FactoryKind, name: str) -> bool:
        """
        Unregister a factory.

        Returns:
            True if the factory was unregistered, False if not found
        """
        with self._registration_lock:
            key = (FactoryKind(kind), name)
            if key in self._registrations:
                del self._registrations[key]
                self._logger.debug("Unregistered factory", kind=key[0].value, name=name)
                return True
            return False

    def is_factory_registered(self, kind: FactoryKind, name: str) -> bool:
        return (FactoryKind(kind), name) in self._registrations

    def get_registered_factories(self, kind: Optional[FactoryKind] = None) -> List[str]:
        """
        Get registered factory names.

        Args:
            kind: Restrict to one kind; all kinds when None

        Returns:
            Sorted list of names (``kind/name`` when listing all kinds)
        """
        with self._registration_lock:
            if kind is None:
                return sorted(f"{k.value}/{n}" for k, n in self._registrations)
            kind = FactoryKind(kind)
            return sorted(n for k, n in self._registrations if k == kind)

    def get_registration(self, kind: FactoryKind, name: str) -> FactoryRegistration:
        """
        Get registration for a factory.

        Raises:
            FactoryNotRegisteredError: If no factory is registered under the name
        """
        kind = FactoryKind(kind)
        with self._registration_lock:
            registration = self._registrations.get((kind, name))
        if registration is None:
            raise FactoryNotRegisteredError(kind, name, self.get_registered_factories(kind))
        return registration

    def get_registrations(self) -> List[FactoryRegistration]:
        with self._registration_lock:
            return [self._registrations[key] for key in sorted(self._registrations)]

    def create_factory(self, kind: FactoryKind, name: str, **kwargs: Any) -> Any:
        """
        Create a factory using its registered constructor.

        Args:
            kind: Kind of factory
            name: Registered name
            **kwargs: Arguments passed to the constructor

        Returns:
            Factory instance

        Raises:
            FactoryNotRegisteredError: If no factory is registered under the name
        """
        registration = self.get_registration(kind, name)
        factory = registration.constructor(**kwargs)
        self._logger.debug("Created factory", kind=registration.kind.value, name=name,
                           factory=type(factory).__name__)
        return factory

    def clear_registrations(self) -> None:
        """Clear all registrations (mainly for testing)."""
        with self._registration_lock:
            self._registrations.clear()
            self._logger.debug("Cleared all factory registrations")


def get_factory_registry() -> FactoryRegistry:
    """Get the singleton factory registry instance."""
    return FactoryRegistry.get_instance()
