"""Registry package for named factory lookup."""

from .factory_registry import (
    FactoryKind,
    FactoryNotRegisteredError,
    FactoryRegistration,
    FactoryRegistry,
    get_factory_registry,
)

__all__ = [
    "FactoryKind",
    "FactoryNotRegisteredError",
    "FactoryRegistration",
    "FactoryRegistry",
    "get_factory_registry",
]
