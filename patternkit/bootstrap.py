"""Application bootstrap - registers the built-in factories."""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple

from patternkit.domain.abstract_factory import (
    CombinationSceneFactory,
    RainyNightFactory,
    RandomSceneFactory,
    SnowyNoonFactory,
    SunnyMorningFactory,
)
from patternkit.domain.factory_method import (
    CarFactory,
    MissionGameplayFactory,
    RandomGameplayFactory,
    TruckFactory,
)
from patternkit.infrastructure.logging.logger import get_logger
from patternkit.infrastructure.registry import FactoryKind, FactoryRegistry, get_factory_registry

logger = get_logger(__name__)

BUILTIN_FACTORIES: List[Tuple[FactoryKind, str, Callable[..., Any], str]] = [
    (FactoryKind.GAMEPLAY, "mission", MissionGameplayFactory,
     "Gameplay fixed by the mission"),
    (FactoryKind.GAMEPLAY, "random", RandomGameplayFactory,
     "Gameplay drawn from a list of variants"),
    (FactoryKind.VEHICLE, "car", CarFactory, "Car assembled around a 4-cylinder engine"),
    (FactoryKind.VEHICLE, "truck", TruckFactory, "Truck assembled around an 8-cylinder engine"),
    (FactoryKind.SCENE, "sunny-morning", SunnyMorningFactory, "Sunshine in the morning"),
    (FactoryKind.SCENE, "rainy-night", RainyNightFactory, "Rain at night"),
    (FactoryKind.SCENE, "snowy-noon", SnowyNoonFactory, "Snow at noon"),
    (FactoryKind.SCENE, "combination", CombinationSceneFactory,
     "Any valid weather-time combination"),
    (FactoryKind.SCENE, "random", RandomSceneFactory,
     "Valid combination drawn at random"),
]


def register_builtin_factories(registry: Optional[FactoryRegistry] = None) -> FactoryRegistry:
    """
    Register every built-in factory; already registered names are skipped.

    Args:
        registry: Registry to fill (defaults to the singleton)

    Returns:
        The registry
    """
    registry = registry or get_factory_registry()
    registered = 0
    for kind, name, constructor, description in BUILTIN_FACTORIES:
        if registry.is_factory_registered(kind, name):
            continue
        registry.register_factory(kind, name, constructor, description)
        registered += 1
    logger.debug("Built-in factories registered", count=registered)
    return registry
