"""Factory method: creators that defer the choice of concrete product.

Callers hold a ``GameplayFactory`` or ``VehicleFactory`` and call ``create()``;
which concrete variant comes back is decided inside the factory.

Usage:
    factory = MissionGameplayFactory("final")
    gameplay = factory.create()  # RainyGameplay

    factory = RandomGameplayFactory(selector=seeded_selector(42))
    gameplay = factory.create()  # any declared Gameplay variant
"""
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Type, Union

from patternkit.domain.base.exceptions import SelectionError
from patternkit.domain.base.selection import Selector, seeded_selector
from patternkit.domain.factory_method.exceptions import (
    GameplayValidationError,
    VehicleValidationError,
)
from patternkit.domain.factory_method.gameplay import (
    FoggyGameplay,
    Gameplay,
    RainyGameplay,
    SnowyGameplay,
    SunnyGameplay,
)
from patternkit.domain.factory_method.value_objects import Mission
from patternkit.domain.factory_method.vehicles import Car, Engine, Truck, Vehicle
from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

# Every mission maps to exactly one gameplay variant
MISSION_GAMEPLAY: Dict[Mission, Type[Gameplay]] = {
    Mission.TUTORIAL: SunnyGameplay,
    Mission.AMBUSH: FoggyGameplay,
    Mission.SIEGE: SnowyGameplay,
    Mission.FINAL: RainyGameplay,
}

# A pre-built variant, or a zero-argument recipe that builds one
GameplayOption = Union[Gameplay, Callable[[], Gameplay]]

DEFAULT_GAMEPLAY_OPTIONS: Tuple[Gameplay, ...] = (
    SunnyGameplay(),
    FoggyGameplay(),
    SnowyGameplay(),
    RainyGameplay(),
)


class GameplayFactory(ABC):
    """Creator of gameplay for a level."""

    @abstractmethod
    def create(self) -> Gameplay:
        """Create the gameplay."""


class MissionGameplayFactory(GameplayFactory):
    """Deterministic factory: the mission fixes the gameplay."""

    def __init__(self, mission: Union[str, Mission]):
        self.mission = Mission.from_value(mission)

    def create(self) -> Gameplay:
        gameplay = MISSION_GAMEPLAY[self.mission]()
        logger.debug("Created gameplay", mission=self.mission.value,
                     variant=gameplay.variant_name())
        return gameplay


class RandomGameplayFactory(GameplayFactory):
    """
    Randomized factory selecting from an injected list of options.

    New gameplay variants are supported by passing them in, without touching
    this class. Each ``create()`` call draws independently.
    """

    def __init__(self,
                 options: Optional[Sequence[GameplayOption]] = None,
                 selector: Optional[Selector] = None):
        """
        Initialize random gameplay factory.

        Args:
            options: Pre-built gameplay variants or recipes building one
                (defaults to one instance of every known variant)
            selector: Selection function (defaults to a uniform random choice)

        Raises:
            GameplayValidationError: If no options are given
        """
        self._options: Tuple[GameplayOption, ...] = (
            tuple(options) if options is not None else DEFAULT_GAMEPLAY_OPTIONS
        )
        if not self._options:
            raise GameplayValidationError(
                "Random gameplay factory needs at least one option",
                "EMPTY_OPTIONS",
            )
        self._selector = selector or seeded_selector()

    @property
    def options(self) -> Tuple[GameplayOption, ...]:
        return self._options

    def variant_types(self) -> List[Type[Gameplay]]:
        """Gameplay classes this factory can produce, where known up front."""
        types: List[Type[Gameplay]] = []
        for option in self._options:
            if isinstance(option, Gameplay):
                variant = type(option)
            elif isinstance(option, type) and issubclass(option, Gameplay):
                variant = option
            else:
                continue
            if variant not in types:
                types.append(variant)
        return types

    def create(self) -> Gameplay:
        option = self._selector(self._options)
        if not any(option is candidate for candidate in self._options):
            raise SelectionError(option, len(self._options))

        gameplay = option if isinstance(option, Gameplay) else option()
        logger.debug("Created random gameplay", variant=gameplay.variant_name())
        return gameplay


class VehicleFactory(ABC):
    """Creator of vehicles; the engine is always assembled first."""

    @abstractmethod
    def build_engine(self) -> Engine:
        """Assemble the engine for this vehicle."""

    @abstractmethod
    def assemble(self, engine: Engine) -> Vehicle:
        """Assemble the vehicle around an engine."""

    def create(self) -> Vehicle:
        engine = self.build_engine()
        vehicle = self.assemble(engine)
        logger.debug("Created vehicle", variant=vehicle.variant_name(),
                     cost=vehicle.cost())
        return vehicle

    @staticmethod
    def _require_positive(name: str, value: int) -> int:
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise VehicleValidationError(
                f"{name} must be a positive integer, got {value!r}",
                "INVALID_VEHICLE_PARAMETER",
                {name: value},
            )
        return value


class CarFactory(VehicleFactory):
    def __init__(self, seats: int = 4):
        self.seats = self._require_positive("seats", seats)

    def build_engine(self) -> Engine:
        return Engine(cylinders=4, horsepower=150)

    def assemble(self, engine: Engine) -> Vehicle:
        return Car(engine=engine, seats=self.seats)


class TruckFactory(VehicleFactory):
    def __init__(self, payload_tons: int = 10):
        self.payload_tons = self._require_positive("payload_tons", payload_tons)

    def build_engine(self) -> Engine:
        return Engine(cylinders=8, horsepower=400)

    def assemble(self, engine: Engine) -> Vehicle:
        return Truck(engine=engine, payload_tons=self.payload_tons)
