"""Factory method: gameplay and vehicle creators."""

from .exceptions import GameplayValidationError, UnknownMissionError, VehicleValidationError
from .factories import (
    DEFAULT_GAMEPLAY_OPTIONS,
    MISSION_GAMEPLAY,
    CarFactory,
    GameplayFactory,
    MissionGameplayFactory,
    RandomGameplayFactory,
    TruckFactory,
    VehicleFactory,
)
from .gameplay import FoggyGameplay, Gameplay, RainyGameplay, SnowyGameplay, SunnyGameplay
from .value_objects import Mission
from .vehicles import Car, Engine, Truck, Vehicle

__all__ = [
    "DEFAULT_GAMEPLAY_OPTIONS",
    "MISSION_GAMEPLAY",
    "Car",
    "CarFactory",
    "Engine",
    "FoggyGameplay",
    "Gameplay",
    "GameplayFactory",
    "GameplayValidationError",
    "Mission",
    "MissionGameplayFactory",
    "RainyGameplay",
    "RandomGameplayFactory",
    "SnowyGameplay",
    "SunnyGameplay",
    "Truck",
    "TruckFactory",
    "UnknownMissionError",
    "Vehicle",
    "VehicleFactory",
    "VehicleValidationError",
]
