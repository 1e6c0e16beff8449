"""Abstract factory: scene factories producing consistent weather and lighting."""

from .exceptions import InvalidCombinationError, SceneValidationError
from .factories import (
    NAMED_FACTORIES,
    CombinationSceneFactory,
    RainyNightFactory,
    RandomSceneFactory,
    SceneFactory,
    SnowyNoonFactory,
    SunnyMorningFactory,
    factory_for,
)
from .products import (
    LIGHTING_VARIANTS,
    WEATHER_VARIANTS,
    EveningLighting,
    FoggyWeather,
    Lighting,
    MorningLighting,
    NightLighting,
    NoonLighting,
    RainyWeather,
    Scene,
    SnowyWeather,
    SunnyWeather,
    Weather,
)
from .value_objects import VALID_COMBINATIONS, SceneCombination, TimeOfDay, WeatherKind

__all__ = [
    "LIGHTING_VARIANTS",
    "NAMED_FACTORIES",
    "VALID_COMBINATIONS",
    "WEATHER_VARIANTS",
    "CombinationSceneFactory",
    "EveningLighting",
    "FoggyWeather",
    "InvalidCombinationError",
    "Lighting",
    "MorningLighting",
    "NightLighting",
    "NoonLighting",
    "RainyNightFactory",
    "RainyWeather",
    "RandomSceneFactory",
    "Scene",
    "SceneCombination",
    "SceneFactory",
    "SceneValidationError",
    "SnowyNoonFactory",
    "SnowyWeather",
    "SunnyMorningFactory",
    "SunnyWeather",
    "TimeOfDay",
    "Weather",
    "WeatherKind",
    "factory_for",
]
