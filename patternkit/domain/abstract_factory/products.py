"""Scene product families: weather and lighting."""
from abc import abstractmethod
from typing import Any, ClassVar, Dict, Type

from patternkit.domain.abstract_factory.value_objects import (
    SceneCombination,
    TimeOfDay,
    WeatherKind,
)
from patternkit.domain.base.product import Product


class Weather(Product):
    """Abstract weather of a scene."""
    kind: ClassVar[WeatherKind]

    @abstractmethod
    def visibility(self) -> int:
        """How far the player can see, as a percentage."""

    def attributes(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "visibility": self.visibility()}


class SunnyWeather(Weather):
    kind = WeatherKind.SUNNY

    def description(self) -> str:
        return "bright sunshine"

    def visibility(self) -> int:
        return 100


class RainyWeather(Weather):
    kind = WeatherKind.RAINY

    def description(self) -> str:
        return "steady rain"

    def visibility(self) -> int:
        return 60


class SnowyWeather(Weather):
    kind = WeatherKind.SNOWY

    def description(self) -> str:
        return "falling snow"

    def visibility(self) -> int:
        return 50


class FoggyWeather(Weather):
    kind = WeatherKind.FOGGY

    def description(self) -> str:
        return "thick fog"

    def visibility(self) -> int:
        return 20


class Lighting(Product):
    """Abstract lighting of a scene, set by the time of day."""
    time_of_day: ClassVar[TimeOfDay]

    @abstractmethod
    def light_level(self) -> int:
        """Ambient light as a percentage."""

    def attributes(self) -> Dict[str, Any]:
        return {"time_of_day": self.time_of_day.value, "light_level": self.light_level()}


class MorningLighting(Lighting):
    time_of_day = TimeOfDay.MORNING

    def description(self) -> str:
        return "soft morning light"

    def light_level(self) -> int:
        return 70


class NoonLighting(Lighting):
    time_of_day = TimeOfDay.NOON

    def description(self) -> str:
        return "harsh noon light"

    def light_level(self) -> int:
        return 100


class EveningLighting(Lighting):
    time_of_day = TimeOfDay.EVENING

    def description(self) -> str:
        return "golden evening light"

    def light_level(self) -> int:
        return 45


class NightLighting(Lighting):
    time_of_day = TimeOfDay.NIGHT

    def description(self) -> str:
        return "moonlit darkness"

    def light_level(self) -> int:
        return 10


WEATHER_VARIANTS: Dict[WeatherKind, Type[Weather]] = {
    WeatherKind.SUNNY: SunnyWeather,
    WeatherKind.RAINY: RainyWeather,
    WeatherKind.SNOWY: SnowyWeather,
    WeatherKind.FOGGY: FoggyWeather,
}

LIGHTING_VARIANTS: Dict[TimeOfDay, Type[Lighting]] = {
    TimeOfDay.MORNING: MorningLighting,
    TimeOfDay.NOON: NoonLighting,
    TimeOfDay.EVENING: EveningLighting,
    TimeOfDay.NIGHT: NightLighting,
}


class Scene(Product):
    """A weather and a lighting produced together by one scene factory."""
    weather: Weather
    lighting: Lighting

    def combination(self) -> SceneCombination:
        return SceneCombination(self.weather.kind, self.lighting.time_of_day)

    def description(self) -> str:
        return f"{self.weather.description()} under {self.lighting.description()}"

    def attributes(self) -> Dict[str, Any]:
        return {
            "combination": str(self.combination()),
            "visibility": self.weather.visibility(),
            "light_level": self.lighting.light_level(),
        }
