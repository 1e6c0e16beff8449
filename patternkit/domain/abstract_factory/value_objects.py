# patternkit/domain/abstract_factory/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet

from patternkit.domain.abstract_factory.exceptions import SceneValidationError


class WeatherKind(str, Enum):
    """Weather family members."""
    SUNNY = "sunny"
    RAINY = "rainy"
    SNOWY = "snowy"
    FOGGY = "foggy"


class TimeOfDay(str, Enum):
    """Lighting family members."""
    MORNING = "morning"
    NOON = "noon"
    EVENING = "evening"
    NIGHT = "night"


@dataclass(frozen=True, order=True)
class SceneCombination:
    """One weather paired with one time of day."""
    weather: WeatherKind
    time_of_day: TimeOfDay

    def __str__(self) -> str:
        return f"{self.weather.value}-{self.time_of_day.value}"

    @property
    def is_valid(self) -> bool:
        return self in VALID_COMBINATIONS

    @classmethod
    def parse(cls, value: str) -> SceneCombination:
        """Parse a combination written as ``<weather>-<time of day>``."""
        weather, sep, time_of_day = value.strip().lower().partition("-")
        if not sep:
            raise SceneValidationError(
                f"Scene combination must look like 'weather-time', got '{value}'",
                "INVALID_COMBINATION_FORMAT",
                {"value": value},
            )
        try:
            return cls(WeatherKind(weather), TimeOfDay(time_of_day))
        except ValueError:
            raise SceneValidationError(
                f"Unknown weather or time of day in '{value}'",
                "INVALID_COMBINATION_FORMAT",
                {
                    "value": value,
                    "weathers": [w.value for w in WeatherKind],
                    "times_of_day": [t.value for t in TimeOfDay],
                },
            ) from None


def _combinations(weather: WeatherKind, *times: TimeOfDay) -> FrozenSet[SceneCombination]:
    return frozenset(SceneCombination(weather, t) for t in times)


# The only weather/time pairs a scene may be built from
VALID_COMBINATIONS: FrozenSet[SceneCombination] = (
    _combinations(WeatherKind.SUNNY, TimeOfDay.MORNING, TimeOfDay.NOON, TimeOfDay.EVENING)
    | _combinations(WeatherKind.RAINY, TimeOfDay.MORNING, TimeOfDay.EVENING, TimeOfDay.NIGHT)
    | _combinations(WeatherKind.SNOWY, TimeOfDay.MORNING, TimeOfDay.NOON, TimeOfDay.NIGHT)
    | _combinations(WeatherKind.FOGGY, TimeOfDay.MORNING, TimeOfDay.NIGHT)
)
