"""Abstract factory: one factory creates a whole consistent scene family.

Each concrete factory either hardcodes a compatible weather/lighting pair or
derives both from a single combination taken from ``VALID_COMBINATIONS``.
Weather and lighting are never chosen independently of each other.
"""
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional, Tuple, Type, Union

from patternkit.domain.abstract_factory.exceptions import (
    InvalidCombinationError,
    SceneValidationError,
)
from patternkit.domain.abstract_factory.products import (
    LIGHTING_VARIANTS,
    WEATHER_VARIANTS,
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
from patternkit.domain.abstract_factory.value_objects import (
    VALID_COMBINATIONS,
    SceneCombination,
    TimeOfDay,
    WeatherKind,
)
from patternkit.domain.base.exceptions import SelectionError
from patternkit.domain.base.selection import Selector, seeded_selector
from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class SceneFactory(ABC):
    """Creates the weather and the lighting of one scene."""

    @abstractmethod
    def create_weather(self) -> Weather:
        """Create the weather."""

    @abstractmethod
    def create_lighting(self) -> Lighting:
        """Create the lighting."""

    def create_scene(self) -> Scene:
        """Create weather and lighting together."""
        scene = Scene(weather=self.create_weather(), lighting=self.create_lighting())
        logger.debug("Created scene", factory=type(self).__name__,
                     combination=str(scene.combination()))
        return scene


class SunnyMorningFactory(SceneFactory):
    def create_weather(self) -> Weather:
        return SunnyWeather()

    def create_lighting(self) -> Lighting:
        return MorningLighting()


class RainyNightFactory(SceneFactory):
    def create_weather(self) -> Weather:
        return RainyWeather()

    def create_lighting(self) -> Lighting:
        return NightLighting()


class SnowyNoonFactory(SceneFactory):
    def create_weather(self) -> Weather:
        return SnowyWeather()

    def create_lighting(self) -> Lighting:
        return NoonLighting()


class CombinationSceneFactory(SceneFactory):
    """Table-driven factory for any valid combination."""

    def __init__(self, combination: Union[str, SceneCombination]):
        if isinstance(combination, str):
            combination = SceneCombination.parse(combination)
        if combination not in VALID_COMBINATIONS:
            raise InvalidCombinationError(str(combination))
        self.combination = combination

    def create_weather(self) -> Weather:
        return WEATHER_VARIANTS[self.combination.weather]()

    def create_lighting(self) -> Lighting:
        return LIGHTING_VARIANTS[self.combination.time_of_day]()


class RandomSceneFactory(CombinationSceneFactory):
    """
    Randomized factory that picks a whole combination at once.

    The pick happens at construction, so ``create_weather`` and
    ``create_lighting`` always agree. Build a new factory for a new draw.
    """

    def __init__(self,
                 selector: Optional[Selector] = None,
                 combinations: Iterable[SceneCombination] = VALID_COMBINATIONS):
        """
        Initialize random scene factory.

        Args:
            selector: Selection function (defaults to a uniform random choice)
            combinations: Combinations to draw from; all must be valid

        Raises:
            SceneValidationError: If no combinations are given
            InvalidCombinationError: If a combination is not valid
        """
        table: Tuple[SceneCombination, ...] = tuple(sorted(set(combinations)))
        if not table:
            raise SceneValidationError(
                "Random scene factory needs at least one combination",
                "EMPTY_COMBINATIONS",
            )
        for combination in table:
            if combination not in VALID_COMBINATIONS:
                raise InvalidCombinationError(str(combination))

        selected = (selector or seeded_selector())(table)
        if selected not in table:
            raise SelectionError(selected, len(table))
        super().__init__(selected)


# Combinations with a dedicated factory class
NAMED_FACTORIES: Dict[SceneCombination, Type[SceneFactory]] = {
    SceneCombination(WeatherKind.SUNNY, TimeOfDay.MORNING): SunnyMorningFactory,
    SceneCombination(WeatherKind.RAINY, TimeOfDay.NIGHT): RainyNightFactory,
    SceneCombination(WeatherKind.SNOWY, TimeOfDay.NOON): SnowyNoonFactory,
}


def factory_for(combination: Union[str, SceneCombination]) -> SceneFactory:
    """Get the factory for a combination, preferring a dedicated class."""
    if isinstance(combination, str):
        combination = SceneCombination.parse(combination)
    factory_class = NAMED_FACTORIES.get(combination)
    if factory_class is not None:
        return factory_class()
    return CombinationSceneFactory(combination)
