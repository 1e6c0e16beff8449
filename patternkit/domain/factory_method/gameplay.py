"""Gameplay products built by the gameplay factories."""
from abc import abstractmethod
from typing import Any, Dict

from patternkit.domain.base.product import Product


class Gameplay(Product):
    """Abstract gameplay: the conditions a level is played under."""

    @abstractmethod
    def difficulty(self) -> int:
        """Difficulty rating from 1 (easiest) upward."""

    def attributes(self) -> Dict[str, Any]:
        return {"difficulty": self.difficulty()}


class SunnyGameplay(Gameplay):
    def description(self) -> str:
        return "sunny gameplay with clear sight lines"

    def difficulty(self) -> int:
        return 1


class FoggyGameplay(Gameplay):
    def description(self) -> str:
        return "foggy gameplay with enemies hidden in the mist"

    def difficulty(self) -> int:
        return 2


class SnowyGameplay(Gameplay):
    def description(self) -> str:
        return "snowy gameplay with slow movement"

    def difficulty(self) -> int:
        return 3


class RainyGameplay(Gameplay):
    def description(self) -> str:
        return "rainy gameplay with slippery roads and thunder"

    def difficulty(self) -> int:
        return 4
