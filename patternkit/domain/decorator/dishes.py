"""Dish component interface and the base dishes toppings are added to."""
from abc import abstractmethod
from typing import Any, Dict, Type

from patternkit.domain.base.product import Product


class Dish(Product):
    """Component interface shared by base dishes and toppings."""

    @abstractmethod
    def cost(self) -> int:
        """Price of the dish."""

    def attributes(self) -> Dict[str, Any]:
        return {"cost": self.cost()}


class Pizza(Dish):
    def description(self) -> str:
        return "pizza"

    def cost(self) -> int:
        return 50


class Calzone(Dish):
    def description(self) -> str:
        return "calzone"

    def cost(self) -> int:
        return 45


BASES: Dict[str, Type[Dish]] = {
    "pizza": Pizza,
    "calzone": Calzone,
}
