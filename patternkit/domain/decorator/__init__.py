"""Decorator: dishes extended with stackable toppings."""

from .dishes import BASES, Calzone, Dish, Pizza
from .exceptions import UnknownDishError, UnknownToppingError
from .toppings import (
    TOPPINGS,
    Cheese,
    Chicken,
    Mushroom,
    Olive,
    Pepperoni,
    ToppingDecorator,
    build_dish,
    decorate,
    resolve_topping,
)

__all__ = [
    "BASES",
    "TOPPINGS",
    "Calzone",
    "Cheese",
    "Chicken",
    "Dish",
    "Mushroom",
    "Olive",
    "Pepperoni",
    "Pizza",
    "ToppingDecorator",
    "UnknownDishError",
    "UnknownToppingError",
    "build_dish",
    "decorate",
    "resolve_topping",
]
