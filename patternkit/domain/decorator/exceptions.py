"""Decorator domain exceptions."""

from typing import List

from patternkit.domain.base.exceptions import ValidationError


class UnknownToppingError(ValidationError):
    """Raised when a topping name is not on the menu."""

    def __init__(self, topping: str, known: List[str]):
        super().__init__(
            f"Unknown topping '{topping}', expected one of: {', '.join(known)}",
            "UNKNOWN_TOPPING",
            {"topping": topping, "known_toppings": known},
        )
        self.topping = topping


class UnknownDishError(ValidationError):
    """Raised when a base dish name is not on the menu."""

    def __init__(self, dish: str, known: List[str]):
        super().__init__(
            f"Unknown dish '{dish}', expected one of: {', '.join(known)}",
            "UNKNOWN_DISH",
            {"dish": dish, "known_dishes": known},
        )
        self.dish = dish
