"""Toppings: decorators that wrap a dish and add to its cost and description.

A topping holds exactly one dish, which may itself be a topping, so any number
of toppings can be stacked without a class per combination:

    dish = Chicken(Cheese(Pizza()))
    dish.cost()         # 87
    dish.description()  # "pizza with cheese with chicken"
"""
from typing import Any, ClassVar, Dict, Iterable, Type, Union

from patternkit.domain.decorator.dishes import BASES, Dish
from patternkit.domain.decorator.exceptions import UnknownDishError, UnknownToppingError
from patternkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ToppingDecorator(Dish):
    """Base decorator: a dish wrapping exactly one other dish.

    Abstract; concrete toppings set ``name``, ``increment`` and ``suffix``.
    """
    wrapped: Dish

    name: ClassVar[str] = ""
    increment: ClassVar[int] = 0
    suffix: ClassVar[str] = ""

    def __init__(self, wrapped: Dish, **data: Any) -> None:
        if not self.is_concrete():
            raise TypeError(f"Can't instantiate abstract topping {type(self).__name__} without a name")
        super().__init__(wrapped=wrapped, **data)

    @classmethod
    def is_concrete(cls) -> bool:
        return bool(cls.name)

    def cost(self) -> int:
        return self.wrapped.cost() + self.increment

    def description(self) -> str:
        return self.wrapped.description() + self.suffix

    def depth(self) -> int:
        """Number of toppings stacked on the base dish."""
        count = 0
        dish: Dish = self
        while isinstance(dish, ToppingDecorator):
            count += 1
            dish = dish.wrapped
        return count

    def base(self) -> Dish:
        """The undecorated dish at the bottom of the stack."""
        dish: Dish = self
        while isinstance(dish, ToppingDecorator):
            dish = dish.wrapped
        return dish

    def attributes(self) -> Dict[str, Any]:
        return {"cost": self.cost(), "toppings": self.depth()}


class Cheese(ToppingDecorator):
    name = "cheese"
    increment = 10
    suffix = " with cheese"


class Chicken(ToppingDecorator):
    name = "chicken"
    increment = 27
    suffix = " with chicken"


class Mushroom(ToppingDecorator):
    name = "mushroom"
    increment = 8
    suffix = " with mushroom"


class Olive(ToppingDecorator):
    name = "olive"
    increment = 6
    suffix = " with olive"


class Pepperoni(ToppingDecorator):
    name = "pepperoni"
    increment = 15
    suffix = " with pepperoni"


TOPPINGS: Dict[str, Type[ToppingDecorator]] = {
    topping.name: topping
    for topping in (Cheese, Chicken, Mushroom, Olive, Pepperoni)
}

ToppingSpec = Union[str, Type[ToppingDecorator]]


def resolve_topping(topping: ToppingSpec) -> Type[ToppingDecorator]:
    """Resolve a topping given by class or by name."""
    if isinstance(topping, type) and issubclass(topping, ToppingDecorator):
        if not topping.is_concrete():
            raise UnknownToppingError(topping.__name__, sorted(TOPPINGS))
        return topping
    key = str(topping).strip().lower()
    if key not in TOPPINGS:
        raise UnknownToppingError(str(topping), sorted(TOPPINGS))
    return TOPPINGS[key]


def decorate(dish: Dish, *toppings: ToppingSpec) -> Dish:
    """Wrap a dish in toppings; the first topping given ends up innermost."""
    for topping in toppings:
        dish = resolve_topping(topping)(dish)
    return dish


def build_dish(base: str, toppings: Iterable[ToppingSpec] = ()) -> Dish:
    """Build a base dish by name and stack the toppings on it."""
    key = base.strip().lower()
    if key not in BASES:
        raise UnknownDishError(base, sorted(BASES))
    dish = decorate(BASES[key](), *toppings)
    logger.debug("Built dish", base=key, description=dish.description(), cost=dish.cost())
    return dish
