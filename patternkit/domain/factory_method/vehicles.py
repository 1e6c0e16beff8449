"""Vehicle products, composed from engine sub-components."""
from abc import abstractmethod
from typing import Any, Dict

from pydantic import Field

from patternkit.domain.base.product import Product

# Price of one cylinder and of one unit of horsepower
CYLINDER_COST = 200
HORSEPOWER_COST = 10


class Engine(Product):
    """Engine sub-component; its cost is derived from cylinders and horsepower."""
    cylinders: int = Field(gt=0)
    horsepower: int = Field(gt=0)

    def description(self) -> str:
        return f"{self.cylinders}-cylinder {self.horsepower}hp engine"

    def cost(self) -> int:
        return self.cylinders * CYLINDER_COST + self.horsepower * HORSEPOWER_COST

    def attributes(self) -> Dict[str, Any]:
        return {"cost": self.cost()}


class Vehicle(Product):
    """Abstract vehicle composed around an engine."""
    engine: Engine

    @abstractmethod
    def body_cost(self) -> int:
        """Cost of everything except the engine."""

    def cost(self) -> int:
        return self.engine.cost() + self.body_cost()

    def attributes(self) -> Dict[str, Any]:
        return {"cost": self.cost(), "engine": self.engine.description()}


class Car(Vehicle):
    seats: int = Field(4, gt=0)

    def description(self) -> str:
        return f"{self.seats}-seat car with a {self.engine.description()}"

    def body_cost(self) -> int:
        return 5000 + self.seats * 300


class Truck(Vehicle):
    payload_tons: int = Field(10, gt=0)

    def description(self) -> str:
        return f"{self.payload_tons}-ton truck with a {self.engine.description()}"

    def body_cost(self) -> int:
        return 12000 + self.payload_tons * 800
