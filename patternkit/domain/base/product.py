"""Base product - foundation for every object a factory or decorator yields."""
from abc import ABC, abstractmethod
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class Product(BaseModel, ABC):
    """Base class for all products.

    Products are immutable value objects: they are built once by a factory (or
    wrapped by a decorator) and never updated afterwards.
    """
    model_config = ConfigDict(
        frozen=True,  # Products never change after construction
        arbitrary_types_allowed=True
    )

    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the product."""

    def attributes(self) -> Dict[str, Any]:
        """Numeric (or otherwise queryable) attributes of the product."""
        return {}

    @classmethod
    def variant_name(cls) -> str:
        """Name of the concrete variant."""
        return cls.__name__

    def to_dict(self) -> Dict[str, Any]:
        """Convert product to a plain dictionary for output."""
        return {
            "variant": self.variant_name(),
            "description": self.description(),
            **self.attributes(),
        }
