"""Base domain layer - shared kernel for all pattern modules."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    SelectionError,
    ValidationError,
)
from .product import Product
from .selection import FixedSelector, RoundRobinSelector, Selector, seeded_selector

__all__ = [
    "ConfigurationError",
    "DomainException",
    "FixedSelector",
    "Product",
    "RoundRobinSelector",
    "SelectionError",
    "Selector",
    "ValidationError",
    "seeded_selector",
]
