"""Selection functions used by randomized factories.

A selector is any callable that takes a non-empty sequence and returns one of
its elements. Factories receive a selector at construction so that tests can
swap the random source for a deterministic one.
"""
from __future__ import annotations

import random
from typing import Callable, Optional, Sequence, TypeVar

T = TypeVar('T')

Selector = Callable[[Sequence[T]], T]


def seeded_selector(seed: Optional[int] = None) -> Selector:
    """Uniform selector backed by a private random generator.

    Args:
        seed: Seed for the generator; None seeds from system entropy

    Returns:
        Selector drawing uniformly from the given options
    """
    rng = random.Random(seed)
    return rng.choice


class RoundRobinSelector:
    """Deterministic selector cycling through the options in order."""

    def __init__(self, start: int = 0) -> None:
        self._position = start

    def __call__(self, options: Sequence[T]) -> T:
        option = options[self._position % len(options)]
        self._position += 1
        return option


class FixedSelector:
    """Selector that always picks the option at the same index."""

    def __init__(self, index: int = 0) -> None:
        self.index = index

    def __call__(self, options: Sequence[T]) -> T:
        return options[self.index]
