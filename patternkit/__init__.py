"""patternkit - Root Package.

A small library of runnable design pattern demonstrations that a learner can
execute and inspect.

Key Components:
    - domain: the pattern demonstrations (factory method, abstract factory, decorator)
    - infrastructure: structured logging and the factory registry
    - config: typed configuration loaded from JSON and the environment
    - cli: command-line front end

Usage:
    >>> from patternkit.domain.decorator import Cheese, Chicken, Pizza
    >>> Chicken(Cheese(Pizza())).cost()
    87
"""

from ._package import PACKAGE_NAME, __version__

__package_name__ = PACKAGE_NAME
