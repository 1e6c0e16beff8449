"""Domain layer - the pattern demonstrations.

Each pattern lives in its own package and depends only on the shared kernel
in ``patternkit.domain.base``:
    - factory_method: gameplay and vehicle creators
    - abstract_factory: scene factories for consistent weather and lighting
    - decorator: dishes extended with stackable toppings
"""
