# patternkit/domain/factory_method/value_objects.py
from __future__ import annotations

from enum import Enum
from typing import Union

from patternkit.domain.factory_method.exceptions import UnknownMissionError


class Mission(str, Enum):
    """Missions of the campaign; each one dictates its gameplay."""
    TUTORIAL = "tutorial"
    AMBUSH = "ambush"
    SIEGE = "siege"
    FINAL = "final"

    @classmethod
    def from_value(cls, value: Union[str, Mission]) -> Mission:
        """Convert a mission name into a Mission."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownMissionError(str(value), [m.value for m in cls]) from None
