"""Factory method domain exceptions."""

from typing import List

from patternkit.domain.base.exceptions import ValidationError


class GameplayValidationError(ValidationError):
    """Raised when a gameplay factory is built with invalid input."""


class UnknownMissionError(GameplayValidationError):
    """Raised when a mission name does not match any known mission."""

    def __init__(self, mission: str, known: List[str]):
        super().__init__(
            f"Unknown mission '{mission}', expected one of: {', '.join(known)}",
            "UNKNOWN_MISSION",
            {"mission": mission, "known_missions": known},
        )
        self.mission = mission


class VehicleValidationError(ValidationError):
    """Raised when vehicle build parameters are invalid."""
