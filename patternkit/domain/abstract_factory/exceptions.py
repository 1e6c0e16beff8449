"""Abstract factory domain exceptions."""

from patternkit.domain.base.exceptions import ValidationError


class SceneValidationError(ValidationError):
    """Raised when scene input cannot be interpreted."""


class InvalidCombinationError(SceneValidationError):
    """Raised when weather and time of day do not belong together."""

    def __init__(self, combination: str):
        super().__init__(
            f"'{combination}' is not a valid scene combination",
            "INVALID_COMBINATION",
            {"combination": combination},
        )
        self.combination = combination
