"""Base domain exceptions - shared by every pattern module."""
from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a serializable dictionary."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainException):
    """Raised when domain validation fails."""


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""


class SelectionError(DomainException):
    """Raised when a selector picks something outside the declared options."""

    def __init__(self, selected: Any, options_count: int):
        super().__init__(
            f"Selector returned {selected!r}, which is not one of the {options_count} declared options",
            "SELECTION_OUT_OF_RANGE",
            {"selected": repr(selected), "options_count": options_count},
        )
        self.selected = selected
