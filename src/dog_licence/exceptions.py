"""Domain-specific exceptions for the dog licence API.

The fee engine itself never raises for valid dog attributes. These
exceptions cover caller-side validation performed around it and are mapped
to HTTP responses by the error handlers.
"""

from datetime import date
from typing import Any


class DogLicenceError(Exception):
    """Base exception for all dog licence errors."""

    def __init__(self, message: str = "An error occurred", details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# =============================================================================
# Validation Errors (400)
# =============================================================================


class ValidationError(DogLicenceError):
    """Base class for validation errors."""

    pass


class DateOfBirthInFutureError(ValidationError):
    """Raised when a dog's date of birth is after the evaluation date."""

    def __init__(self, date_of_birth: date, evaluation_date: date) -> None:
        message = "Date of birth is after the evaluation date"
        details = {
            "date_of_birth": date_of_birth.isoformat(),
            "evaluation_date": evaluation_date.isoformat(),
        }
        super().__init__(message, details)


class InvalidExpiryWindowError(ValidationError):
    """Raised when the expiring-soon window is negative."""

    def __init__(self, days: int) -> None:
        super().__init__("Expiring window must not be negative", {"days": days})
