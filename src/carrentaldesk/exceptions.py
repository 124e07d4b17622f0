"""Library exceptions."""

from __future__ import annotations


class CarRentalDeskError(Exception):
    """Base exception for the rental desk."""

    error_type = "unknown"
    default_error_code: str | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        detail: str | None = None,
        user_message: str | None = None,
    ) -> None:
        text = message if message is not None else detail
        super().__init__(text if text is not None else "")
        self.error_code = error_code or self.default_error_code
        self.detail = detail if detail is not None else message
        self.user_message = user_message


class DuplicateIdentityError(CarRentalDeskError):
    """Raised when a car or customer id is already registered."""

    error_type = "duplicate_identity"
    default_error_code = "duplicate_identity"


class NotFoundError(CarRentalDeskError):
    """Raised when a car, customer or rental cannot be found."""

    error_type = "not_found"
    default_error_code = "not_found"


class InvalidStateError(CarRentalDeskError):
    """Raised when a record is not in a state that allows the operation."""

    error_type = "invalid_state"
    default_error_code = "invalid_state"


class EmptyCollectionError(CarRentalDeskError):
    """Raised when an operation needs records that do not exist yet."""

    error_type = "empty_collection"
    default_error_code = "empty_collection"


class MalformedInputError(CarRentalDeskError):
    """Raised when operator input cannot be parsed."""

    error_type = "malformed_input"
    default_error_code = "malformed_input"


class ValidationError(CarRentalDeskError):
    """Raised when parsed input is outside the allowed values."""

    error_type = "validation"
    default_error_code = "validation_error"
