"""Domain exceptions for the Condo application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class CondoException(Exception):
    """Base exception for all Condo application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error envelope used by the API."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(CondoException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class UnauthorizedException(CondoException):
    """Raised on any credential, token, or tenant-access failure.

    The category is deliberately uniform: unknown account, wrong password,
    inactive account and stale refresh token all raise this class. The
    message carries the internal reason.
    """

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message, "UNAUTHORIZED")


class ForbiddenException(CondoException):
    """Raised when the caller's role does not allow the operation."""

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message, "FORBIDDEN")


class AlreadyExistsException(CondoException):
    """Raised on a unique-constraint style conflict (e.g. duplicate email)."""

    def __init__(self, resource: str) -> None:
        """Initialize with the conflicting resource or field.

        Args:
            resource: What already exists (e.g. 'Email').
        """
        super().__init__(
            f"{resource} already exists",
            "ALREADY_EXISTS",
            {"resource": resource},
        )


class NotFoundException(CondoException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str | None = None) -> None:
        """Initialize with resource type and optional id.

        Args:
            resource_type: Type of resource (e.g. 'Account', 'Condominium').
            resource_id: The ID that was not found, when known.
        """
        details: dict[str, Any] = {"resource_type": resource_type}
        message = f"{resource_type} not found"
        if resource_id is not None:
            details["resource_id"] = resource_id
            message = f"{resource_type} not found: {resource_id}"
        super().__init__(message, "NOT_FOUND", details)
