from dataclasses import dataclass
from fastapi import status


@dataclass(frozen=True)
class ErrorDefinition:
    code: str
    message: str
    status_code: int


class ErrorCatalog:
    INVALID_TOKEN = ErrorDefinition("INVALID_TOKEN", "Invalid token", status.HTTP_401_UNAUTHORIZED)
    AUTHENTICATION_REQUIRED = ErrorDefinition(
        "AUTHENTICATION_REQUIRED",
        "Authentication required",
        status.HTTP_401_UNAUTHORIZED,
    )
    NAVIGATION_FAMILY_NOT_FOUND = ErrorDefinition(
        "NAVIGATION_FAMILY_NOT_FOUND",
        "Navigation family not found",
        status.HTTP_404_NOT_FOUND,
    )
    NAVIGATION_UNAVAILABLE = ErrorDefinition(
        "NAVIGATION_UNAVAILABLE",
        "No navigation tree configured for this viewer",
        status.HTTP_503_SERVICE_UNAVAILABLE,
    )
    VALIDATION_ERROR = ErrorDefinition(
        "VALIDATION_ERROR",
        "Validation error",
        status.HTTP_422_UNPROCESSABLE_ENTITY,
    )
    INTERNAL_ERROR = ErrorDefinition(
        "INTERNAL_ERROR",
        "Internal server error",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


class AppError(Exception):
    def __init__(self, error: ErrorDefinition, details: object | None = None):
        self.error = error
        self.details = details
        super().__init__(error.message)
