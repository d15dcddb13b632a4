"""
Custom exceptions for the application
"""

from typing import Any, List

from fastapi import HTTPException, status


class AppException(HTTPException):
    """Base application exception."""

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: str = "An unexpected error occurred",
        headers: dict[str, str] | None = None,
        errors: List[dict[str, str]] | None = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.errors = errors or []


class NotFoundException(AppException):
    """Resource not found exception."""

    def __init__(self, resource: str = "Resource", identifier: Any = None):
        detail = f"{resource} not found"
        if identifier is not None:
            detail = f"{resource} with identifier '{identifier}' not found"
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ValidationException(AppException):
    """Validation error exception."""

    def __init__(
        self,
        detail: str = "Validation error",
        errors: List[dict[str, str]] | None = None,
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            errors=errors,
        )


class InvalidFieldsException(ValidationException):
    """Employee payload failed field-level rules."""

    def __init__(self, errors: List[dict[str, str]] | None = None):
        super().__init__(detail="Invalid fields provided", errors=errors)


class EmployeeNotFoundException(NotFoundException):
    """Employee not found exception."""

    def __init__(self, identifier: Any = None):
        super().__init__(resource="Employee", identifier=identifier)


class UpstreamUnavailableException(AppException):
    """The Employee API could not be reached or did not answer in time."""

    def __init__(self, detail: str = "Internal server error. Please try again later."):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        )
