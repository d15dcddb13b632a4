"""Core modules for the application."""

from employee_service.core.exceptions import (
    AppException,
    EmployeeNotFoundException,
    InvalidFieldsException,
    NotFoundException,
    UpstreamUnavailableException,
    ValidationException,
)
from employee_service.core.observability import JSONFormatter, setup_logging

__all__ = [
    "AppException",
    "EmployeeNotFoundException",
    "InvalidFieldsException",
    "NotFoundException",
    "UpstreamUnavailableException",
    "ValidationException",
    "JSONFormatter",
    "setup_logging",
]
