"""Field-level validation rules."""

from employee_service.validators.employee_validator import (
    EMPLOYEE_RULES,
    EmployeeValidator,
    FieldRule,
    FieldValidationError,
    ValidationResult,
)

__all__ = [
    "EMPLOYEE_RULES",
    "EmployeeValidator",
    "FieldRule",
    "FieldValidationError",
    "ValidationResult",
]
