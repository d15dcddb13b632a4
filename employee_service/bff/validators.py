"""
BFF-side validators for employee payloads.
"""

from typing import Any

from employee_service.validators.employee_validator import (
    EmployeeValidator,
    ValidationResult,
)


class BffCreateEmployeeValidator(EmployeeValidator):
    """Full rule table; every field must be present and valid."""


class BffUpdateEmployeeValidator(EmployeeValidator):
    """
    Looser partial rules for update requests.

    Null or empty fields count as absent and always pass; present
    fields get the same format checks as a create.
    """

    def validate(self, candidate: Any, partial: bool = True) -> ValidationResult:
        return super().validate(candidate, partial=partial)

    @staticmethod
    def is_absent(value: Any) -> bool:
        return value is None or value == ""
