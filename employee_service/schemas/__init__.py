"""
Pydantic schemas for request/response validation
"""

from employee_service.schemas.base import (
    BaseSchema,
    ErrorResponse,
    FieldError,
)
from employee_service.schemas.employee import (
    EmployeeCreate,
    EmployeeDeleteResponse,
    EmployeeFields,
    EmployeePatch,
    EmployeeResponse,
)

__all__ = [
    "BaseSchema",
    "ErrorResponse",
    "FieldError",
    "EmployeeCreate",
    "EmployeeDeleteResponse",
    "EmployeeFields",
    "EmployeePatch",
    "EmployeeResponse",
]
