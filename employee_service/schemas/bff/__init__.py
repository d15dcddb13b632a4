"""
BFF-specific schemas.

Request envelopes accepted by the employee BFF endpoints.
"""

from employee_service.schemas.bff.employee_requests import (
    BFFBaseRequest,
    BffEmployeeCreateRequest,
    BffEmployeeIdRequest,
    BffEmployeePatchRequest,
    EmployeeCreateRequest,
    EmployeeUpdateRequest,
)

__all__ = [
    "BFFBaseRequest",
    "BffEmployeeCreateRequest",
    "BffEmployeeIdRequest",
    "BffEmployeePatchRequest",
    "EmployeeCreateRequest",
    "EmployeeUpdateRequest",
]
