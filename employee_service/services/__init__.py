"""
Service layer for business logic.
"""

from employee_service.services.employee_service import EmployeeService

__all__ = [
    "EmployeeService",
]
