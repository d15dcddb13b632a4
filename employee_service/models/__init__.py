"""
Domain records for the Employee API
"""

from employee_service.models.employee import Employee

__all__ = [
    "Employee",
]
