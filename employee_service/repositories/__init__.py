"""
Repository layer for data access.

Repositories own the in-memory employee table and serialize
every access to it.
"""

from employee_service.repositories.base import BaseRepository
from employee_service.repositories.employee_repository import EmployeeRepository

__all__ = [
    "BaseRepository",
    "EmployeeRepository",
]
