"""
Employee API module.

Contains the CRUD endpoints backed by the in-memory store.
"""

from employee_service.api.router import router
from employee_service.api.employees import router as employees_router

__all__ = [
    "router",
    "employees_router",
]
