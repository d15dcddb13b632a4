"""
Employee record held by the in-memory store
"""

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal


@dataclass
class Employee:
    """
    Stored employee.

    ``id`` is assigned by the repository on insert and never changes.
    """

    first_name: str
    last_name: str
    email: str
    phone: str
    department: str
    hire_date: date
    salary: Decimal
    id: int | None = None

    def copy(self) -> "Employee":
        """Detached copy, so callers never hold the stored instance."""
        return replace(self)
