"""
Employee-related Pydantic schemas
"""

from datetime import date
from decimal import Decimal

from pydantic import Field, field_serializer

from employee_service.schemas.base import BaseSchema


class EmployeeFields(BaseSchema):
    """
    Employee attributes as accepted on the wire.

    Every field is optional at the schema level so that missing or
    empty values surface as itemized rule failures from the validator
    instead of a generic parsing error.
    """

    first_name: str | None = Field(default=None, description="First name")
    last_name: str | None = Field(default=None, description="Last name")
    email: str | None = Field(default=None, description="Email address")
    phone: str | None = Field(default=None, description="Phone, 7-15 digits, optional leading +")
    department: str | None = Field(default=None, description="Department name")
    hire_date: date | None = Field(default=None, description="Hire date, not in the future")
    salary: Decimal | None = Field(
        default=None,
        max_digits=15,
        decimal_places=2,
        description="Salary, greater than 0, at most 15 digits with 2 decimals",
    )

    @field_serializer("salary", when_used="json-unless-none")
    def serialize_salary(self, v: Decimal) -> float:
        return float(v)


class EmployeeCreate(EmployeeFields):
    """Schema for creating an employee. All fields are required by the rules."""


class EmployeePatch(EmployeeFields):
    """Schema for a partial update. Only non-null fields are applied."""


class EmployeeResponse(BaseSchema):
    """Full employee response schema."""

    id: int = Field(description="Employee id")
    first_name: str
    last_name: str
    email: str
    phone: str
    department: str
    hire_date: date
    salary: Decimal

    @field_serializer("salary", when_used="json")
    def serialize_salary(self, v: Decimal) -> float:
        return float(v)


class EmployeeDeleteResponse(BaseSchema):
    """Confirmation returned after a delete."""

    id: int = Field(description="Id of the removed employee")
