"""
Employee service for employee-related business logic.
"""

import logging
from typing import List

from employee_service.core.exceptions import (
    EmployeeNotFoundException,
    InvalidFieldsException,
)
from employee_service.models.employee import Employee
from employee_service.repositories.employee_repository import EmployeeRepository
from employee_service.schemas.employee import EmployeeCreate, EmployeePatch
from employee_service.validators.employee_validator import (
    EmployeeValidator,
    ValidationResult,
)

logger = logging.getLogger(__name__)


class EmployeeService:
    """
    Service for employee business operations.

    Validates payloads before they reach the repository and turns
    missing records into not-found errors.
    """

    def __init__(self, repository: EmployeeRepository, validator: EmployeeValidator):
        """
        Initialize service with its collaborators.

        Args:
            repository: Employee store
            validator: Rule engine for employee payloads
        """
        self.repository = repository
        self.validator = validator

    async def list_employees(self) -> List[Employee]:
        """All employees in insertion order."""
        return await self.repository.get_all()

    async def get_employee(self, employee_id: int) -> Employee:
        """
        Get employee by ID.

        Args:
            employee_id: Employee id

        Returns:
            Employee instance

        Raises:
            EmployeeNotFoundException: If employee not found
        """
        employee = await self.repository.get_by_id(employee_id)

        if employee is None:
            raise EmployeeNotFoundException(identifier=employee_id)

        return employee

    async def create_employee(self, data: EmployeeCreate) -> Employee:
        """
        Validate and store a new employee.

        Args:
            data: Create payload

        Returns:
            Stored employee with its assigned id

        Raises:
            InvalidFieldsException: If any field breaks a rule
        """
        result = self.validator.validate(data)
        if not result.is_valid:
            logger.error("Trying to create employee record but failed due to validation error(s)")
            self._log_failures(result)
            raise InvalidFieldsException(errors=result.to_list())

        employee = Employee(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            phone=data.phone,
            department=data.department,
            hire_date=data.hire_date,
            salary=data.salary,
        )
        employee = await self.repository.create(employee)
        logger.info("Employee id=%s created", employee.id, extra={"employee_id": employee.id})
        return employee

    async def patch_employee(self, employee_id: int, data: EmployeePatch) -> Employee:
        """
        Apply a partial update.

        Only provided fields are validated and merged.

        Args:
            employee_id: Employee id
            data: Partial payload

        Returns:
            Updated employee

        Raises:
            InvalidFieldsException: If a provided field breaks a rule
            EmployeeNotFoundException: If employee not found
        """
        result = self.validator.validate_partial(data)
        if not result.is_valid:
            logger.error("Validation failed for PATCH employee")
            self._log_failures(result)
            raise InvalidFieldsException(errors=result.to_list())

        employee = await self.repository.apply_patch(employee_id, data)
        if employee is None:
            raise EmployeeNotFoundException(identifier=employee_id)

        return employee

    async def delete_employee(self, employee_id: int) -> int:
        """
        Remove an employee.

        Args:
            employee_id: Employee id

        Returns:
            The removed id

        Raises:
            EmployeeNotFoundException: If employee not found
        """
        deleted = await self.repository.delete(employee_id)
        if not deleted:
            raise EmployeeNotFoundException(identifier=employee_id)

        logger.warning(
            "Employee id=%s has been deleted.", employee_id,
            extra={"employee_id": employee_id},
        )
        return employee_id

    @staticmethod
    def _log_failures(result: ValidationResult) -> None:
        for error in result.errors:
            logger.warning(
                "Validation failed for %s: %s", error.field, error.message,
                extra={"field": error.field},
            )
