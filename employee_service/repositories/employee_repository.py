"""
Employee repository for in-memory employee storage.
"""

from employee_service.models.employee import Employee
from employee_service.repositories.base import BaseRepository
from employee_service.schemas.employee import EmployeePatch


class EmployeeRepository(BaseRepository[Employee]):
    """Repository for Employee records."""

    async def apply_patch(self, id: int, patch: EmployeePatch) -> Employee | None:
        """
        Merge the present fields of a patch into a stored employee.

        Read, merge and write happen under the store lock, so two
        concurrent patches of the same employee cannot lose updates.

        Args:
            id: Employee id
            patch: Partial update; None fields are left untouched

        Returns:
            Updated employee copy or None if not found
        """
        async with self.lock:
            employee = self._records.get(id)
            if employee is None:
                return None

            if patch.first_name is not None:
                employee.first_name = patch.first_name
            if patch.last_name is not None:
                employee.last_name = patch.last_name
            if patch.email is not None:
                employee.email = patch.email
            if patch.phone is not None:
                employee.phone = patch.phone
            if patch.department is not None:
                employee.department = patch.department
            if patch.hire_date is not None:
                employee.hire_date = patch.hire_date
            if patch.salary is not None:
                employee.salary = patch.salary

            return employee.copy()
