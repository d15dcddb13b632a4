"""
FastAPI dependencies for dependency injection

Collaborators are created by the application factories and kept on
``app.state``; these helpers hand them to route handlers.
"""

from typing import Annotated

from fastapi import Depends, Request

from employee_service.bff.client import EmployeeApiClient
from employee_service.repositories.employee_repository import EmployeeRepository
from employee_service.services.employee_service import EmployeeService
from employee_service.validators.employee_validator import EmployeeValidator


def get_employee_repository(request: Request) -> EmployeeRepository:
    """The application's employee store."""
    return request.app.state.employee_repository


def get_employee_validator(request: Request) -> EmployeeValidator:
    return request.app.state.employee_validator


def get_employee_service(
    repository: Annotated[EmployeeRepository, Depends(get_employee_repository)],
    validator: Annotated[EmployeeValidator, Depends(get_employee_validator)],
) -> EmployeeService:
    """Build the employee service around the app's store and validator."""
    return EmployeeService(repository, validator)


def get_employee_api_client(request: Request) -> EmployeeApiClient:
    """The BFF's outbound client for the Employee API."""
    return request.app.state.employee_api_client


# Type aliases for common dependencies
EmployeeServiceDep = Annotated[EmployeeService, Depends(get_employee_service)]
EmployeeApiClientDep = Annotated[EmployeeApiClient, Depends(get_employee_api_client)]
