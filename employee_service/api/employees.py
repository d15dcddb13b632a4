"""
Employee API endpoints.

Provides CRUD operations over the in-memory employee store.
"""

from typing import Annotated, List

from fastapi import APIRouter, Path, Request, Response, status

from employee_service.core.dependencies import EmployeeServiceDep
from employee_service.models.employee import Employee
from employee_service.schemas.base import ErrorResponse
from employee_service.schemas.employee import (
    EmployeeCreate,
    EmployeeDeleteResponse,
    EmployeePatch,
    EmployeeResponse,
)

router = APIRouter()

EmployeeId = Annotated[int, Path(description="Employee id")]


def _to_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse(
        id=employee.id,
        first_name=employee.first_name,
        last_name=employee.last_name,
        email=employee.email,
        phone=employee.phone,
        department=employee.department,
        hire_date=employee.hire_date,
        salary=employee.salary,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# EMPLOYEE CRUD ENDPOINTS
# ═══════════════════════════════════════════════════════════════════════════════


@router.get(
    "",
    response_model=List[EmployeeResponse],
    summary="List Employees",
    description="Get every employee in insertion order.",
)
async def list_employees(service: EmployeeServiceDep) -> List[EmployeeResponse]:
    employees = await service.list_employees()
    return [_to_response(e) for e in employees]


@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    summary="Get Employee",
    description="Get an employee by id.",
    responses={404: {"model": ErrorResponse, "description": "Employee not found"}},
)
async def get_employee(
    employee_id: EmployeeId,
    service: EmployeeServiceDep,
) -> EmployeeResponse:
    employee = await service.get_employee(employee_id)
    return _to_response(employee)


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Employee",
    description="Validate and store a new employee. "
                "The Location header points at the new record.",
    responses={400: {"model": ErrorResponse, "description": "Invalid fields provided"}},
)
async def create_employee(
    data: EmployeeCreate,
    request: Request,
    response: Response,
    service: EmployeeServiceDep,
) -> EmployeeResponse:
    """
    Create a new employee.

    Every field is required; the id is assigned by the store.
    """
    employee = await service.create_employee(data)
    response.headers["Location"] = str(
        request.url_for("get_employee", employee_id=employee.id)
    )
    return _to_response(employee)


@router.patch(
    "/{employee_id}",
    response_model=EmployeeResponse,
    summary="Update Employee",
    description="Partially update an employee.",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid fields provided"},
        404: {"model": ErrorResponse, "description": "Employee not found"},
    },
)
async def patch_employee(
    employee_id: EmployeeId,
    data: EmployeePatch,
    service: EmployeeServiceDep,
) -> EmployeeResponse:
    """
    Update employee details.

    Only provided fields will be validated and updated.
    """
    employee = await service.patch_employee(employee_id, data)
    return _to_response(employee)


@router.delete(
    "/{employee_id}",
    response_model=EmployeeDeleteResponse,
    summary="Delete Employee",
    description="Remove an employee. Its id is never reused.",
    responses={404: {"model": ErrorResponse, "description": "Employee not found"}},
)
async def delete_employee(
    employee_id: EmployeeId,
    service: EmployeeServiceDep,
) -> EmployeeDeleteResponse:
    removed_id = await service.delete_employee(employee_id)
    return EmployeeDeleteResponse(id=removed_id)
