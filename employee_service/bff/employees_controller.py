"""
Employee controller for the BFF.

Handles the frontend's employee endpoints:
- Validates create and update payloads locally
- Forwards every request to the Employee API
- Relays the API's status code and body unchanged
"""

import logging
from typing import Annotated, Awaitable

from fastapi import APIRouter, Body, Depends, Response

from employee_service.bff.client import EmployeeApiClient, UpstreamResponse
from employee_service.bff.validators import (
    BffCreateEmployeeValidator,
    BffUpdateEmployeeValidator,
)
from employee_service.core.dependencies import EmployeeApiClientDep
from employee_service.core.exceptions import ValidationException
from employee_service.schemas.base import ErrorResponse
from employee_service.schemas.bff.employee_requests import (
    BffEmployeeCreateRequest,
    BffEmployeeIdRequest,
    BffEmployeePatchRequest,
)
from employee_service.validators.employee_validator import EmployeeValidator

logger = logging.getLogger(__name__)

router = APIRouter()


class EmployeeBFFController:
    """
    Controller for employee proxy operations.

    Holds no employee state; every operation is one call to the
    Employee API.
    """

    def __init__(
        self,
        api_client: EmployeeApiClient,
        create_validator: EmployeeValidator,
        update_validator: EmployeeValidator,
    ):
        """
        Initialize controller with its collaborators.

        Args:
            api_client: Outbound client for the Employee API
            create_validator: Rules for create payloads
            update_validator: Rules for update payloads
        """
        self.api_client = api_client
        self.create_validator = create_validator
        self.update_validator = update_validator

    async def list_all(self) -> Response:
        return await self._forward(
            "fetching employees from API",
            self.api_client.list_employees(),
        )

    async def get_by_id(self, employee_id: int) -> Response:
        return await self._forward(
            f"fetching employee with ID {employee_id} from API",
            self.api_client.get_employee(employee_id),
        )

    async def create(self, request: BffEmployeeCreateRequest) -> Response:
        """
        Validate and forward a create request.

        Raises:
            ValidationException: If the payload breaks a rule; the API
                is not contacted
        """
        result = self.create_validator.validate(request.data)
        if not result.is_valid:
            logger.warning("Create request rejected: %s", result.to_list())
            raise ValidationException(
                detail="There were invalid field(s) in create request",
                errors=result.to_list(),
            )

        return await self._forward(
            "creating employee",
            self.api_client.create_employee(request.data.to_upstream()),
        )

    async def update(self, request: BffEmployeePatchRequest) -> Response:
        """
        Validate and forward a partial update.

        Raises:
            ValidationException: If a present field breaks a rule
        """
        result = self.update_validator.validate(request.data)
        if not result.is_valid:
            logger.warning(
                "Update request for employee %s rejected: %s",
                request.id, result.to_list(),
                extra={"employee_id": request.id},
            )
            raise ValidationException(
                detail="There were invalid field(s) in update request",
                errors=result.to_list(),
            )

        return await self._forward(
            f"patching employee with ID {request.id}",
            self.api_client.update_employee(request.id, request.data.to_upstream()),
        )

    async def delete_by_id(self, employee_id: int) -> Response:
        return await self._forward(
            f"deleting employee with ID {employee_id}",
            self.api_client.delete_employee(employee_id),
        )

    async def _forward(self, action: str, call: Awaitable[UpstreamResponse]) -> Response:
        upstream = await call
        logger.info(
            "Finished %s: API answered %s", action, upstream.status_code,
            extra={"upstream_status": upstream.status_code},
        )
        return Response(
            content=upstream.content,
            status_code=upstream.status_code,
            media_type=upstream.media_type,
        )


def get_employee_bff_controller(api_client: EmployeeApiClientDep) -> EmployeeBFFController:
    """Build the controller around the app's API client."""
    return EmployeeBFFController(
        api_client=api_client,
        create_validator=BffCreateEmployeeValidator(),
        update_validator=BffUpdateEmployeeValidator(),
    )


ControllerDep = Annotated[EmployeeBFFController, Depends(get_employee_bff_controller)]

IdBody = Annotated[
    int | BffEmployeeIdRequest,
    Body(description="Employee id, either raw or as {\"id\": n}"),
]


def _employee_id(body: int | BffEmployeeIdRequest) -> int:
    return body.id if isinstance(body, BffEmployeeIdRequest) else body


# ═══════════════════════════════════════════════════════════════════════════════
# ROUTE HANDLERS
# ═══════════════════════════════════════════════════════════════════════════════


@router.post(
    "/getall",
    summary="List Employees",
    description="Forward to GET /api/employees and relay the answer.",
)
async def get_all(controller: ControllerDep) -> Response:
    return await controller.list_all()


@router.post(
    "/getbyid",
    summary="Get Employee",
    description="Forward to GET /api/employees/{id} and relay the answer.",
)
async def get_by_id(body: IdBody, controller: ControllerDep) -> Response:
    return await controller.get_by_id(_employee_id(body))


@router.post(
    "/create",
    summary="Create Employee",
    description="Validate the payload, then forward to POST /api/employees.",
    responses={400: {"model": ErrorResponse, "description": "Invalid fields in create request"}},
)
async def create(request: BffEmployeeCreateRequest, controller: ControllerDep) -> Response:
    return await controller.create(request)


@router.post(
    "/update",
    summary="Update Employee",
    description="Validate present fields, then forward to PATCH /api/employees/{id}.",
    responses={400: {"model": ErrorResponse, "description": "Invalid fields in update request"}},
)
async def update(request: BffEmployeePatchRequest, controller: ControllerDep) -> Response:
    return await controller.update(request)


@router.post(
    "/delete",
    summary="Delete Employee",
    description="Forward to DELETE /api/employees/{id} and relay the answer.",
)
async def delete(body: IdBody, controller: ControllerDep) -> Response:
    return await controller.delete_by_id(_employee_id(body))
