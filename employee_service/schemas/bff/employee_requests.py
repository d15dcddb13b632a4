"""
BFF Request Schemas - Employee proxy endpoints

These schemas define the request envelopes the frontend posts to the
BFF. The inner ``data`` payloads are forwarded to the Employee API
once they pass the BFF's own field rules.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from employee_service.schemas.employee import EmployeeFields


class BFFBaseRequest(BaseModel):
    """Base request schema for BFF endpoints."""

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        alias_generator=to_camel,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# EMPLOYEE PAYLOADS
# ═══════════════════════════════════════════════════════════════════════════════


class EmployeeCreateRequest(EmployeeFields):
    """
    Employee data for a create request.

    Checked against the full rule table before forwarding.
    """

    def to_upstream(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class EmployeeUpdateRequest(EmployeeFields):
    """
    Employee data for an update request.

    Null fields are dropped before forwarding. Empty strings pass the
    BFF's rules and are forwarded as-is, so the API decides on them.
    """

    def to_upstream(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ═══════════════════════════════════════════════════════════════════════════════
# ENVELOPES
# ═══════════════════════════════════════════════════════════════════════════════


class BffEmployeeCreateRequest(BFFBaseRequest):
    """Body of ``/bff/employees/create``."""

    data: EmployeeCreateRequest = Field(
        description="Employee to create",
        json_schema_extra={"example": {
            "firstName": "Jane",
            "lastName": "Doe",
            "email": "jane.doe@company.com",
            "phone": "+15551234567",
            "department": "HR",
            "hireDate": "2024-01-15",
            "salary": 55000.0,
        }},
    )


class BffEmployeePatchRequest(BFFBaseRequest):
    """Body of ``/bff/employees/update``."""

    id: int = Field(description="Employee id")
    data: EmployeeUpdateRequest = Field(description="Fields to change")


class BffEmployeeIdRequest(BFFBaseRequest):
    """Body of ``/bff/employees/getbyid`` and ``/bff/employees/delete``."""

    id: int = Field(description="Employee id", json_schema_extra={"example": 1})
