"""
BFF router configuration.

Aggregates all BFF endpoints into a single router
for mounting in the BFF application.
"""

from fastapi import APIRouter

from employee_service.bff.employees_controller import router as employees_router

# Main BFF router
router = APIRouter(
    tags=["BFF"],
    responses={
        400: {"description": "Bad Request"},
        500: {"description": "Internal Server Error"},
    },
)

# Include sub-routers
router.include_router(
    employees_router,
    prefix="/employees",
    tags=["Employees"],
)
