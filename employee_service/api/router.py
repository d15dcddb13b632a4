"""
Employee API router configuration.

Aggregates all API endpoints into a single router.
"""

from fastapi import APIRouter

from employee_service.api.employees import router as employees_router

# Main API router
router = APIRouter(
    responses={
        400: {"description": "Bad Request"},
        404: {"description": "Not Found"},
        500: {"description": "Internal Server Error"},
    },
)

# Include sub-routers
router.include_router(
    employees_router,
    prefix="/employees",
    tags=["Employees"],
)
