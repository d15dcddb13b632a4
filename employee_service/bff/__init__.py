"""
Backend for Frontend (BFF) layer.

Validates frontend requests and forwards them to the Employee API,
relaying the API's answers unchanged. The router lives in
``employee_service.bff.router``.
"""

from employee_service.bff.client import EmployeeApiClient, UpstreamResponse

__all__ = [
    "EmployeeApiClient",
    "UpstreamResponse",
]
