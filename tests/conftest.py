"""Root conftest — shared fixtures for both tiers.

Invariants:
    - Every test gets a fresh Employee API application with an empty store
    - HTTP tests go through httpx.AsyncClient over ASGITransport (no sockets)
    - BFF tests inject their own EmployeeApiClient; nothing reaches the network

Design Decisions:
    - make_payload is a factory fixture so tests state only the fields they vary
"""

from datetime import date

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from employee_service.bff.client import EmployeeApiClient
from employee_service.main import create_application, create_bff_application
from employee_service.repositories.employee_repository import EmployeeRepository


@pytest.fixture
def make_payload():
    """Build a valid camelCase employee payload, with overrides."""

    def _make(**overrides) -> dict:
        payload = {
            "firstName": "Jane",
            "lastName": "Doe",
            "email": "jane.doe@company.com",
            "phone": "+15551234567",
            "department": "HR",
            "hireDate": date.today().isoformat(),
            "salary": 55000.0,
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def repository():
    return EmployeeRepository()


@pytest.fixture
def api_app(repository):
    return create_application(repository=repository)


@pytest.fixture
async def api_client(api_app):
    """HTTP client for the Employee API."""
    async with AsyncClient(
        transport=ASGITransport(app=api_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def make_bff_client():
    """Open a BFF test client whose upstream uses the given transport."""
    opened = []

    async def _make(
        transport: httpx.AsyncBaseTransport, raise_app_exceptions: bool = True,
    ) -> AsyncClient:
        upstream = EmployeeApiClient(
            httpx.AsyncClient(transport=transport, base_url="http://employee-api.test/"),
        )
        bff = create_bff_application(api_client=upstream)
        client = AsyncClient(
            transport=ASGITransport(app=bff, raise_app_exceptions=raise_app_exceptions),
            base_url="http://bff.test",
        )
        opened.append((client, upstream))
        return client

    yield _make

    for client, upstream in opened:
        await client.aclose()
        await upstream.aclose()


@pytest.fixture
async def bff_client(make_bff_client, api_app):
    """BFF wired to a real Employee API application, end to end."""
    return await make_bff_client(ASGITransport(app=api_app))
