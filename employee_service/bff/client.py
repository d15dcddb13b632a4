"""
Outbound HTTP client the BFF uses to reach the Employee API.
"""

from dataclasses import dataclass
from typing import Any

import httpx

from employee_service.config import Settings
from employee_service.core.exceptions import UpstreamUnavailableException


@dataclass(frozen=True)
class UpstreamResponse:
    """What the Employee API answered, kept byte for byte."""

    status_code: int
    content: bytes
    media_type: str | None = None


class EmployeeApiClient:
    """
    Thin wrapper over ``httpx.AsyncClient`` bound to the Employee API.

    Any transport failure (refused connection, timeout, broken
    response) is raised as ``UpstreamUnavailableException``. Non-2xx
    answers are not errors here; they are returned for relaying.
    """

    def __init__(self, http_client: httpx.AsyncClient, employees_path: str = "api/employees"):
        """
        Args:
            http_client: Client carrying the API base URL and timeout
            employees_path: Employee collection path, relative to the base URL
        """
        self.http_client = http_client
        self.employees_path = employees_path.strip("/")

    @classmethod
    def from_settings(cls, settings: Settings) -> "EmployeeApiClient":
        http_client = httpx.AsyncClient(
            base_url=settings.employee_api_base_url,
            timeout=settings.employee_api_timeout_seconds,
        )
        return cls(http_client, employees_path=f"{settings.api_prefix.strip('/')}/employees")

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def list_employees(self) -> UpstreamResponse:
        return await self._send("GET", self.employees_path)

    async def get_employee(self, employee_id: int) -> UpstreamResponse:
        return await self._send("GET", f"{self.employees_path}/{employee_id}")

    async def create_employee(self, payload: dict[str, Any]) -> UpstreamResponse:
        return await self._send("POST", self.employees_path, json=payload)

    async def update_employee(self, employee_id: int, payload: dict[str, Any]) -> UpstreamResponse:
        return await self._send("PATCH", f"{self.employees_path}/{employee_id}", json=payload)

    async def delete_employee(self, employee_id: int) -> UpstreamResponse:
        return await self._send("DELETE", f"{self.employees_path}/{employee_id}")

    async def is_healthy(self) -> bool:
        """True when the API's health endpoint answers 200."""
        try:
            response = await self.http_client.get("health")
        except httpx.HTTPError:
            return False
        return response.status_code == 200

    async def _send(
        self,
        method: str,
        url: str,
        json: dict[str, Any] | None = None,
    ) -> UpstreamResponse:
        try:
            response = await self.http_client.request(method, url, json=json)
        except httpx.HTTPError as exc:
            raise UpstreamUnavailableException() from exc

        return UpstreamResponse(
            status_code=response.status_code,
            content=response.content,
            media_type=response.headers.get("content-type"),
        )
