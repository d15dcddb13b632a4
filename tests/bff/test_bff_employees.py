"""BFF Employees — proxy tests against a mocked Employee API.

Invariants:
    - Forwarded calls hit the matching API method and path
    - The API's status code and raw body are relayed byte for byte
    - Invalid create/update payloads get a local 400; the API is never called
    - An unreachable or slow API yields 500 with a fixed message, logged once
    - Any other fault yields a generic 500 that carries no details
"""

import json
from datetime import date, timedelta

import httpx
import pytest

INTERNAL_ERROR = "Internal server error. Please try again later."


class RecordingUpstream:
    """MockTransport handler that records requests and returns a canned answer."""

    def __init__(self, status_code: int = 200, content: bytes = b"[]", raises: Exception | None = None):
        self.status_code = status_code
        self.content = content
        self.raises = raises
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raises is not None:
            raise self.raises
        return httpx.Response(
            self.status_code,
            content=self.content,
            headers={"content-type": "application/json"},
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def create_body(make_payload):
    return {"data": make_payload(firstName="test", lastName="test", email="test@email.com",
                                 phone="1111111", salary=100.0)}


async def test_getall_relays_api_answer(make_bff_client):
    expected = b'[{"id":1,"firstName":"Test"}]'
    upstream = RecordingUpstream(200, expected)
    client = await make_bff_client(upstream.transport)

    res = await client.post("/bff/employees/getall")

    assert res.status_code == 200
    assert res.content == expected
    assert upstream.requests[0].method == "GET"
    assert str(upstream.requests[0].url) == "http://employee-api.test/api/employees"


@pytest.mark.parametrize("body", [{"id": 7}, 7])
async def test_getbyid_accepts_object_or_raw_id(make_bff_client, body):
    upstream = RecordingUpstream(404, b"")
    client = await make_bff_client(upstream.transport)

    res = await client.post("/bff/employees/getbyid", json=body)

    assert res.status_code == 404
    assert upstream.requests[0].method == "GET"
    assert upstream.requests[0].url.path == "/api/employees/7"


async def test_create_invalid_first_name_returns_400_without_calling_api(make_bff_client, create_body):
    upstream = RecordingUpstream(201, b'{"id":1}')
    client = await make_bff_client(upstream.transport)
    create_body["data"]["firstName"] = "123"

    res = await client.post("/bff/employees/create", json=create_body)

    assert res.status_code == 400
    assert res.json()["detail"] == "There were invalid field(s) in create request"
    assert upstream.requests == []


async def test_create_relays_201_body_exactly(make_bff_client, create_body):
    upstream = RecordingUpstream(201, b'{"id":1}')
    client = await make_bff_client(upstream.transport)

    res = await client.post("/bff/employees/create", json=create_body)

    assert res.status_code == 201
    assert res.content == b'{"id":1}'
    sent = upstream.requests[0]
    assert sent.method == "POST"
    assert sent.url.path == "/api/employees"
    assert json.loads(sent.content) == create_body["data"]


async def test_create_when_api_unreachable_returns_500(make_bff_client, create_body):
    upstream = RecordingUpstream(raises=httpx.ConnectError("Connection refused"))
    client = await make_bff_client(upstream.transport)

    res = await client.post("/bff/employees/create", json=create_body)

    assert res.status_code == 500
    assert res.json()["detail"] == INTERNAL_ERROR
    assert "refused" not in res.text


async def test_timeout_is_treated_as_connectivity_failure(make_bff_client):
    upstream = RecordingUpstream(raises=httpx.ReadTimeout("timed out"))
    client = await make_bff_client(upstream.transport)

    res = await client.post("/bff/employees/getall")

    assert res.status_code == 500
    assert res.json()["detail"] == INTERNAL_ERROR


async def test_unexpected_upstream_fault_returns_generic_500(make_bff_client):
    upstream = RecordingUpstream(raises=RuntimeError("secret detail from transport"))
    client = await make_bff_client(upstream.transport, raise_app_exceptions=False)

    res = await client.post("/bff/employees/getall")

    assert res.status_code == 500
    assert res.json() == {"success": False, "detail": INTERNAL_ERROR}
    assert "secret" not in res.text


async def test_unreachable_api_is_logged_once(make_bff_client, create_body, caplog):
    upstream = RecordingUpstream(raises=httpx.ConnectError("Connection refused"))
    client = await make_bff_client(upstream.transport)

    with caplog.at_level("INFO"):
        res = await client.post("/bff/employees/create", json=create_body)

    assert res.status_code == 500
    errors = [r for r in caplog.records if r.levelname == "ERROR"]
    assert len(errors) == 1
    assert errors[0].name == "employee_service.main"


async def test_update_forwards_only_present_fields(make_bff_client):
    upstream = RecordingUpstream(200, b'{"id":3,"salary":80000.0}')
    client = await make_bff_client(upstream.transport)

    res = await client.post(
        "/bff/employees/update",
        json={"id": 3, "data": {"salary": 80000, "firstName": None}},
    )

    assert res.status_code == 200
    assert res.content == b'{"id":3,"salary":80000.0}'
    sent = upstream.requests[0]
    assert sent.method == "PATCH"
    assert sent.url.path == "/api/employees/3"
    assert json.loads(sent.content) == {"salary": 80000.0}


async def test_update_invalid_returns_400_without_calling_api(make_bff_client):
    upstream = RecordingUpstream(200, b"{}")
    client = await make_bff_client(upstream.transport)
    tomorrow = (date.today() + timedelta(days=1)).isoformat()

    res = await client.post(
        "/bff/employees/update",
        json={"id": 3, "data": {"hireDate": tomorrow}},
    )

    assert res.status_code == 400
    assert res.json()["detail"] == "There were invalid field(s) in update request"
    assert upstream.requests == []


async def test_update_empty_strings_pass_bff_rules(make_bff_client):
    upstream = RecordingUpstream(400, b'"Invalid fields provided."')
    client = await make_bff_client(upstream.transport)

    res = await client.post(
        "/bff/employees/update",
        json={"id": 3, "data": {"firstName": ""}},
    )

    # BFF lets it through; the API's answer is relayed as is
    assert len(upstream.requests) == 1
    assert json.loads(upstream.requests[0].content) == {"firstName": ""}
    assert res.status_code == 400
    assert res.content == b'"Invalid fields provided."'


@pytest.mark.parametrize("body", [{"id": 5}, 5])
async def test_delete_forwards_and_relays(make_bff_client, body):
    upstream = RecordingUpstream(200, b'{"id":5}')
    client = await make_bff_client(upstream.transport)

    res = await client.post("/bff/employees/delete", json=body)

    assert res.status_code == 200
    assert res.content == b'{"id":5}'
    assert upstream.requests[0].method == "DELETE"
    assert upstream.requests[0].url.path == "/api/employees/5"


async def test_upstream_server_error_is_relayed_not_rewritten(make_bff_client):
    upstream = RecordingUpstream(500, b'"Internal server error. Please try again later."')
    client = await make_bff_client(upstream.transport)

    res = await client.post("/bff/employees/getall")

    assert res.status_code == 500
    assert res.content == b'"Internal server error. Please try again later."'


async def test_malformed_envelope_returns_400(make_bff_client):
    upstream = RecordingUpstream()
    client = await make_bff_client(upstream.transport)

    res = await client.post("/bff/employees/update", json={"data": {}})

    assert res.status_code == 400
    assert upstream.requests == []


async def test_ready_reports_unreachable_api(make_bff_client):
    upstream = RecordingUpstream(raises=httpx.ConnectError("Connection refused"))
    client = await make_bff_client(upstream.transport)

    res = await client.get("/ready")

    assert res.status_code == 200
    assert res.json()["status"] == "not_ready"


async def test_calls_are_logged(make_bff_client, caplog):
    upstream = RecordingUpstream(200, b"[]")
    client = await make_bff_client(upstream.transport)

    with caplog.at_level("INFO", logger="employee_service.bff.employees_controller"):
        await client.post("/bff/employees/getall")

    assert "API answered 200" in caplog.text
