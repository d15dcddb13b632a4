"""BFF end to end — BFF forwarding to a real Employee API application.

Invariants:
    - Create → get → delete → get ends in 404 through both tiers
    - API-side rejections (400, 404) reach the caller unchanged
    - A BFF-rejected create leaves the API store untouched
"""


async def test_full_lifecycle_through_bff(bff_client, make_payload, repository):
    payload = make_payload()

    created = await bff_client.post("/bff/employees/create", json={"data": payload})
    assert created.status_code == 201
    employee_id = created.json()["id"]

    fetched = await bff_client.post("/bff/employees/getbyid", json={"id": employee_id})
    assert fetched.status_code == 200
    assert fetched.json() == {"id": employee_id, **payload}

    updated = await bff_client.post(
        "/bff/employees/update",
        json={"id": employee_id, "data": {"salary": 60000}},
    )
    assert updated.status_code == 200
    assert updated.json()["salary"] == 60000.0
    assert updated.json()["firstName"] == payload["firstName"]

    listed = await bff_client.post("/bff/employees/getall")
    assert [e["id"] for e in listed.json()] == [employee_id]

    deleted = await bff_client.post("/bff/employees/delete", json={"id": employee_id})
    assert deleted.status_code == 200
    assert deleted.json() == {"id": employee_id}

    gone = await bff_client.post("/bff/employees/getbyid", json=employee_id)
    assert gone.status_code == 404
    assert await repository.count() == 0


async def test_bff_rejected_create_never_reaches_store(bff_client, make_payload, repository):
    res = await bff_client.post(
        "/bff/employees/create",
        json={"data": make_payload(firstName="123")},
    )
    assert res.status_code == 400
    assert await repository.count() == 0


async def test_api_rejection_is_relayed(bff_client):
    # empty strings pass the BFF's update rules but not the API's
    res = await bff_client.post(
        "/bff/employees/update",
        json={"id": 1, "data": {"department": ""}},
    )
    assert res.status_code == 400
    assert res.json()["detail"] == "Invalid fields provided"


async def test_api_not_found_is_relayed(bff_client):
    res = await bff_client.post("/bff/employees/delete", json=99)
    assert res.status_code == 404
    assert res.json()["detail"] == "Employee with identifier '99' not found"


async def test_ready_when_api_up(bff_client):
    res = await bff_client.get("/ready")
    assert res.json()["status"] == "ready"
