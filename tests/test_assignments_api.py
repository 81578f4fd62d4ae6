import pytest


@pytest.fixture()
def seeded(client):
    client.post("/api/employees", json={"name": "Sarah Johnson", "position": "Welder"})
    client.post("/api/equipment", json={"name": "Crane", "make": "Tadano", "model": "GR"})
    client.post("/api/projects", json={"name": "Retrofit", "startDate": "2024-01-01", "endDate": "2024-06-30"})
    return client


def _assign(client, **extra):
    body = {
        "projectId": "PROJ001",
        "resourceId": "EMP001",
        "resourceType": "employee",
        "startDate": "2024-01-01",
        "endDate": "2024-01-31",
    }
    body.update(extra)
    return client.post("/api/assignments", json=body)


def test_create_assignment(seeded):
    resp = _assign(seeded)
    assert resp.status_code == 201
    a = resp.get_json()["data"]
    assert a["id"] == "ASG001"
    assert a["status"] == "active"
    assert a["schedule"] is None

    resp = _assign(seeded, resourceId="EQ001", resourceType="equipment")
    assert resp.get_json()["data"]["id"] == "ASG002"


def test_worker_is_an_alias_for_employee(seeded):
    resp = _assign(seeded, resourceType="worker")
    assert resp.status_code == 201
    assert resp.get_json()["data"]["resourceType"] == "employee"


def test_create_requires_live_project_and_resource(seeded):
    assert _assign(seeded, projectId="PROJ404").status_code == 404
    assert _assign(seeded, resourceId="EQ001").status_code == 404  # EQ001 is not an employee

    seeded.delete("/api/employees/EMP001")
    resp = _assign(seeded)
    assert resp.status_code == 404
    assert resp.get_json()["error"]["code"] == "NOT_FOUND"

    assert _assign(seeded, resourceId="EQ001", resourceType="equipment", endDate="2023-12-01").status_code == 422


def test_list_filters_and_overlap_window(seeded):
    _assign(seeded)
    _assign(seeded, resourceId="EQ001", resourceType="equipment", startDate="2024-03-01", endDate="2024-03-31")

    def ids(qs):
        return [a["id"] for a in seeded.get(f"/api/assignments{qs}").get_json()["data"]]

    assert ids("") == ["ASG001", "ASG002"]
    assert ids("?resourceId=EQ001") == ["ASG002"]
    assert ids("?projectId=PROJ001&status=active") == ["ASG001", "ASG002"]
    assert ids("?startDate=2024-01-31&endDate=2024-02-15") == ["ASG001"]
    assert ids("?startDate=2024-02-01&endDate=2024-02-28") == []
    assert ids("?startDate=2024-03-31&endDate=2024-04-30") == ["ASG002"]
    assert seeded.get("/api/assignments?startDate=soon&endDate=later").status_code == 422


def test_revision_replaces_schedule_and_recomputes_bounds(seeded):
    _assign(seeded)
    schedule = [
        {"startDate": "2024-01-03", "endDate": "2024-01-15"},
        {"startDate": "2024-01-16", "endDate": "2024-01-28", "status": "completed"},
    ]
    resp = seeded.put("/api/assignments", json={"id": "ASG001", "schedule": schedule})
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["startDate"] == "2024-01-03"
    assert data["endDate"] == "2024-01-28"
    assert data["schedule"] == [
        {"startDate": "2024-01-03", "endDate": "2024-01-15", "status": "active"},
        {"startDate": "2024-01-16", "endDate": "2024-01-28", "status": "completed"},
    ]

    stored = seeded.get("/api/assignments/ASG001").get_json()["data"]
    assert stored["startDate"] == "2024-01-03"
    assert stored["schedule"] == data["schedule"]


def test_invalid_revision_leaves_assignment_unchanged(seeded):
    _assign(seeded)
    before = seeded.get("/api/assignments/ASG001").get_json()["data"]

    overlap = [
        {"startDate": "2024-01-01", "endDate": "2024-01-10"},
        {"startDate": "2024-01-10", "endDate": "2024-01-20"},
    ]
    resp = seeded.put("/api/assignments", json={"id": "ASG001", "schedule": overlap})
    assert resp.status_code == 422
    err = resp.get_json()["error"]
    assert err["code"] == "SCHEDULE_INVALID"
    assert err["detail"] == {"index": 2, "kind": "overlap"}
    assert "Range 2" in err["message"]

    outside = [{"startDate": "2024-01-01", "endDate": "2024-02-10"}]
    resp = seeded.put("/api/assignments", json={"id": "ASG001", "schedule": outside})
    assert resp.get_json()["error"]["detail"]["kind"] == "out-of-bounds"

    assert seeded.get("/api/assignments/ASG001").get_json()["data"] == before


def test_revision_body_checks(seeded):
    _assign(seeded)
    assert seeded.put("/api/assignments", json={"id": "ASG001", "schedule": []}).status_code == 422
    resp = seeded.put(
        "/api/assignments",
        json={"id": "ASG404", "schedule": [{"startDate": "2024-01-01", "endDate": "2024-01-02"}]},
    )
    assert resp.status_code == 404
    assert resp.get_json()["error"]["message"] == "Assignment not found"
